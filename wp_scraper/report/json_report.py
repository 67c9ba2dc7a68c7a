# wp_scraper/report/json_report.py

"""
Сохранение результата скрапинга (ScrapeOutcome) в JSON-файл.
"""
import json
from pathlib import Path

from wp_scraper.models import ScrapeOutcome


def render_json(outcome: ScrapeOutcome, output_path: Path | str) -> Path:
    """
    Сохраняет outcome в формате JSON по указанному пути.

    :param outcome: результат Engine.scrape
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(outcome.to_dict(), f, ensure_ascii=False, indent=2)

    return output
