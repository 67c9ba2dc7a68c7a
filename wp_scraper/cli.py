# === FILE: wp_scraper/cli.py ===
#!/usr/bin/env python3
"""
Точка входа wp-scraper для командной строки.

  wp-scraper [-l INT] [-v] [-b|-t] [--json PATH] [--pretty] [--log-file PATH] CONFIG_FILE

Опции:
  -l, --limit INT     Макс. число статей на категорию (отрицательное = без лимита)
  -v, --verbose       Писать ход работы в stdout
  -b, -t, --test      Тестовый режим: скрапинг без отправки на сервер
  --json PATH         Сохранить результат в JSON-файл вместо вывода в stdout
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --log-file PATH     Дополнительно писать логи в файл
  --version           Показать версию

Любая ошибка печатается в stdout, код возврата 1.

Пример:
  wp-scraper -v -l 10 configs/site.yaml
"""
import asyncio
import sys
from pathlib import Path

import click

from wp_scraper import __version__
from wp_scraper.config import load_config
from wp_scraper.engine import scrape
from wp_scraper.errors import ScraperError
from wp_scraper.logger import init_logging
from wp_scraper.report.json_report import render_json
from wp_scraper.sync import send_to_server

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])
RETURN_CODE_FAIL = 1


def exit_with_error(message: str):
    click.echo(message)
    sys.exit(RETURN_CODE_FAIL)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', message='wp-scraper, version %(version)s')
@click.option(
    '--limit', '-l', 'limit',
    type=int,
    default=-1,
    show_default=True,
    help='Acquire up to this many articles per category (negative = no limit)'
)
@click.option('--verbose', '-v', is_flag=True, help='Make the operation more talkative')
@click.option('--test', '-b', '-t', 'test_mode', is_flag=True, help='Enable test mode (skip sending to the server)')
@click.option(
    '--json', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save scraped data to a JSON file'
)
@click.option('--pretty', is_flag=True, help='Pretty-print JSON output (indent 2)')
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also write logs to this file'
)
@click.argument('config_file', required=False)
def cli(limit, verbose, test_mode, json_output, pretty, log_file, config_file):
    """Scrape article listings described by CONFIG_FILE and publish them."""
    try:
        init_logging(level='INFO' if verbose else 'WARNING', log_file=log_file)
    except OSError as e:
        exit_with_error(f'cannot open log file: {e}')

    if not config_file:
        exit_with_error('specify config file')
    if verbose:
        click.echo(f'loading config file {config_file} ...')

    try:
        cfg = load_config(config_file)
    except ScraperError as e:
        exit_with_error(str(e))

    try:
        outcome = asyncio.run(scrape(cfg, limit))
    except ScraperError as e:
        exit_with_error(str(e))

    if json_output:
        try:
            saved = render_json(outcome, json_output)
        except OSError as e:
            exit_with_error(f'cannot save JSON: {e}')
        click.echo(f'JSON saved: {saved}')
    else:
        click.echo(outcome.json(pretty=pretty))

    if test_mode:
        click.echo('Quit because test mode is enabled')
        return

    try:
        confirmation = asyncio.run(send_to_server(outcome, cfg))
    except ScraperError as e:
        exit_with_error(str(e))
    click.echo(f'Sent to {confirmation}')


def main():
    cli()


if __name__ == "__main__":
    main()
