# === FILE: wp_scraper/config.py ===
"""
Модуль для загрузки и валидации конфигурации wp-scraper.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import json
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from wp_scraper.errors import ConfigError


class Target(str, Enum):
    """Что извлекать из найденного узла."""

    TEXT = "text"
    ATTRIBUTE = "attribute"


class FieldSelector(BaseModel):
    """Селектор одного поля статьи (title, url, eyecatch, content)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    css: str = Field(..., min_length=1, description="CSS-селектор внутри записи.")
    target: Target = Field(..., description="text или attribute.")
    additional_css: str = Field("", description="Имя атрибута для target=attribute.")
    regex: str = Field("", description="Регулярное выражение с группой захвата.")

    @model_validator(mode="after")
    def _check_target(self) -> FieldSelector:
        if self.target is Target.ATTRIBUTE and not self.additional_css:
            raise ValueError("target 'attribute' requires additional_css (attribute name)")
        if self.regex:
            try:
                compiled = re.compile(self.regex)
            except re.error as exc:
                raise ValueError(f"invalid regex {self.regex!r}: {exc}") from exc
            if compiled.groups < 1:
                raise ValueError(f"regex {self.regex!r} has no capture group")
        return self

    @property
    def pattern(self) -> Optional[re.Pattern[str]]:
        return re.compile(self.regex) if self.regex else None


class FieldClasses(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    title: FieldSelector
    url: FieldSelector
    eyecatch: FieldSelector
    content: Optional[FieldSelector] = None


class ScraperConfig(BaseModel):
    """Конфигурация одного запуска: источник, категории, селекторы и сервер назначения."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    destination: str = Field("", description="URL сервера назначения.")
    site_name: str = Field("", description="Имя сайта на сервере назначения.")
    auth_username: str = Field("", description="Логин Basic-авторизации.")
    auth_password: str = Field("", description="Пароль Basic-авторизации.")
    base_url: str = Field(..., min_length=1, description="Базовый URL сайта-источника.")
    categories: Dict[str, str] = Field(
        default_factory=dict, description="Путь категории -> отображаемое имя."
    )
    article_selector: str = Field(..., min_length=1, description="Селектор одной записи в списке.")
    classes: FieldClasses
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("WPScraper/1.0", min_length=1, description="Заголовок User-Agent.")

    @field_validator("base_url", "destination", mode="before")
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @field_validator("categories", mode="before")
    def _none_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    def category_url(self, path: str) -> str:
        """Полный URL страницы категории: base_url + '/' + path."""
        return f"{self.base_url}/{path.lstrip('/')}"


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path]) -> ScraperConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScraperConfig.
    Любая ошибка (нет файла, кривой YAML, не проходит схема) -> ConfigError.
    """
    path_obj = Path(path).expanduser()
    if not path_obj.is_file():
        raise ConfigError(f"config file not found: {path_obj}")

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ConfigError(f"unsupported config format: {suffix or path_obj.name}")

    try:
        return ScraperConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"invalid config {path_obj}: {exc}") from exc
