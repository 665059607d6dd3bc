# === FILE: path_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации сканера PathScout.
Используется Pydantic для описания схемы и проверки данных.

Источники значений (по возрастанию приоритета): значения по умолчанию,
YAML/JSON-файл конфигурации, опции командной строки.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from path_scout import __version__
from path_scout.display import DisplayMode


class ScannerConfig(BaseModel):
    """Конфигурация для одного запуска сканирования."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = Field(..., description="Базовый URL, к которому дописываются пути из словаря.")
    dictionary: Path = Field(..., description="Путь к файлу словаря.")
    workers: int = Field(1, ge=1, description="Число параллельных воркеров.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    quiet: bool = Field(False, description="Печатать только URL с кодом 200.")
    show_all: bool = Field(False, description="Печатать все результаты, включая не-200.")
    log_results: bool = Field(False, description="Дописывать каждый результат в журнал сканирования.")
    scan_log: Path = Field(Path("scan.log"), description="Файл журнала сканирования.")
    user_agent: str = Field(
        f"PathScout/{__version__}", min_length=1, description="Заголовок User-Agent."
    )
    max_redirects: int = Field(10, ge=0, description="Сколько редиректов можно принять при проверке связи.")

    @field_validator("target")
    @classmethod
    def _check_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("The target must begin with 'http://' or 'https://'.")
        return v

    @property
    def display_mode(self) -> DisplayMode:
        """Режим вывода результатов: quiet важнее show_all."""
        if self.quiet:
            return DisplayMode.QUIET
        if self.show_all:
            return DisplayMode.ALL
        return DisplayMode.FOUND


_DEFAULT_CFG = Path("configs/path_scout.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config_data(path: Union[str, Path, None]) -> Dict[str, Any]:
    """
    Читает YAML или JSON и возвращает сырой mapping без валидации.

    Без явного пути берётся configs/path_scout.yaml, а если его нет,
    возвращается пустой словарь. Явно указанный, но отсутствующий файл
    даёт FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return {}
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> ScannerConfig:
    """
    Возвращает проверенный ScannerConfig: данные файла, поверх которых
    накладываются overrides со значением не None.

    Ошибки схемы поднимаются как pydantic.ValidationError.
    """
    data = load_config_data(path)
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ScannerConfig(**data)


__all__ = ["ScannerConfig", "load_config", "load_config_data", "ValidationError"]
