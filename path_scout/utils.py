# File: path_scout/utils.py
"""path_scout.utils: Утилиты для работы со словарями путей и URL редиректов."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union
from urllib.parse import urljoin, urlsplit

from path_scout.errors import DictionaryError
from path_scout.logger import logger

__all__: Sequence[str] = (
    "read_wordlist",
    "redirect_target",
)


def read_wordlist(path: Union[str, Path], error_log: Optional[logging.Logger] = None) -> List[str]:
    """Читает словарь, возвращает непустые строки без пробелов по краям.

    Любая ошибка открытия или чтения фатальна: она пишется в журнал ошибок
    и поднимается как DictionaryError.
    """
    p = Path(path)
    try:
        with p.open(encoding="utf-8") as fh:
            words = [stripped for stripped in (line.strip() for line in fh) if stripped]
    except (OSError, UnicodeDecodeError) as exc:
        message = f"Something went wrong when reading the dictionary file - {exc}"
        if error_log is not None:
            error_log.error("Error : %s", message)
        raise DictionaryError(message) from exc
    logger.debug("Loaded %d entries from wordlist %s", len(words), p)
    return words


def redirect_target(current: str, location: str) -> str:
    """Возвращает новую базу сканирования по значению заголовка Location.

    Абсолютный http(s)-URL сворачивается до scheme://host, путь отбрасывается.
    Иначе используется сам Location, разрешённый относительно текущей цели.
    """
    parts = urlsplit(location)
    if parts.scheme in ("http", "https") and parts.netloc:
        return f"{parts.scheme}://{parts.netloc}"
    return urljoin(current, location)
