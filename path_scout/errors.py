# File: path_scout/errors.py
"""path_scout.errors: Исключения, прерывающие запуск сканера.

Все они возникают до старта воркеров; сама фаза сканирования
фатальных ошибок не порождает.
"""

from __future__ import annotations

__all__ = ["PathScoutError", "DictionaryError", "ConnectivityError", "ScanAborted"]


class PathScoutError(Exception):
    """Базовое исключение PathScout."""


class DictionaryError(PathScoutError):
    """Словарь не удалось открыть или прочитать."""


class ConnectivityError(PathScoutError):
    """Цель недоступна ни по HTTP, ни по HTTPS (или бесконечные редиректы)."""


class ScanAborted(PathScoutError):
    """Пользователь отказался продолжать сканирование после редиректа."""
