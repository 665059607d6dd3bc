# === FILE: path_scout/scanner.py ===
"""
Модуль-обёртка для функции запуска сканирования.
"""
from typing import Any

from path_scout.aggregator import ScanReport
from path_scout.engine import Engine


async def start_scan(cfg, **engine_kwargs: Any) -> ScanReport:
    """
    Открывает Engine в контексте, выполняет один запуск и возвращает отчёт.

    Parameters
    ----------
    cfg : ScannerConfig
        Конфигурация сканирования.
    **engine_kwargs
        echo, prompt, error_log, sink, keep_results: см. Engine.

    Returns
    -------
    ScanReport
        Все результаты в порядке поступления и сводка по статусам.
    """
    async with Engine(cfg, **engine_kwargs) as engine:
        return await engine.run()

__all__ = ["start_scan"]
