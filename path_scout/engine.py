# File: path_scout/engine.py
"""path_scout.engine: Orchestration layer для одного запуска сканирования.

Порядок: журнал результатов → словарь → проверка связи → баннер →
параллельный перебор → итоговый отчёт. Все фатальные ошибки возникают
до запуска воркеров.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import click
from aiohttp import ClientSession, TCPConnector

from path_scout.aggregator import ScanReport
from path_scout.bruteforce import ResultCollector
from path_scout.config import ScannerConfig
from path_scout.display import ResultPrinter
from path_scout.errors import PathScoutError, ScanAborted
from path_scout.logger import ERROR_LOG_NAME, logger, scan_logger
from path_scout.models import ProbeResult, Target
from path_scout.negotiator import Negotiator, ask
from path_scout.utils import read_wordlist

__all__ = ["Engine"]


class Engine:
    """Фасад для CLI и тестов: проверка связи, запуск перебора и агрегация результатов."""

    def __init__(
        self,
        config: ScannerConfig,
        *,
        echo: Callable[..., None] = click.echo,
        prompt: Callable[[str], str] = ask,
        error_log: Optional[logging.Logger] = None,
        sink: Optional[Callable[[ProbeResult], None]] = None,
        keep_results: bool = True,
    ) -> None:
        """Инициализирует Engine; sink по умолчанию печатает по режиму из конфига.

        keep_results=False оставляет в отчёте только счётчики.
        """
        self.config = config
        self.echo = echo
        self.prompt = prompt
        self.error_log = error_log or logging.getLogger(ERROR_LOG_NAME)
        self.sink = sink
        self.keep_results = keep_results
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> Engine:
        self.session = ClientSession(
            headers={"User-Agent": self.config.user_agent},
            connector=TCPConnector(limit=max(100, self.config.workers)),
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def run(self) -> ScanReport:
        """Выполняет полный запуск и возвращает ScanReport.

        Raises:
            DictionaryError: словарь не читается.
            ConnectivityError: цель недоступна.
            ScanAborted: пользователь отказался идти по редиректу.
            PathScoutError: не открывается журнал результатов.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        cfg = self.config
        sink = self.sink or self._default_sink()
        candidates = read_wordlist(cfg.dictionary, self.error_log)

        outcome = await Negotiator(
            self.session,
            timeout=cfg.timeout,
            max_redirects=cfg.max_redirects,
            prompt=self.prompt,
            echo=self.echo,
            error_log=self.error_log,
        ).negotiate(Target(cfg.target))
        if not outcome.proceed:
            raise ScanAborted("Scan aborted by user.")
        target = outcome.target

        self.echo("---")
        self.echo(f"Target: {target}")
        self.echo(f"List: {cfg.dictionary}")
        self.echo(f"Dictionary Size: {len(candidates)}")
        self.echo(f"Workers: {cfg.workers}")
        self.echo("---")
        self.echo("Starting scan...")
        logger.info("Scanning %s with %d workers", target, cfg.workers)

        report = ScanReport(
            target=str(target),
            dictionary=str(cfg.dictionary),
            workers=cfg.workers,
            keep_results=self.keep_results,
        )

        def _dispatch(result: ProbeResult) -> None:
            report.add(result)
            sink(result)

        start = time.monotonic()
        collector = ResultCollector(self.session, target, workers=cfg.workers, timeout=cfg.timeout)
        delivered = await collector.collect(candidates, _dispatch)
        duration = time.monotonic() - start
        report.duration = duration

        self.echo(f"Scan done in {duration:f}s")
        logger.info("Scan finished: %d results in %.2f s", delivered, duration)
        return report

    def _default_sink(self) -> ResultPrinter:
        journal = None
        if self.config.log_results:
            try:
                journal = scan_logger(self.config.scan_log)
            except OSError as exc:
                message = f"Something went wrong when opening {self.config.scan_log} file - {exc}"
                self.error_log.error("Error : %s", message)
                raise PathScoutError(message) from exc
        return ResultPrinter(self.config.display_mode, self.echo, journal)
