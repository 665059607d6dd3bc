"""Воркер перебора: проверяет свой кусок словаря и отдаёт результаты в общий поток."""

import asyncio
from typing import Awaitable, Callable, Sequence

import aiohttp
from yarl import URL

from path_scout.logger import logger
from path_scout.models import NOT_FOUND, ProbeResult, Target

Emit = Callable[[ProbeResult], Awaitable[None]]


class ProbeWorker:
    """Последовательно запрашивает URL своего куска и публикует ProbeResult на каждый."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        target: Target,
        emit: Emit,
        timeout: float = 10.0,
    ) -> None:
        """Инициализирует воркер с общей сессией, целью и функцией публикации."""
        self.session = session
        self.target = target
        self.emit = emit
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def probe(self, candidate: str) -> ProbeResult:
        """GET одного кандидата. Ошибка транспорта превращается в NOT_FOUND."""
        url = self.target.join(candidate)
        try:
            # encoded=True: путь уходит как есть, без нормализации и экранирования
            async with self.session.get(URL(url, encoded=True), timeout=self.timeout) as response:
                # тело не читаем: выход из контекста освобождает соединение
                return ProbeResult(url, response.status)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            logger.debug("Probe failed for %s: %r", url, exc)
            return ProbeResult(url, NOT_FOUND, error=repr(exc))

    async def run(self, chunk: Sequence[str]) -> int:
        """Проходит кусок по порядку и возвращает число опубликованных результатов."""
        for candidate in chunk:
            await self.emit(await self.probe(candidate))
        return len(chunk)
