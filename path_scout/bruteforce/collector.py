"""Сборщик результатов: запускает воркеров и сливает их вывод в один поток."""

import asyncio
from contextlib import aclosing
from typing import AsyncIterator, Callable, List, Sequence

import aiohttp

from path_scout.bruteforce.partition import partition
from path_scout.bruteforce.worker import ProbeWorker
from path_scout.logger import logger
from path_scout.models import ProbeResult, Target

_DONE = object()


class ResultCollector:
    """Пул из фиксированного числа воркеров с общим каналом результатов."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        target: Target,
        workers: int = 1,
        timeout: float = 10.0,
    ) -> None:
        self.session = session
        self.target = target
        self.workers = workers
        self.timeout = timeout

    async def stream(self, candidates: Sequence[str]) -> AsyncIterator[ProbeResult]:
        """Отдаёт результаты в порядке поступления, пока не завершатся все воркеры.

        Внутри одного куска порядок совпадает с порядком словаря, между
        воркерами порядок не гарантируется. Канал закрывается только после
        того, как вернулись все воркеры.
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.workers)
        chunks = partition(candidates, self.workers)
        logger.debug("Chunk sizes: %s", [len(c) for c in chunks])
        tasks: List[asyncio.Task] = [
            asyncio.create_task(
                ProbeWorker(self.session, self.target, queue.put, self.timeout).run(chunk),
                name=f"probe-worker-{i}",
            )
            for i, chunk in enumerate(chunks)
        ]

        async def _close_when_done() -> None:
            try:
                await asyncio.gather(*tasks)
            finally:
                await queue.put(_DONE)

        closer = asyncio.create_task(_close_when_done())
        try:
            while True:
                item = await queue.get()
                if item is _DONE:
                    break
                yield item
            # пробрасываем исключение упавшего воркера, если было
            await closer
        finally:
            pending = [t for t in (*tasks, closer) if not t.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

    async def collect(self, candidates: Sequence[str], sink: Callable[[ProbeResult], None]) -> int:
        """Передаёт каждый результат в sink и возвращает их количество."""
        delivered = 0
        async with aclosing(self.stream(candidates)) as results:
            async for result in results:
                sink(result)
                delivered += 1
        return delivered
