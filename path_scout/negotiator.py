# File: path_scout/negotiator.py
"""path_scout.negotiator: Предварительная проверка связи с целью.

Перед сканированием выясняется, по какой схеме (HTTP или HTTPS) отвечает
цель, и, если она перенаправляет, у пользователя спрашивают, сканировать ли
новый хост. Фаза строго последовательная и всегда завершается до запуска
воркеров: ответ пользователя может полностью сменить цель.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Tuple

import aiohttp
import click

from path_scout.errors import ConnectivityError
from path_scout.logger import ERROR_LOG_NAME, logger
from path_scout.models import NegotiationOutcome, Target
from path_scout.utils import redirect_target

__all__ = ["Negotiator", "ask"]

_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)

QUESTION = "Do you want to continue the scan on the new target? (y/n): "


def ask(question: str) -> str:
    """Блокирующий вопрос в stdin, пустой ввод допускается."""
    return click.prompt(question, default="", show_default=False, prompt_suffix="")


class Negotiator:
    """Определяет рабочую схему цели и разрешает редиректы через диалог."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        timeout: float = 10.0,
        max_redirects: int = 10,
        prompt: Callable[[str], str] = ask,
        echo: Callable[..., None] = click.echo,
        error_log: Optional[logging.Logger] = None,
    ) -> None:
        self.session = session
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_redirects = max_redirects
        self.prompt = prompt
        self.echo = echo
        self.error_log = error_log or logging.getLogger(ERROR_LOG_NAME)

    async def negotiate(self, target: Target) -> NegotiationOutcome:
        """Возвращает итоговую цель и решение, можно ли начинать сканирование.

        ConnectivityError означает, что цель недоступна по обеим схемам
        (или редиректов слишком много).
        """
        followed = 0
        while True:
            target, status, location = await self.reach(target)
            if not 300 <= status < 400:
                return NegotiationOutcome(target, proceed=True)
            if location is None:
                logger.warning("HTTP %d without Location from %s, keeping target", status, target)
                return NegotiationOutcome(target, proceed=True)

            self.echo("Redirection detected")
            self.echo(f"Original target: {target}")
            self.echo(f"Redirected to: {location}")
            if followed >= self.max_redirects:
                message = f"Too many redirects (more than {self.max_redirects})"
                self.error_log.error("Error : %s", message)
                raise ConnectivityError(message)
            if not await self._confirm():
                return NegotiationOutcome(target, proceed=False)

            try:
                target = Target(redirect_target(target.url, location))
            except ValueError as exc:
                self.error_log.error("Error : Unusable redirect target %r - %s", location, exc)
                raise ConnectivityError(f"Cannot follow redirect to {location!r}") from exc
            followed += 1

    async def reach(self, target: Target) -> Tuple[Target, int, Optional[str]]:
        """Проверяет цель, при сбое один раз пробует другую схему.

        Возвращает цель (возможно со сменённой схемой), статус и Location.
        """
        try:
            status, location = await self._check(target)
        except _TRANSPORT_ERRORS as exc:
            self.echo("Failed")
            self.error_log.error(
                "Error : Connectivity check failed with protocol : %s - %s", target.protocol, exc
            )
            target = target.with_flipped_scheme()
            try:
                status, location = await self._check(target)
            except _TRANSPORT_ERRORS as exc2:
                self.echo("Failed")
                self.error_log.error("Error : Connectivity check failed - %s", exc2)
                raise ConnectivityError(
                    f"No connection could be established with the host - {exc2}"
                ) from exc2
        self.echo("OK")
        return target, status, location

    async def _check(self, target: Target) -> Tuple[int, Optional[str]]:
        self.echo(f"Checking connectivity ({target.protocol})... ", nl=False)
        async with self.session.head(
            target.url, allow_redirects=False, timeout=self.timeout
        ) as response:
            return response.status, response.headers.get("Location")

    async def _confirm(self) -> bool:
        while True:
            # prompt блокирует на stdin, поэтому уходит в поток
            answer = (await asyncio.to_thread(self.prompt, QUESTION)).strip().lower()
            if answer == "y":
                return True
            if answer == "n":
                return False
            self.echo("Invalid choice. Please enter 'y' for yes or 'n' for no.")
