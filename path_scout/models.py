# path_scout/models.py
"""
Data models shared by the negotiator, the probe workers and the reports.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional

__all__ = ["NOT_FOUND", "Target", "ProbeResult", "NegotiationOutcome"]

#: status reported for a candidate whose request failed at the transport layer
NOT_FOUND: Final[int] = 404

_HTTP: Final[str] = "http://"
_HTTPS: Final[str] = "https://"


@dataclass(frozen=True, slots=True)
class Target:
    """Base URL every candidate is appended to."""

    url: str

    def __post_init__(self) -> None:
        if not self.url.startswith((_HTTP, _HTTPS)):
            raise ValueError(f"Target must begin with 'http://' or 'https://': {self.url!r}")

    @property
    def protocol(self) -> str:
        return "HTTPS" if self.url.startswith(_HTTPS) else "HTTP"

    def with_flipped_scheme(self) -> Target:
        """Return the same target under the other scheme (http <-> https)."""
        if self.protocol == "HTTPS":
            return Target(self.url.replace(_HTTPS, _HTTP, 1))
        return Target(self.url.replace(_HTTP, _HTTPS, 1))

    def join(self, candidate: str) -> str:
        # verbatim: dictionary entries are trusted as-is
        return f"{self.url}{candidate}"

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Outcome of probing one candidate URL."""

    url: str
    status: int
    error: Optional[str] = None

    @property
    def transport_failed(self) -> bool:
        """True when no HTTP response was received and ``status`` is the sentinel."""
        return self.error is not None


@dataclass(frozen=True, slots=True)
class NegotiationOutcome:
    """Resolved target plus the decision whether the scan may start."""

    target: Target
    proceed: bool
