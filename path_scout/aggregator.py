# File: path_scout/aggregator.py
"""path_scout.aggregator: Модуль агрегатора результатов сканирования."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, TypedDict

from path_scout.models import ProbeResult


class ResultInfo(TypedDict, total=False):
    """Один результат в сериализуемом виде."""

    url: str
    status: int
    error: Optional[str]


@dataclass(slots=True)
class ScanReport:
    """Итог одного запуска: параметры, счётчики и (по запросу) сами результаты.

    Счётчики ведутся всегда, список results заполняется только при
    keep_results, чтобы память не росла вместе со словарём.
    """

    target: str
    dictionary: str = ""
    workers: int = 1
    duration: float = 0.0
    keep_results: bool = True
    results: List[ProbeResult] = field(default_factory=list)
    total: int = 0
    transport_failures: int = 0
    counts: Counter = field(default_factory=Counter)

    def add(self, result: ProbeResult) -> None:
        """Учитывает один результат."""
        self.total += 1
        self.counts[result.status] += 1
        if result.transport_failed:
            self.transport_failures += 1
        if self.keep_results:
            self.results.append(result)

    @property
    def found(self) -> List[ProbeResult]:
        """Результаты со статусом 200 (пусто, если список не сохранялся)."""
        return [r for r in self.results if r.status == 200]

    @property
    def status_counts(self) -> Dict[int, int]:
        return dict(sorted(self.counts.items()))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "dictionary": self.dictionary,
            "workers": self.workers,
            "duration": round(self.duration, 6),
            "total": self.total,
            "status_counts": {str(k): v for k, v in self.status_counts.items()},
            "transport_failures": self.transport_failures,
            "found": [r.url for r in self.found],
            "results": [_result_info(r) for r in self.results],
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление ScanReport."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _result_info(result: ProbeResult) -> ResultInfo:
    return {"url": result.url, "status": result.status, "error": result.error}


def aggregate_results(
    results: Iterable[ProbeResult],
    *,
    target: str,
    dictionary: str = "",
    workers: int = 1,
    duration: float = 0.0,
) -> ScanReport:
    """Собирает результаты в ScanReport, сохраняя порядок поступления."""
    report = ScanReport(target=target, dictionary=dictionary, workers=workers, duration=duration)
    for result in results:
        report.add(result)
    return report
