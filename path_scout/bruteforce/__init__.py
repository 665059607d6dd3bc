# File: path_scout/bruteforce/__init__.py
"""path_scout.bruteforce: Параллельный перебор путей из словаря."""

from .collector import ResultCollector
from .partition import partition
from .worker import ProbeWorker

__all__ = ["ProbeWorker", "ResultCollector", "partition"]
