"""Разбиение словаря между воркерами."""

from typing import List, Sequence


def partition(candidates: Sequence[str], workers: int) -> List[Sequence[str]]:
    """Делит candidates на workers смежных кусков без пропусков и повторов.

    Размер куска равен целочисленному делению, последний воркер забирает остаток.
    Если воркеров больше, чем слов, все куски кроме последнего пустые,
    а последний получает весь словарь.
    """
    size = len(candidates) // workers
    chunks: List[Sequence[str]] = []
    for i in range(workers):
        start = i * size
        end = len(candidates) if i == workers - 1 else (i + 1) * size
        chunks.append(candidates[start:end])
    return chunks
