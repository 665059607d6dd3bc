# File: tests/test_partition.py
import pytest
from path_scout.bruteforce.partition import partition


@pytest.mark.parametrize("length", [0, 1, 2, 7, 10, 33])
@pytest.mark.parametrize("workers", [1, 2, 3, 4, 10, 50])
def test_chunks_rebuild_sequence(length, workers):
    words = [f"w{i}" for i in range(length)]
    chunks = partition(words, workers)

    assert len(chunks) == workers
    assert [w for chunk in chunks for w in chunk] == words


def test_last_chunk_absorbs_remainder():
    chunks = partition(list("abcdefghij"), 3)
    assert [list(c) for c in chunks] == [["a", "b", "c"], ["d", "e", "f"], ["g", "h", "i", "j"]]


def test_more_workers_than_words_skews_to_last():
    words = ["a", "b", "c"]
    chunks = partition(words, 5)

    assert [len(c) for c in chunks] == [0, 0, 0, 0, 3]
    assert list(chunks[-1]) == words


def test_single_worker_gets_everything():
    words = ["x", "y"]
    assert [list(c) for c in partition(words, 1)] == [words]
