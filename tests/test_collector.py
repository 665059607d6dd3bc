# File: tests/test_collector.py
import asyncio
import time

import pytest
from path_scout.bruteforce.collector import ResultCollector
from path_scout.bruteforce.partition import partition
from path_scout.bruteforce.worker import ProbeWorker
from path_scout.models import ProbeResult, Target

WORDS = [f"p{i}" for i in range(25)]


@pytest.fixture()
def fake_probe(monkeypatch):
    """Replace network access with an instant 200, yielding to the loop once."""

    async def probe(self, candidate):
        await asyncio.sleep(0)
        if candidate == "boom":
            raise RuntimeError("worker crashed")
        return ProbeResult(self.target.join(candidate), 200)

    monkeypatch.setattr(ProbeWorker, "probe", probe)


@pytest.mark.asyncio()
@pytest.mark.parametrize("workers", [1, 3, 7, 25, 40])
async def test_every_candidate_delivered_once(fake_probe, workers):
    seen = []
    collector = ResultCollector(None, Target("http://example.com/"), workers=workers)

    delivered = await collector.collect(WORDS, seen.append)

    assert delivered == len(WORDS)
    assert sorted(r.url for r in seen) == sorted(f"http://example.com/{w}" for w in WORDS)


@pytest.mark.asyncio()
async def test_order_kept_within_each_chunk(fake_probe):
    seen = []
    workers = 4
    await ResultCollector(None, Target("http://h/"), workers=workers).collect(WORDS, seen.append)

    arrival = [r.url.removeprefix("http://h/") for r in seen]
    for chunk in partition(WORDS, workers):
        positions = [arrival.index(w) for w in chunk]
        assert positions == sorted(positions)


@pytest.mark.asyncio()
async def test_empty_dictionary_completes(fake_probe):
    seen = []
    delivered = await ResultCollector(None, Target("http://h/"), workers=3).collect([], seen.append)
    assert delivered == 0
    assert seen == []


@pytest.mark.asyncio()
async def test_worker_crash_closes_stream(fake_probe):
    seen = []
    collector = ResultCollector(None, Target("http://h/"), workers=2)

    with pytest.raises(RuntimeError, match="worker crashed"):
        await asyncio.wait_for(collector.collect(["a", "boom", "c", "d"], seen.append), timeout=5)


@pytest.mark.asyncio()
async def test_stream_yields_results(fake_probe):
    collector = ResultCollector(None, Target("http://h/"), workers=2)
    urls = [r.url async for r in collector.stream(["a", "b", "c"])]
    assert sorted(urls) == ["http://h/a", "http://h/b", "http://h/c"]


@pytest.mark.asyncio()
async def test_workers_run_concurrently(session, status_server):
    """Четыре медленных запроса на четырёх воркерах укладываются в один таймаут."""
    seen = []
    collector = ResultCollector(session, Target(f"{status_server}/"), workers=4, timeout=0.3)

    start = time.perf_counter()
    await collector.collect(["slow"] * 4, seen.append)
    elapsed = time.perf_counter() - start

    assert len(seen) == 4
    assert elapsed < 0.3 * 3


@pytest.mark.asyncio()
async def test_mixed_results_from_server(session, status_server):
    seen = []
    collector = ResultCollector(session, Target(f"{status_server}/"), workers=3, timeout=2.0)

    await collector.collect(["admin", "secret", "nothing", "old"], seen.append)

    assert {r.url.rsplit("/", 1)[1]: r.status for r in seen} == {
        "admin": 200,
        "secret": 403,
        "nothing": 404,
        "old": 410,
    }
