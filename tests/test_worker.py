# File: tests/test_worker.py
"""Проверки ProbeWorker против локального aiohttp-сервера."""
from typing import List

import pytest
from aiohttp import web
from conftest import serve
from path_scout.bruteforce.worker import ProbeWorker
from path_scout.models import NOT_FOUND, ProbeResult, Target


def collecting() -> tuple:
    results: List[ProbeResult] = []

    async def emit(result: ProbeResult) -> None:
        results.append(result)

    return results, emit


@pytest.mark.asyncio()
async def test_real_status_is_reported(session, status_server):
    results, emit = collecting()
    worker = ProbeWorker(session, Target(f"{status_server}/"), emit, timeout=2.0)

    count = await worker.run(["admin", "secret", "old", "boom", "nothing"])

    assert count == 5
    assert [(r.url, r.status) for r in results] == [
        (f"{status_server}/admin", 200),
        (f"{status_server}/secret", 403),
        (f"{status_server}/old", 410),
        (f"{status_server}/boom", 500),
        (f"{status_server}/nothing", 404),
    ]
    assert not any(r.transport_failed for r in results)


@pytest.mark.asyncio()
async def test_candidate_appended_verbatim(session, status_server):
    results, emit = collecting()
    worker = ProbeWorker(session, Target(status_server), emit, timeout=2.0)

    await worker.run(["/admin"])

    assert results == [ProbeResult(f"{status_server}/admin", 200)]


@pytest.mark.asyncio()
async def test_refused_connection_becomes_sentinel(session, closed_url):
    results, emit = collecting()
    worker = ProbeWorker(session, Target(f"{closed_url}/"), emit, timeout=2.0)

    await worker.run(["admin", "secret"])

    assert [r.status for r in results] == [NOT_FOUND, NOT_FOUND]
    assert all(r.transport_failed for r in results)
    assert [r.url for r in results] == [f"{closed_url}/admin", f"{closed_url}/secret"]


@pytest.mark.asyncio()
async def test_timeout_becomes_sentinel(session, status_server):
    results, emit = collecting()
    worker = ProbeWorker(session, Target(f"{status_server}/"), emit, timeout=0.2)

    await worker.run(["slow", "admin"])

    assert results[0].status == NOT_FOUND
    assert results[0].transport_failed
    # soft failure does not stop the chunk
    assert results[1] == ProbeResult(f"{status_server}/admin", 200)


@pytest.mark.asyncio()
async def test_empty_chunk_emits_nothing(session, status_server):
    results, emit = collecting()
    assert await ProbeWorker(session, Target(status_server), emit).run([]) == 0
    assert results == []


@pytest.mark.asyncio()
@pytest.mark.parametrize("candidate", ["a/../admin", "./admin", "%2e%2e/admin", "x%2Fy"])
async def test_path_sent_without_normalization(session, candidate):
    app = web.Application()
    seen: List[str] = []

    async def record(request):
        seen.append(request.raw_path)
        return web.Response(status=200 if request.raw_path == "/admin" else 404)

    app.router.add_route("GET", "/{tail:.*}", record)
    results, emit = collecting()
    async with serve(app) as base:
        await ProbeWorker(session, Target(f"{base}/"), emit, timeout=2.0).run([candidate])

    assert seen == [f"/{candidate}"]
    # статус относится именно к запрошенному пути, а не к /admin
    assert results == [ProbeResult(f"{base}/{candidate}", 404)]
