"""Tests for the cosmetic progress presenter."""

import asyncio

from app.constants.pipeline_defaults import PROGRESS_STEPS
from app.services.progress import ProgressPresenter, ProgressUpdate


async def collect(presenter: ProgressPresenter, call) -> list[ProgressUpdate]:
    return [update async for update in presenter.track(call)]


class TestProgressPresenter:
    """Timer-driven updates."""

    def test_walks_all_steps_for_a_slow_call(self) -> None:
        presenter = ProgressPresenter(interval_seconds=0.01)

        async def slow() -> str:
            await asyncio.sleep(0.2)
            return "ok"

        updates = asyncio.run(collect(presenter, slow()))

        assert [u.step for u in updates[:-1]] == PROGRESS_STEPS
        assert all(u.progress < 100 and not u.done for u in updates[:-1])
        assert [u.progress for u in updates[:-1]] == sorted(u.progress for u in updates[:-1])

        final = updates[-1]
        assert final.done
        assert final.progress == 100
        assert final.result == "ok"

    def test_fast_call_finishes_early(self) -> None:
        presenter = ProgressPresenter(steps=["one", "two", "three"], interval_seconds=1)

        async def fast() -> int:
            return 42

        updates = asyncio.run(collect(presenter, fast()))

        assert [u.step for u in updates] == ["one", "Complete"]
        assert updates[-1].result == 42

    def test_never_reports_completion_while_pending(self) -> None:
        presenter = ProgressPresenter(steps=["a", "b"], interval_seconds=0.01)
        seen: list[tuple[float, bool]] = []

        async def scenario() -> None:
            gate = asyncio.Event()

            async def gated() -> str:
                await gate.wait()
                return "released"

            async def release_later() -> None:
                await asyncio.sleep(0.1)
                gate.set()

            releaser = asyncio.create_task(release_later())
            async for update in presenter.track(gated()):
                seen.append((update.progress, gate.is_set()))
            await releaser

        asyncio.run(scenario())

        for progress, released in seen[:-1]:
            assert progress < 100
        assert seen[-1] == (100.0, True)

    def test_progress_scale(self) -> None:
        presenter = ProgressPresenter(steps=["a", "b", "c", "d"])

        assert presenter.progress_for(0) == 20.0
        assert presenter.progress_for(3) == 80.0
