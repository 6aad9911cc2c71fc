"""Cosmetic progress reporting for a running generation."""

import asyncio
from collections.abc import AsyncGenerator, Awaitable
from dataclasses import dataclass
from typing import Any

from app.constants.pipeline_defaults import PROGRESS_STEPS


@dataclass
class ProgressUpdate:
    """One tick of the progress indicator."""

    step: str
    progress: float
    done: bool = False
    result: Any = None


class ProgressPresenter:
    """
    Walks through step labels on a fixed timer while a call is pending.

    The labels are not tied to the pipeline's real stage. Progress is capped
    below 100 until the awaited call resolves; only then is a final update
    with ``progress=100`` and the call's result emitted.
    """

    def __init__(
        self,
        steps: list[str] | None = None,
        interval_seconds: float = 1.5,
        complete_label: str = "Complete",
    ) -> None:
        self.steps = list(steps if steps is not None else PROGRESS_STEPS)
        self.interval_seconds = interval_seconds
        self.complete_label = complete_label
        # Calls keep running if the listener goes away; hold them until they finish
        self._pending: set[asyncio.Future[Any]] = set()

    def progress_for(self, index: int) -> float:
        """Percentage shown while the label at ``index`` is displayed."""
        return round((index + 1) / (len(self.steps) + 1) * 100, 1)

    async def track(self, call: Awaitable[Any]) -> AsyncGenerator[ProgressUpdate, None]:
        """Yield timed updates until ``call`` resolves, then a final one."""
        future = asyncio.ensure_future(call)
        self._pending.add(future)
        future.add_done_callback(self._pending.discard)

        index = 0
        while True:
            if index < len(self.steps):
                yield ProgressUpdate(step=self.steps[index], progress=self.progress_for(index))
                index += 1

            done, _ = await asyncio.wait({future}, timeout=self.interval_seconds)
            if done:
                break

        yield ProgressUpdate(
            step=self.complete_label,
            progress=100.0,
            done=True,
            result=future.result(),
        )
