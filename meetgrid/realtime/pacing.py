from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Awaitable
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_QUIESCENCE_SECONDS = 0.12


class SubmissionPacer:
    """Debounce selection changes into at most one submission per quiet window.

    Every ``touch()`` restarts the window; ``submit`` runs once the window
    passes with no further change. ``submit`` reads the selection when it
    runs, so the final state always goes out.
    """

    def __init__(
        self,
        submit: Callable[[], Awaitable[None]],
        *,
        quiescence: float = DEFAULT_QUIESCENCE_SECONDS,
    ) -> None:
        self._submit = submit
        self.quiescence = quiescence
        self._timer: asyncio.TimerHandle | None = None
        self._inflight: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def touch(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.quiescence, self._fire)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        self._timer = None
        task = asyncio.ensure_future(self._run())
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run(self) -> None:
        try:
            await self._submit()
        except Exception:
            logger.exception("Selection submission failed")

    async def flush(self) -> None:
        """Submit a pending change now instead of waiting out the window."""

        if self._timer is not None:
            self.cancel()
            await self._run()
        if self._inflight:
            await asyncio.gather(*self._inflight)
