"""A pausable turn and match timer for one player."""

from __future__ import annotations

import asyncio


class _Notify:
    """A single-permit notification, stored when nobody is waiting."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def notify_one(self) -> None:
        self._event.set()

    async def notified(self, timeout: float | None = None) -> bool:
        """Wait for and consume the permit; return False on timeout."""
        if not self._event.is_set():
            try:
                await asyncio.wait_for(self._event.wait(), timeout=timeout)
            except TimeoutError:
                return False
        self._event.clear()
        return True


class Timer:
    """Tracks a player's turn time and match time, in seconds.

    The turn limit restarts whenever the timer resumes; the match limit is
    reduced by the time recorded at the last pause. Running out of either
    makes :meth:`run` return.
    """

    def __init__(self, turn_duration: float, match_duration: float) -> None:
        self.turn_duration = turn_duration
        self.match_duration = match_duration
        self._elapsed = 0.0
        self._pause = _Notify()
        self._resume = _Notify()

    async def run(self, start_paused: bool = False) -> None:
        """Run until the turn or match time runs out."""
        if start_paused:
            self.pause()
        loop = asyncio.get_running_loop()
        while True:
            start = loop.time()
            limit = max(0.0, min(self.turn_duration, self.remaining()))
            if not await self._pause.notified(timeout=limit):
                return
            self._elapsed = loop.time() - start
            await self._resume.notified()

    def pause(self) -> None:
        """Ask the running timer to pause."""
        self._pause.notify_one()

    def resume(self) -> None:
        """Ask the paused timer to resume."""
        self._resume.notify_one()

    def reset(self) -> None:
        """Set the recorded elapsed time back to zero."""
        self._elapsed = 0.0

    def remaining(self) -> float:
        """Return the match time left, never below zero."""
        return max(0.0, self.match_duration - self._elapsed)