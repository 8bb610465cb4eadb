"""Wall-clock helpers that feed whole-second ticks into the engine's countdown."""

import time


def format_time(seconds):
    """Render remaining seconds as MM:SS."""
    seconds = max(int(seconds), 0)
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


class TickSource:
    """
    Converts elapsed time into a count of due ticks for one owner.

    The engine never schedules anything itself; an adapter polls due() from
    its event loop and forwards that many ticks. start() resets the phase so a
    new turn always gets a full first interval.
    """

    def __init__(self, now=time.monotonic, interval=1.0):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.now = now
        self.interval = interval
        self.owner = None
        self._last = None

    @property
    def running(self):
        return self._last is not None

    def start(self, owner):
        self.owner = owner
        self._last = self.now()

    def cancel(self):
        self.owner = None
        self._last = None

    def due(self):
        """Whole intervals elapsed since the last call; the remainder carries over."""
        if self._last is None:
            return 0
        elapsed = self.now() - self._last
        count = int(elapsed // self.interval)
        if count > 0:
            self._last += count * self.interval
        return count


def pump_ticks(game, ticker):
    """Sync ticker with the game status and forward due ticks. Returns how many landed."""
    status = game.status()
    if not status.is_in_progress:
        ticker.cancel()
        return 0
    if not ticker.running or ticker.owner != status.active:
        ticker.start(status.active)
        return 0

    landed = 0
    for _ in range(ticker.due()):
        if not game.tick(ticker.owner):
            break
        landed += 1
        if not game.status().is_in_progress:
            break
    if not game.status().is_in_progress:
        ticker.cancel()
    return landed
