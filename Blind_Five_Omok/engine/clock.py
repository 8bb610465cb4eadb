"""Per-player countdown clocks. Whoever feeds tick() decides how long a unit is."""

DEFAULT_START_SECONDS = 180


class CountdownClock:
    def __init__(self, start_seconds=DEFAULT_START_SECONDS, players=(-1, 1)):
        if start_seconds <= 0:
            raise ValueError("start_seconds must be positive")
        self.start_seconds = start_seconds
        self.players = tuple(players)
        self.remaining = {}
        self.reset()

    def reset(self):
        self.remaining = {p: self.start_seconds for p in self.players}

    def remaining_for(self, player):
        return self.remaining[player]

    def tick(self, player):
        """Take one unit off player's clock. Returns True once it hits zero."""
        left = max(self.remaining[player] - 1, 0)
        self.remaining[player] = left
        return left == 0
