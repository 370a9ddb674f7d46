"""Data models for the golf league leaderboard."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class PlayerEntry:
    """One player's line on the leaderboard."""
    name: str
    group: str
    total: float
    weekly_scores: Tuple[str, ...] = field(default_factory=tuple)  # raw cell text, 12 slots
    rank: int = 0  # overall rank, assigned after sorting

    def visible_scores(self, week_count: int) -> Tuple[str, ...]:
        """Weekly scores truncated to the number of recovered week headers."""
        return self.weekly_scores[:max(week_count, 0)]


@dataclass(frozen=True)
class LeaderboardSnapshot:
    """Result of one extraction pass over a sheet export."""
    players: Tuple[PlayerEntry, ...] = field(default_factory=tuple)
    week_headers: Tuple[str, ...] = field(default_factory=tuple)
    total_birdies: int = 0
    birdie_king: str = ''

    @property
    def is_empty(self) -> bool:
        return not self.players

    def players_in_group(self, group: str) -> Tuple[PlayerEntry, ...]:
        """Players of one group, in overall rank order."""
        return tuple(p for p in self.players if p.group == group)
