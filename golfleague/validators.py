"""Health checks for extracted leaderboards.

These never raise and never drop data: they return warnings for the
caller to log. Player names are not checked against the roster.
"""

from collections import Counter

from .constants import EXPECTED_PLAYERS
from .models import LeaderboardSnapshot
from .schemas import LeagueConfig


def validate_player_count(snapshot: LeaderboardSnapshot, expected: int = EXPECTED_PLAYERS) -> list[str]:
    """Warn when fewer players were recovered than the sheet should hold."""
    count = len(snapshot.players)
    if count == 0:
        return ['No player rows found in sheet export']
    if count < expected:
        return [f'Only {count} of {expected} players found in sheet export']
    return []


def validate_groups(snapshot: LeaderboardSnapshot, config: LeagueConfig) -> list[str]:
    """Warn about groups with missing members."""
    warnings = []
    if snapshot.is_empty:
        return warnings

    for group_id in config.group_ids:
        count = len(snapshot.players_in_group(group_id))
        if count < config.group_size:
            label = config.groups[group_id].name
            warnings.append(f'{label} has {count} players (expected {config.group_size})')

    return warnings


def validate_duplicates(snapshot: LeaderboardSnapshot) -> list[str]:
    """Warn when the same name appears on more than one row."""
    counts = Counter(p.name for p in snapshot.players)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    if duplicates:
        return [f'Duplicate player names: {", ".join(duplicates)}']
    return []


def validate_stats(snapshot: LeaderboardSnapshot) -> list[str]:
    """Warn about missing week headers or birdie statistics."""
    warnings = []
    if not snapshot.week_headers:
        warnings.append('No week headers found in row 2')
    if snapshot.total_birdies == 0:
        warnings.append('Total birdies missing or zero')
    if not snapshot.birdie_king:
        warnings.append('Birdie king missing')
    return warnings


def validate_snapshot(snapshot: LeaderboardSnapshot, config: LeagueConfig) -> list[str]:
    """
    Run all leaderboard checks.

    Returns:
        List of warning messages (empty if the sheet looks complete)
    """
    warnings: list[str] = []
    warnings.extend(validate_player_count(snapshot, config.max_players))
    warnings.extend(validate_groups(snapshot, config))
    warnings.extend(validate_duplicates(snapshot))
    warnings.extend(validate_stats(snapshot))
    return warnings
