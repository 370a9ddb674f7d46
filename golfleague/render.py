"""Display conventions and plain-text rendering of a leaderboard."""

from datetime import datetime, timezone

from .models import LeaderboardSnapshot, PlayerEntry
from .schemas import LeaderboardFile, LeagueConfig, PlayerRow

NO_VALUE = '-'
NOTABLE_MARK = '*'

RANK_CLASSES = {1: 'first', 2: 'second', 3: 'third'}


def format_score(text: str) -> str:
    """Weekly cell text for display; '0' and blank mean no score."""
    if text in ('0', ''):
        return NO_VALUE
    return text


def is_notable_score(text: str) -> bool:
    """Positive numeric scores get emphasis."""
    try:
        return float(text) > 0
    except ValueError:
        return False


def format_total(total: float) -> str:
    if float(total).is_integer():
        return str(int(total))
    return str(total)


def rank_class(rank: int) -> str:
    """Medal class for the top three places."""
    return RANK_CLASSES.get(rank, '')


def group_label(group: str, config: LeagueConfig) -> str:
    info = config.groups.get(group)
    return info.name if info else f'Group {group}'


def _score_cell(text: str) -> str:
    shown = format_score(text)
    if is_notable_score(text):
        shown += NOTABLE_MARK
    return shown


def rank_cell(rank: int) -> str:
    """Rank text with the medal class appended for the top three."""
    medal = rank_class(rank)
    return f'{rank} {medal}' if medal else str(rank)


def _player_cells(player: PlayerEntry, week_count: int, with_group: bool) -> list[str]:
    cells = [rank_cell(player.rank), player.name]
    if with_group:
        cells.append(player.group)
    cells.extend(_score_cell(s) for s in player.visible_scores(week_count))
    cells.append(format_total(player.total))
    return cells


def _table(header: list[str], rows: list[list[str]]) -> list[str]:
    widths = [len(h) for h in header]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells):
        return '  '.join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    out = [line(header), line(['-' * w for w in widths])]
    out.extend(line(row) for row in rows)
    return out


def render_banner(snapshot: LeaderboardSnapshot) -> str:
    birdies = str(snapshot.total_birdies) if snapshot.total_birdies else NO_VALUE
    king = snapshot.birdie_king or NO_VALUE
    return f'Total Birdies: {birdies}    Birdie King: {king}'


def render_text(snapshot: LeaderboardSnapshot, config: LeagueConfig) -> str:
    """
    Render the overall leaderboard as a plain-text table.

    Week cells are truncated to the number of recovered week headers.
    Notable (positive) scores are marked with '*'.
    """
    week_count = len(snapshot.week_headers)
    header = ['Rank', 'Player', 'Grp', *snapshot.week_headers, 'Total']
    rows = [_player_cells(p, week_count, with_group=True) for p in snapshot.players]

    lines = [render_banner(snapshot), '']
    if rows:
        lines.extend(_table(header, rows))
    else:
        lines.append('No leaderboard data available.')

    legend = ', '.join(f'{g} = {group_label(g, config)}' for g in config.group_ids)
    lines.extend(['', f'Groups: {legend}'])
    return '\n'.join(lines)


def render_groups_text(snapshot: LeaderboardSnapshot, config: LeagueConfig) -> str:
    """Render one table per group; empty groups are left out."""
    week_count = len(snapshot.week_headers)
    header = ['Rank', 'Player', *snapshot.week_headers, 'Total']
    lines = [render_banner(snapshot)]

    for group_id in config.group_ids:
        players = snapshot.players_in_group(group_id)
        if not players:
            continue
        rows = [_player_cells(p, week_count, with_group=False) for p in players]
        lines.extend(['', group_label(group_id, config)])
        lines.extend(_table(header, rows))

    return '\n'.join(lines)


def snapshot_to_file(snapshot: LeaderboardSnapshot, config: LeagueConfig) -> LeaderboardFile:
    """Exportable form of a snapshot (weekly scores truncated to headers)."""
    week_count = len(snapshot.week_headers)
    return LeaderboardFile(
        updated_at=datetime.now(timezone.utc).isoformat(),
        week_headers=list(snapshot.week_headers),
        total_birdies=snapshot.total_birdies,
        birdie_king=snapshot.birdie_king,
        players=[
            PlayerRow(
                rank=p.rank,
                name=p.name,
                group=p.group,
                group_name=group_label(p.group, config),
                total=p.total,
                weekly_scores=list(p.visible_scores(week_count)),
            )
            for p in snapshot.players
        ],
    )
