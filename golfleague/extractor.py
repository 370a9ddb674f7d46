"""Leaderboard extraction from tokenized sheet records.

The sheet is laid out for people, not programs: group blocks are
separated by header rows and blanks, and the birdie statistics sit next
to inline labels. Player rows are recognised by shape (a within-group
rank of 1-4, a name and a numeric total) and assigned to groups purely by
arrival order, four at a time.
"""

import logging
import math
from dataclasses import replace
from typing import Optional, Sequence

from .constants import (
    BIRDIE_KING_LABEL,
    BIRDIE_KING_OFFSET,
    FIRST_WEEK_COL,
    LAST_WEEK_COL,
    MAX_GROUP_RANK,
    MIN_GROUP_RANK,
    MISSING_SCORE,
    NAME_COL,
    RANK_COL,
    TOTAL_BIRDIES_LABEL,
    TOTAL_BIRDIES_OFFSET,
    TOTAL_COL,
    WEEK_HEADER_ROW,
)
from .models import LeaderboardSnapshot, PlayerEntry
from .schemas import LeagueConfig

logger = logging.getLogger('golfleague.extractor')

Record = Sequence[str]


def _field(record: Record, index: int) -> Optional[str]:
    """Field at index, or None when the record is too short."""
    if 0 <= index < len(record):
        return record[index]
    return None


def parse_player_row(record: Record) -> Optional[tuple[int, str, float]]:
    """
    Interpret a record as a player row.

    Returns:
        (group_rank, name, total), or None if the record is not a player row
    """
    rank_text = _field(record, RANK_COL)
    name = _field(record, NAME_COL)
    total_text = _field(record, TOTAL_COL)

    if rank_text is None or not name or total_text is None:
        return None
    # int() and float() accept digit separators; sheet numbers never have them
    if '_' in rank_text or '_' in total_text:
        return None

    try:
        rank = int(rank_text)
        total = float(total_text)
    except ValueError:
        return None

    if not MIN_GROUP_RANK <= rank <= MAX_GROUP_RANK:
        return None
    if not math.isfinite(total):
        return None

    return rank, name, total


def weekly_scores(record: Record) -> tuple[str, ...]:
    """Raw weekly score cells; slots past the end of the record read '0'."""
    scores = []
    for index in range(FIRST_WEEK_COL, LAST_WEEK_COL + 1):
        value = _field(record, index)
        scores.append(MISSING_SCORE if value is None else value)
    return tuple(scores)


def extract_week_headers(records: Sequence[Record]) -> list[str]:
    """Non-empty week labels from the fixed header row."""
    if len(records) <= WEEK_HEADER_ROW:
        return []
    header = records[WEEK_HEADER_ROW]
    return [label for label in header[FIRST_WEEK_COL:LAST_WEEK_COL + 1] if label]


def find_total_birdies(record: Record) -> Optional[int]:
    """
    Birdie count two cells after the 'Total Birdies:' label.

    Returns None when there is no label or the value cell is missing or
    blank, and 0 when the cell holds something other than a count.
    """
    if TOTAL_BIRDIES_LABEL not in record:
        return None
    value = _field(record, list(record).index(TOTAL_BIRDIES_LABEL) + TOTAL_BIRDIES_OFFSET)
    if not value:
        return None
    if '_' in value:
        return 0
    try:
        count = int(value)
    except ValueError:
        return 0
    return max(count, 0)


def find_birdie_king(record: Record) -> Optional[str]:
    """Name next to the 'Birdie King:' label, if present and non-empty."""
    if BIRDIE_KING_LABEL not in record:
        return None
    value = _field(record, list(record).index(BIRDIE_KING_LABEL) + BIRDIE_KING_OFFSET)
    return value or None


class LeaderboardExtractor:
    """Builds a LeaderboardSnapshot from tokenized sheet records."""

    def __init__(self, config: Optional[LeagueConfig] = None):
        if config is None:
            from .config import get_config
            config = get_config()
        self.config = config
        self.group_ids = config.group_ids
        self.group_size = config.group_size
        self.max_players = config.max_players

    def group_for(self, position: int) -> str:
        """Group of the n-th (0-based) qualifying player row."""
        return self.group_ids[position // self.group_size]

    def extract(self, records: Sequence[Record]) -> LeaderboardSnapshot:
        """
        Extract the leaderboard from a full sheet export.

        Rows that don't look like player rows are skipped; this never
        raises for malformed input.
        """
        players: list[PlayerEntry] = []
        total_birdies = 0
        birdie_king = ''
        skipped = 0

        for line_no, record in enumerate(records):
            birdies = find_total_birdies(record)
            if birdies is not None:
                total_birdies = birdies

            king = find_birdie_king(record)
            if king is not None:
                birdie_king = king

            if len(players) >= self.max_players:
                continue

            parsed = parse_player_row(record)
            if parsed is None:
                skipped += 1
                logger.debug(f'Skipping row {line_no}: {list(record)[:4]}')
                continue

            _rank, name, total = parsed
            players.append(
                PlayerEntry(
                    name=name,
                    group=self.group_for(len(players)),
                    total=total,
                    weekly_scores=weekly_scores(record),
                )
            )

        # sorted() is stable, so equal totals keep sheet order
        ranked = tuple(
            replace(player, rank=position)
            for position, player in enumerate(
                sorted(players, key=lambda p: p.total, reverse=True), 1
            )
        )

        logger.info(
            f'Extracted {len(ranked)} players ({skipped} rows skipped), '
            f'total birdies {total_birdies}, birdie king {birdie_king or "-"}'
        )

        return LeaderboardSnapshot(
            players=ranked,
            week_headers=tuple(extract_week_headers(records)),
            total_birdies=total_birdies,
            birdie_king=birdie_king,
        )


def extract(
    records: Sequence[Record], config: Optional[LeagueConfig] = None
) -> LeaderboardSnapshot:
    """Extract a leaderboard snapshot using the given (or loaded) config."""
    return LeaderboardExtractor(config).extract(records)
