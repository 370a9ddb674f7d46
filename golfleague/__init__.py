from .models import PlayerEntry, LeaderboardSnapshot
from .schemas import GroupInfo, LeagueConfig, LeaderboardFile
from .config import get_config, load_config, default_config, clear_config_cache
from .csv_tokenizer import tokenize, split_line
from .extractor import LeaderboardExtractor, extract
from .data_fetcher import (
    FetchError,
    SheetFetcher,
    build_snapshot,
    load_leaderboard,
    load_leaderboard_from_file,
)
from .validators import validate_snapshot
from .render import (
    format_score,
    is_notable_score,
    rank_class,
    render_text,
    render_groups_text,
    snapshot_to_file,
)

__all__ = [
    # Models
    'PlayerEntry',
    'LeaderboardSnapshot',
    # Config
    'GroupInfo',
    'LeagueConfig',
    'LeaderboardFile',
    'get_config',
    'load_config',
    'default_config',
    'clear_config_cache',
    # Parsing
    'tokenize',
    'split_line',
    'LeaderboardExtractor',
    'extract',
    # Data fetching
    'FetchError',
    'SheetFetcher',
    'build_snapshot',
    'load_leaderboard',
    'load_leaderboard_from_file',
    # Checks and display
    'validate_snapshot',
    'format_score',
    'is_notable_score',
    'rank_class',
    'render_text',
    'render_groups_text',
    'snapshot_to_file',
]
