"""League configuration management."""

import logging
from functools import lru_cache
from pathlib import Path

from .constants import GROUP_SIZE, GROUPS, REQUEST_TIMEOUT, SHEET_URL
from .schemas import GroupInfo, LeagueConfig
from .utils import load_model

logger = logging.getLogger('golfleague.config')

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'


def default_config() -> LeagueConfig:
    """Built-in configuration: published sheet URL and the four-group roster."""
    return LeagueConfig(
        sheet_url=SHEET_URL,
        request_timeout=REQUEST_TIMEOUT,
        group_size=GROUP_SIZE,
        groups={key: GroupInfo(**info) for key, info in GROUPS.items()},
    )


def load_config(path: Path | str) -> LeagueConfig:
    """
    Load league configuration from an explicit JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has an invalid structure
    """
    return load_model(path, LeagueConfig)


@lru_cache(maxsize=1)
def get_config() -> LeagueConfig:
    """
    Load league configuration from data/league_config.json.

    Falls back to default_config() when the file is absent.
    Configuration is cached after first load.

    Example:
        from golfleague.config import get_config
        config = get_config()
        print(config.sheet_url)
    """
    if not CONFIG_PATH.exists():
        logger.debug(f'No config file at {CONFIG_PATH}, using defaults')
        return default_config()
    return load_config(CONFIG_PATH)


def get_sheet_url() -> str:
    """Get the spreadsheet export URL from config."""
    return get_config().sheet_url


def get_groups() -> dict[str, GroupInfo]:
    """Get group display names and rosters from config."""
    return get_config().groups


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime
    and you need to reload it.
    """
    get_config.cache_clear()
