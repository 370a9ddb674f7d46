"""Sheet export fetching using requests."""

import logging
from pathlib import Path
from typing import Optional

import requests

from .csv_tokenizer import tokenize
from .extractor import LeaderboardExtractor
from .models import LeaderboardSnapshot
from .schemas import LeagueConfig

logger = logging.getLogger('golfleague.data_fetcher')


class FetchError(Exception):
    """The sheet export could not be downloaded."""


class SheetFetcher:
    """Downloads the published CSV export of the league sheet."""

    def __init__(self, config: Optional[LeagueConfig] = None, session: Optional[requests.Session] = None):
        if config is None:
            from .config import get_config
            config = get_config()
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self) -> None:
        """Close the HTTP session if this fetcher created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def url(self) -> str:
        return self.config.sheet_url

    def fetch_csv(self) -> str:
        """
        GET the sheet export and return its text.

        Raises:
            FetchError: On network failure or a non-2xx response
        """
        logger.info(f'Fetching sheet export from {self.url}')
        try:
            response = self.session.get(self.url, timeout=self.config.request_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f'Failed to fetch sheet export: {e}')
            raise FetchError(f'Failed to fetch data from {self.url}') from e

        # Sheets serves CSV without a charset; don't let requests guess latin-1
        response.encoding = 'utf-8'
        text = response.text
        logger.debug(f'Fetched {len(text)} characters')
        return text


def build_snapshot(text: str, config: Optional[LeagueConfig] = None) -> LeaderboardSnapshot:
    """Tokenize CSV text and extract the leaderboard."""
    return LeaderboardExtractor(config).extract(tokenize(text))


def load_leaderboard(
    config: Optional[LeagueConfig] = None,
    fetcher: Optional[SheetFetcher] = None,
) -> LeaderboardSnapshot:
    """
    Fetch the sheet and build a fresh snapshot.

    Each call is independent; nothing is carried over between loads.

    Raises:
        FetchError: If the download fails (nothing is extracted)
    """
    if fetcher is None:
        with SheetFetcher(config) as own_fetcher:
            text = own_fetcher.fetch_csv()
            config = own_fetcher.config
    else:
        text = fetcher.fetch_csv()
        config = config or fetcher.config
    return build_snapshot(text, config)


def load_leaderboard_from_file(
    path: Path | str, config: Optional[LeagueConfig] = None
) -> LeaderboardSnapshot:
    """Build a snapshot from a saved CSV export."""
    path = Path(path)
    logger.info(f'Reading sheet export from {path}')
    return build_snapshot(path.read_text(encoding='utf-8'), config)
