"""Unit tests for configuration loading."""

import json

import pytest

from golfleague import config as config_module
from golfleague.config import (
    clear_config_cache,
    default_config,
    get_config,
    get_groups,
    get_sheet_url,
    load_config,
)
from golfleague.constants import SHEET_URL
from golfleague.schemas import LeagueConfig


@pytest.fixture
def config_file(tmp_path):
    """Write a league config file and return its path."""
    def _write(data):
        path = tmp_path / 'league_config.json'
        path.write_text(json.dumps(data))
        return path
    return _write


def config_data(**overrides):
    data = {
        'sheet_url': 'https://example.com/league.csv',
        'request_timeout': 10,
        'group_size': 4,
        'groups': {
            'A': {'name': 'Front Nine', 'members': ['a', 'b', 'c', 'd']},
            'B': {'name': 'Back Nine', 'members': ['e', 'f', 'g', 'h']},
        },
    }
    data.update(overrides)
    return data


class TestDefaultConfig:
    """Tests for the built-in configuration."""

    def test_defaults(self):
        """Test four groups of four and the published sheet URL."""
        config = default_config()
        assert config.sheet_url == SHEET_URL
        assert config.group_ids == ['A', 'B', 'C', 'D']
        assert config.max_players == 16
        assert config.groups['C'].members == ['Joey', 'Kevin', 'Baker', 'Andulics']

    def test_frozen(self):
        """Test configuration can't be changed in place."""
        config = default_config()
        with pytest.raises(Exception):
            config.sheet_url = 'https://elsewhere.example.com'

    def test_repo_config_matches_defaults(self):
        """Test data/league_config.json mirrors the built-in defaults."""
        clear_config_cache()
        assert get_config() == default_config()
        clear_config_cache()


class TestLoadConfig:
    """Tests for explicit config files."""

    def test_load_valid(self, config_file):
        """Test a valid file loads into LeagueConfig."""
        config = load_config(config_file(config_data()))
        assert isinstance(config, LeagueConfig)
        assert config.groups['A'].name == 'Front Nine'
        assert config.max_players == 8

    def test_missing_file(self, tmp_path):
        """Test a missing explicit file raises."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'nope.json')

    def test_invalid_group(self, config_file):
        """Test group identifiers outside A-D are rejected."""
        data = config_data(groups={'E': {'name': 'Group E', 'members': ['a', 'b', 'c', 'd']}})
        with pytest.raises(ValueError, match='Schema validation failed'):
            load_config(config_file(data))

    def test_roster_must_have_four(self, config_file):
        """Test rosters must list four members."""
        data = config_data(groups={'A': {'name': 'Group A', 'members': ['a', 'b']}})
        with pytest.raises(ValueError):
            load_config(config_file(data))

    def test_bad_url(self, config_file):
        """Test the sheet URL must be http(s)."""
        with pytest.raises(ValueError):
            load_config(config_file(config_data(sheet_url='ftp://example.com/x.csv')))

    def test_unknown_key(self, config_file):
        """Test extra keys are rejected."""
        with pytest.raises(ValueError):
            load_config(config_file(config_data(refresh=60)))


class TestGetConfig:
    """Tests for the cached accessor."""

    def test_falls_back_to_defaults(self, monkeypatch, tmp_path):
        """Test a missing data/league_config.json gives the defaults."""
        monkeypatch.setattr(config_module, 'CONFIG_PATH', tmp_path / 'missing.json')
        clear_config_cache()
        try:
            assert get_config() == default_config()
        finally:
            clear_config_cache()

    def test_cached(self, monkeypatch, config_file):
        """Test the config is loaded once until the cache is cleared."""
        path = config_file(config_data())
        monkeypatch.setattr(config_module, 'CONFIG_PATH', path)
        clear_config_cache()
        try:
            first = get_config()
            path.write_text(json.dumps(config_data(sheet_url='https://example.com/other.csv')))
            assert get_config() is first
            clear_config_cache()
            assert get_config().sheet_url == 'https://example.com/other.csv'
        finally:
            clear_config_cache()

    def test_accessors(self, monkeypatch, config_file):
        """Test accessor helpers read from the loaded config."""
        monkeypatch.setattr(config_module, 'CONFIG_PATH', config_file(config_data()))
        clear_config_cache()
        try:
            assert get_sheet_url() == 'https://example.com/league.csv'
            assert list(get_groups()) == ['A', 'B']
        finally:
            clear_config_cache()
