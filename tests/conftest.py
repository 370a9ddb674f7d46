"""Shared fixtures: a realistic sheet export and league config."""

import pytest

from golfleague.config import default_config

SHEET_ROWS = [
    '"Golf League, 2025",,,,,,,,,,,,,,,',
    ',,,,Week 1,Week 2,Week 3,Week 4,,,,,,,,',
    '',
    ',Group A,,,,,,,,,,,,,,',
    ',Rank,Player,Total,,,,,,,,,,,,',
    ',1,Chad,12,3,4,5,0,,,,,,,,',
    ',2,Carp,9,2,-,4,3,,,,,,,,',
    ',3,Chuck,7,1,2,4,0,,,,,,,,',
    ',4,Glen,3,0,1,2,0,,,,,,,,',
    '   ',
    ',Group B,,,,,,,,,,,,,,',
    ',Rank,Player,Total,,,,,,,,,,,,',
    ',1,Jake,15,5,5,5,0,,,,,,,,',
    ',2,Sean,9,3,3,3,0,,,,,,,,',
    ',3,Jimmy,6,2,2,2,0,,,,,,,,',
    ',4,Faro,2,1,1,0,0,,,,,,,,',
    '',
    ',Group C,,,,,,,,,,,,,,',
    ',Rank,Player,Total,,,,,,,,,,,,',
    ',1,Joey,11,4,4,3,0,,,,,,,,',
    ',2,Kevin,8,4,2,2,0,,,,,,,,',
    ',3,Baker,5,1,2,2,0,,,,,,,,',
    ',4,Andulics,1,1,0,0,0,,,,,,,,',
    '',
    ',Group D,,,,,,,,,,,,,,',
    ',Rank,Player,Total,,,,,,,,,,,,',
    ',1,Tony,10,4,3,3,0,,,,,,,,',
    ',2,Jared,9,3,3,3,0,,,,,,,,',
    ',3,Ian,4,2,1,1,0,,,,,,,,',
    ',4,Josh,0,0,0,0,0,,,,,,,,',
    '',
    ',,Weekly Low:,,Jake,Chad,Chad,,,,,,,,,',
    ',,Total Birdies:,,42,Birdie King:,,,Chad,,,,,,,',
]


@pytest.fixture
def sheet_csv():
    """CSV text shaped like the published league sheet."""
    return '\n'.join(SHEET_ROWS) + '\n'


@pytest.fixture
def config():
    """Built-in league configuration (four groups of four)."""
    return default_config()
