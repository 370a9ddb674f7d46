"""Constants and mappings for the golf league leaderboard."""

# Published Google Sheets export (CSV)
SHEET_URL = (
    'https://docs.google.com/spreadsheets/d/e/'
    '2PACX-1vSdlDXqcBxu_SOx23N658q0REWTXmJBqx9lJAqYWpi5O-xznu2Iolx2Iix_RTrBFYexfpqOawJNcKIW'
    '/pub?output=csv'
)

REQUEST_TIMEOUT = 30  # seconds

# Group roster (display labeling only)
GROUPS = {
    'A': {'name': 'Group A', 'members': ['Chad', 'Carp', 'Chuck', 'Glen']},
    'B': {'name': 'Group B', 'members': ['Jake', 'Sean', 'Jimmy', 'Faro']},
    'C': {'name': 'Group C', 'members': ['Joey', 'Kevin', 'Baker', 'Andulics']},
    'D': {'name': 'Group D', 'members': ['Tony', 'Jared', 'Ian', 'Josh']},
}

GROUP_SIZE = 4
EXPECTED_PLAYERS = len(GROUPS) * GROUP_SIZE

# Column positions in the sheet export (0-based)
RANK_COL = 1
NAME_COL = 2
TOTAL_COL = 3
FIRST_WEEK_COL = 4
LAST_WEEK_COL = 15

# Row holding the week labels
WEEK_HEADER_ROW = 1

# Valid within-group rank values
MIN_GROUP_RANK = 1
MAX_GROUP_RANK = 4

# Inline labels and the offset of their value cell
TOTAL_BIRDIES_LABEL = 'Total Birdies:'
TOTAL_BIRDIES_OFFSET = 2
BIRDIE_KING_LABEL = 'Birdie King:'
BIRDIE_KING_OFFSET = 3

# Placeholder for an empty score slot
MISSING_SCORE = '0'
