"""Tokenizer for the published sheet's CSV export.

Only the subset of CSV the export actually uses is handled: a double
quote toggles quoted mode and is never kept as data, and commas split
fields only outside quotes. Unbalanced quotes are tolerated; the scan
simply carries on with whatever state results.
"""

QUOTE = '"'
DELIMITER = ','


def split_line(line: str) -> list[str]:
    """Split one line into trimmed fields, honoring quoted commas."""
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append(''.join(current).strip())
    return fields


def tokenize(text: str) -> list[list[str]]:
    """
    Split a CSV export into records.

    Blank (whitespace-only) lines are dropped; every other line becomes
    one record, in input order.

    Example:
        tokenize('1,"Smith, J",10\\n\\n2,Doe,8')
        -> [['1', 'Smith, J', '10'], ['2', 'Doe', '8']]
    """
    return [split_line(line) for line in text.split('\n') if line.strip()]
