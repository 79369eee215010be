"""CSV feed reading and writing for Debate Pairing."""

from debatepairing.feeds.csv_feeds import (
    parse_adjudicators,
    parse_competitors,
    parse_date,
    parse_flag,
    parse_history,
    parse_venues,
    present_names,
    read_rows,
    write_rows,
)

__all__ = [
    "parse_adjudicators",
    "parse_competitors",
    "parse_date",
    "parse_flag",
    "parse_history",
    "parse_venues",
    "present_names",
    "read_rows",
    "write_rows",
]
