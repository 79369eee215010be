# Debate Pairing
# Copyright (C) 2025  Debate Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
CSV_EXTENSION = ".csv"
EVENT_FILE_NAME = "event" + CSV_EXTENSION
NEW_HISTORY_FILE_NAME = "history_new" + CSV_EXTENSION

# Event formats
FORMAT_TEAM = "Team"  # partnered teams, solo fallback, one round
FORMAT_SINGLE = "Single"  # one competitor per unit, two rounds per day

# Sides
SIDE_A = "Proposition"
SIDE_B = "Opposition"
BYE_LABEL = "BYE"
NO_OPPONENT = "-"

# Unit naming
UNIT_KEY_DELIMITER = " & "
FALLBACK_MARKER = " (solo)"

# Output list delimiter (adjudicator panels)
LIST_DELIMITER = ", "

# Attendance statuses
STATUS_PRESENT = "present"
STATUS_ABSENT = "absent"
STATUS_UNKNOWN = "unknown"

# Truthy spellings accepted for boolean feed columns
TRUTHY_VALUES = frozenset({"1", "true", "yes", "y", "x"})

# Penalty weights
TIER_MISMATCH_PENALTY = 100
REMATCH_PENALTY = 15
READJUDICATION_PENALTY = 10
PANEL_SIZE_PENALTY = 20

# Bounded search budget for the round optimizer
SEARCH_ITERATIONS = 500

# Roster feed columns
COL_NAME = "Name"
COL_FORMAT = "Format"
COL_PARTNER = "Partner"
COL_NOVICE = "Novice"
COL_CONFLICTS = "Conflicts"
COL_STATUS = "Status"

# History feed columns
COL_DATE = "Date"
COL_ROUND = "Round"
COL_COMPETITOR = "Competitor"
COL_FALLBACK = "Fallback"
COL_SIDE = "Side"
COL_OPPONENT = "Opponent"
COL_ADJUDICATOR = "Adjudicator"
COL_VENUE = "Venue"

HISTORY_COLUMNS = [
    COL_DATE,
    COL_FORMAT,
    COL_ROUND,
    COL_COMPETITOR,
    COL_FALLBACK,
    COL_SIDE,
    COL_OPPONENT,
    COL_ADJUDICATOR,
    COL_VENUE,
]

# Generated event table columns
COL_ADJUDICATORS = "Adjudicators"
