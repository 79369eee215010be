"""Type hints used in Debate Pairing."""

from typing import Callable, Dict, List, Mapping, Sequence


# A raw feed row, as produced by csv.DictReader
Row = Mapping[str, str]
# A produced output row
OutRow = Dict[str, str]
OutRows = List[OutRow]

# Picks which member's history a unit inherits, given member names and
# a name -> sit-out count lookup
InheritanceRule = Callable[[Sequence[str], Callable[[str], int]], str]
