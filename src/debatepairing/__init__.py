"""Debate Pairing: sides, adjudicators and venues for periodic debate events.

The package pairs a roster of competitors for one event of either the team
format (partnered teams with a solo fallback) or the single format (two
sequential rounds per day), drawing on the full history of past events.
"""

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

from debatepairing.engine import EngineResult, PairingEngine
from debatepairing.models import EngineConfig

__all__ = ["EngineConfig", "EngineResult", "PairingEngine"]
