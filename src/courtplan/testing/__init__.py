"""Testing module for Court Plan.

This module provides testing functionality including:
- Random Roster Generator (RRG)
- Session file validation
- Score checks from the command line

Use the CLI: courtplan-test
"""

# Court Plan
# Copyright (C) 2025  Court Plan developers
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

from courtplan.testing.rrg import (
    AppliedOperation,
    RandomRosterGenerator,
    RosterOperation,
    RRGConfig,
)

__all__ = [
    "AppliedOperation",
    "RandomRosterGenerator",
    "RosterOperation",
    "RRGConfig",
]
