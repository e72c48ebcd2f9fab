"""Pairing editor controllers.

This package holds the editing logic with clean separation of concerns:
pairing changes, click selection, roster projection and the session tying
them together.
"""

# Guide Pairing
# Copyright (C) 2025  Guide Pairing developers
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

from guidepairing.controllers.pairing_manager import PairingManager
from guidepairing.controllers.roster import RosterProjector, sort_by_pace
from guidepairing.controllers.selection import (
    PairingRequest,
    SelectionOutcome,
    SelectionPhase,
    SelectionState,
    SelectionStateMachine,
)
from guidepairing.controllers.session import PairingSession

__all__ = [
    "PairingManager",
    "RosterProjector",
    "sort_by_pace",
    "PairingRequest",
    "SelectionOutcome",
    "SelectionPhase",
    "SelectionState",
    "SelectionStateMachine",
    "PairingSession",
]
