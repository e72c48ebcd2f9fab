"""Display lists derived from the roster and the current assignment."""

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

from typing import Dict, List

from guidepairing.constants import DEFAULT_SORT_DIRECTION, SORT_ASCENDING, SORT_DESCENDING
from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.person import Roster, SignUp
from guidepairing.type_hints import SortDirection


def sort_by_pace(
    sign_ups: List[SignUp], roster: Roster, direction: SortDirection
) -> List[SignUp]:
    """Sort sign-ups by pace.

    Ascending puts the slowest first and descending the fastest first.
    Sign-ups without a pace go last either way; ties keep roster order.
    """

    def key(sign_up: SignUp):
        pace = roster.pace_of(sign_up.user_id)
        if pace is None:
            return (1, 0.0)
        value = pace.to_decimal()
        return (0, -value if direction == SORT_ASCENDING else value)

    return sorted(sign_ups, key=key)


class RosterProjector:
    """Read-only projection of the roster into the editor's two lists.

    The projector never changes the assignment; call the list methods again
    after every mutation or sort toggle.
    """

    def __init__(
        self,
        roster: Roster,
        assignment: PairingAssignment,
        sort_direction: SortDirection = DEFAULT_SORT_DIRECTION,
    ):
        self.roster = roster
        self.assignment = assignment
        self.sort_direction = sort_direction

    def toggle_sort(self) -> SortDirection:
        """Flip the sort direction and return the new one."""
        if self.sort_direction == SORT_ASCENDING:
            self.sort_direction = SORT_DESCENDING
        else:
            self.sort_direction = SORT_ASCENDING
        return self.sort_direction

    def athletes_list(self) -> List[SignUp]:
        """Participating athletes not nested in another athlete's group."""
        absorbed = self.assignment.absorbed_athlete_ids()
        athletes = [s for s in self.roster.athletes() if s.user_id not in absorbed]
        return sort_by_pace(athletes, self.roster, self.sort_direction)

    def unpaired_guides_list(self) -> List[SignUp]:
        """Participating guides not assigned to any group."""
        paired = self.assignment.paired_guide_ids()
        guides = [s for s in self.roster.guides() if s.user_id not in paired]
        return sort_by_pace(guides, self.roster, self.sort_direction)

    def counts(self) -> Dict[str, int]:
        """Summary numbers for a status line."""
        athletes = self.roster.athletes()
        heads = {k for k, _ in self.assignment.non_empty_items()}
        absorbed = self.assignment.absorbed_athlete_ids()
        return {
            "athletes": len(athletes),
            "guides": len(self.roster.guides()),
            "paired_athletes": sum(
                1 for s in athletes if s.user_id in heads or s.user_id in absorbed
            ),
            "unpaired_guides": len(self.unpaired_guides_list()),
        }
