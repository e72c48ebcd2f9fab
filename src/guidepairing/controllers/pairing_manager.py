"""Pairing management for an event.

This module applies validated pairing changes to an assignment: creating
pairings, absorbing athletes into another athlete's group, and releasing
them again.
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

from typing import List

from guidepairing.constants import ROLE_GUIDE
from guidepairing.exceptions import InvariantViolationException
from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.person import Roster
from guidepairing.pairing.validator import PairingCheck, can_pair
from guidepairing.type_hints import AthleteId, UserId
from guidepairing.utils import setup_logger

logger = setup_logger(__name__)


class PairingManager:
    """Applies pairing changes to an assignment.

    This class is responsible for:
    - Gating every new pairing through the validator
    - Absorbing an athlete's own entry when they join another group
    - Restoring absorbed athletes as independent entries on removal
    - Dropping entries that become empty
    """

    def __init__(self, assignment: PairingAssignment, roster: Roster):
        """Initialize the pairing manager.

        Args:
            assignment: The live assignment, mutated in place
            roster: Participants of the event
        """
        self.assignment = assignment
        self.roster = roster

    def check(self, target_id: AthleteId, candidate_id: UserId) -> PairingCheck:
        """Validate a pairing without applying it."""
        return can_pair(target_id, candidate_id, self.assignment, self.roster)

    def create_pairing(self, target_id: AthleteId, candidate_id: UserId) -> PairingCheck:
        """Add a guide or athlete to the group headed by ``target_id``.

        Args:
            target_id: Athlete heading the group
            candidate_id: Guide or athlete joining it

        Returns:
            The validator's verdict; the assignment is only changed when allowed
        """
        verdict = self.check(target_id, candidate_id)
        if not verdict.allowed:
            logger.warning(
                f"Rejected pairing {candidate_id} -> {target_id}: {verdict.reason}"
            )
            return verdict

        if self.roster.role_of(candidate_id) == ROLE_GUIDE:
            self.assignment.ensure_entry(target_id).guides.append(candidate_id)
        else:
            # the candidate's own (empty) entry is absorbed
            self.assignment.remove_entry(candidate_id)
            self.assignment.ensure_entry(target_id).athletes.append(candidate_id)

        logger.info(
            f"Paired {self.roster.display_name(candidate_id)} with "
            f"{self.roster.display_name(target_id)}"
        )
        return verdict

    def remove_pairing(self, target_id: AthleteId, candidate_id: UserId) -> bool:
        """Remove ``candidate_id`` from the group headed by ``target_id``.

        An absorbed athlete gets an empty placeholder entry so it shows up
        as an independent athlete again. Calling this twice is harmless.

        Args:
            target_id: Athlete heading the group
            candidate_id: Guide or athlete to release

        Returns:
            True if something was removed, False if the pairing did not exist
        """
        entry = self.assignment.get(target_id)
        if entry is None or candidate_id not in entry:
            logger.debug(f"No pairing {candidate_id} -> {target_id} to remove")
            return False

        if candidate_id in entry.guides:
            entry.guides.remove(candidate_id)
        else:
            entry.athletes.remove(candidate_id)
            self.assignment.ensure_entry(candidate_id)

        if entry.is_empty:
            self.assignment.remove_entry(target_id)

        logger.info(
            f"Unpaired {self.roster.display_name(candidate_id)} from "
            f"{self.roster.display_name(target_id)}"
        )
        return True

    def unpair_all(self, target_id: AthleteId) -> List[UserId]:
        """Release every member of a group.

        Returns:
            The ids that were released, guides first
        """
        entry = self.assignment.get(target_id)
        if entry is None:
            return []
        released = entry.members
        for member_id in released:
            self.remove_pairing(target_id, member_id)
        return released

    def clear(self) -> None:
        """Remove every pairing for the event."""
        count = len(self.assignment.non_empty_items())
        self.assignment.clear()
        logger.info(f"Cleared {count} pairing group(s)")

    def verify(self) -> None:
        """Raise if the assignment breaks its structural invariants.

        Raises:
            InvariantViolationException: listing every problem found
        """
        problems = self.assignment.check_invariants()
        if problems:
            logger.error(f"Assignment is inconsistent: {problems}")
            raise InvariantViolationException("; ".join(problems))
