"""Rules deciding whether two people may be paired."""

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

from dataclasses import dataclass
from typing import Optional

from guidepairing.constants import (
    REASON_ALREADY_EXISTS,
    REASON_ATHLETE_TAKEN,
    REASON_CANDIDATE_NOT_FOUND,
    REASON_GUIDE_TAKEN,
    REASON_HAS_OWN_PAIRINGS,
    REASON_SELF,
    REASON_TARGET_NOT_ATHLETE,
    REASON_TARGET_NOT_FOUND,
    ROLE_ATHLETE,
    ROLE_GUIDE,
)
from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.person import Roster
from guidepairing.type_hints import AthleteId, UserId


@dataclass(frozen=True)
class PairingCheck:
    """Outcome of a pairing check.

    A rejection is an ordinary value carrying a human-readable reason,
    never an exception.
    """

    allowed: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def ok(cls) -> "PairingCheck":
        return cls(allowed=True)

    @classmethod
    def reject(cls, reason: str) -> "PairingCheck":
        return cls(allowed=False, reason=reason)


def can_pair(
    target_id: AthleteId,
    candidate_id: UserId,
    assignment: PairingAssignment,
    roster: Roster,
) -> PairingCheck:
    """Check whether ``candidate_id`` may join the group headed by ``target_id``.

    Rules are checked in order and the first failure wins:

    1. a person cannot be paired with themselves;
    2. both people must be on the roster, and the target must be an athlete;
    3. the pairing must not already exist;
    4. a guide must not already guide another athlete's group;
    5. an athlete must neither head a non-empty group nor sit in another
       group.

    Parameters
    ----------
    target_id : str
        Athlete heading the group.
    candidate_id : str
        Guide or athlete joining the group.
    assignment : PairingAssignment
        Current assignment state, not modified.
    roster : Roster
        Event participants.

    Returns
    -------
    PairingCheck
    """
    if candidate_id == target_id:
        return PairingCheck.reject(REASON_SELF)

    candidate_role = roster.role_of(candidate_id)
    if candidate_role is None:
        return PairingCheck.reject(REASON_CANDIDATE_NOT_FOUND)

    target_role = roster.role_of(target_id)
    if target_role is None:
        return PairingCheck.reject(REASON_TARGET_NOT_FOUND)
    if target_role != ROLE_ATHLETE:
        return PairingCheck.reject(REASON_TARGET_NOT_ATHLETE)

    entry = assignment.get(target_id)
    if entry is not None and candidate_id in entry:
        return PairingCheck.reject(REASON_ALREADY_EXISTS)

    # a target nested in someone else's group cannot head its own
    if target_id in assignment.absorbed_athlete_ids():
        return PairingCheck.reject(REASON_ATHLETE_TAKEN)

    if candidate_role == ROLE_GUIDE:
        if assignment.member_owner(candidate_id, exclude=target_id) is not None:
            return PairingCheck.reject(REASON_GUIDE_TAKEN)
        return PairingCheck.ok()

    if assignment.has_content(candidate_id):
        return PairingCheck.reject(REASON_HAS_OWN_PAIRINGS)
    if assignment.member_owner(candidate_id, exclude=target_id) is not None:
        return PairingCheck.reject(REASON_ATHLETE_TAKEN)
    return PairingCheck.ok()
