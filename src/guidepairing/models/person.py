"""People, sign-ups and the event roster."""

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
from typing import Any, Dict, Iterable, List, Optional

from guidepairing.constants import (
    ACTIVITY_RUN,
    PAIRABLE_STATUSES,
    ROLE_ATHLETE,
    ROLE_GUIDE,
    STATUS_MAYBE,
    STATUS_YES,
)
from guidepairing.exceptions import DuplicateSignUpException
from guidepairing.models.pace import Pace
from guidepairing.type_hints import Activity, Role, SignUpStatus, UserId


@dataclass(frozen=True)
class Person:
    """A user as seen by the pairing editor.

    Attributes
    ----------
    id : str
        Opaque user identifier.
    display_name : str
        Name shown in lists and announcements.
    role : str
        Global role, ``"athlete"`` or ``"guide"``.
    pace : Pace or None
        Profile pace, used when a sign-up does not state one.
    """

    id: UserId
    display_name: str
    role: Role = ROLE_ATHLETE
    pace: Optional[Pace] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "role": self.role,
            "pace": self.pace.to_dict() if self.pace else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Person":
        return cls(
            id=str(data["id"]),
            display_name=data.get("display_name") or str(data["id"]),
            role=data.get("role", ROLE_ATHLETE),
            pace=Pace.from_dict(data.get("pace")),
        )


@dataclass(frozen=True)
class SignUp:
    """A person's RSVP for one event.

    The role here is the role for this event and may differ from the
    person's global role.
    """

    user_id: UserId
    role: Role
    status: SignUpStatus = STATUS_YES
    pace: Optional[Pace] = None
    activity: Activity = ACTIVITY_RUN
    notes: str = ""

    @property
    def is_athlete(self) -> bool:
        return self.role == ROLE_ATHLETE

    @property
    def is_guide(self) -> bool:
        return self.role == ROLE_GUIDE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize sign-up to dictionary."""
        return {
            "user_id": self.user_id,
            "role": self.role,
            "status": self.status,
            "pace": self.pace.to_dict() if self.pace else None,
            "activity": self.activity,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignUp":
        """Deserialize sign-up from dictionary."""
        return cls(
            user_id=str(data.get("user_id") or data["userId"]),
            role=data["role"],
            status=data.get("status", STATUS_YES),
            pace=Pace.from_dict(data.get("pace")),
            activity=data.get("activity", ACTIVITY_RUN),
            notes=data.get("notes", ""),
        )


class Roster:
    """The participants of one event.

    Only sign-ups with a pairable RSVP status take part; everyone else is
    unknown to the pairing rules.

    Parameters
    ----------
    sign_ups : iterable of SignUp
        All sign-ups for the event, in display order.
    people : dict of str to Person, optional
        Directory used for display names and fallback paces.
    include_maybe : bool
        Whether ``maybe`` RSVPs take part.
    """

    def __init__(
        self,
        sign_ups: Iterable[SignUp],
        people: Optional[Dict[UserId, Person]] = None,
        include_maybe: bool = True,
    ):
        self.people: Dict[UserId, Person] = dict(people or {})
        self.include_maybe = include_maybe
        self._sign_ups: Dict[UserId, SignUp] = {}
        for sign_up in sign_ups:
            if sign_up.user_id in self._sign_ups:
                raise DuplicateSignUpException(
                    f"User {sign_up.user_id} signed up more than once"
                )
            self._sign_ups[sign_up.user_id] = sign_up

    @property
    def pairable_statuses(self) -> tuple:
        if self.include_maybe:
            return PAIRABLE_STATUSES
        return (STATUS_YES,)

    @property
    def sign_ups(self) -> List[SignUp]:
        """Every sign-up, including declined ones."""
        return list(self._sign_ups.values())

    def participants(self) -> List[SignUp]:
        """Sign-ups that take part in pairing, in roster order."""
        statuses = self.pairable_statuses
        return [s for s in self._sign_ups.values() if s.status in statuses]

    def athletes(self) -> List[SignUp]:
        return [s for s in self.participants() if s.is_athlete]

    def guides(self) -> List[SignUp]:
        return [s for s in self.participants() if s.is_guide]

    def get(self, user_id: UserId) -> Optional[SignUp]:
        """The participating sign-up for a user, or None."""
        sign_up = self._sign_ups.get(user_id)
        if sign_up is None or sign_up.status not in self.pairable_statuses:
            return None
        return sign_up

    def __contains__(self, user_id: object) -> bool:
        return isinstance(user_id, str) and self.get(user_id) is not None

    def __len__(self) -> int:
        return len(self.participants())

    def role_of(self, user_id: UserId) -> Optional[Role]:
        sign_up = self.get(user_id)
        return sign_up.role if sign_up else None

    def pace_of(self, user_id: UserId) -> Optional[Pace]:
        """Sign-up pace, falling back to the profile pace."""
        sign_up = self._sign_ups.get(user_id)
        if sign_up and sign_up.pace is not None:
            return sign_up.pace
        person = self.people.get(user_id)
        return person.pace if person else None

    def display_name(self, user_id: UserId) -> str:
        person = self.people.get(user_id)
        if person and person.display_name:
            return person.display_name
        return user_id

    def status_counts(self) -> Dict[str, int]:
        """Number of sign-ups per RSVP status."""
        counts = {STATUS_YES: 0, STATUS_MAYBE: 0}
        for sign_up in self._sign_ups.values():
            counts[sign_up.status] = counts.get(sign_up.status, 0) + 1
        return counts
