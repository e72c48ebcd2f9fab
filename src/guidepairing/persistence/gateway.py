"""Storage boundary for event rosters and pairing assignments.

One gateway implementation is chosen when the application starts, through
:func:`create_gateway`. The pairing core only sees the
:class:`PersistenceGateway` interface.
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

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from guidepairing.constants import PACED_ACTIVITIES
from guidepairing.exceptions import (
    InvalidConfigurationException,
    InvalidEventDataException,
)
from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.person import Person, Roster, SignUp
from guidepairing.type_hints import UserId
from guidepairing.utils import setup_logger
from guidepairing.utils.validation import (
    validate_activity,
    validate_non_empty,
    validate_pace,
    validate_role,
    validate_status,
)

logger = setup_logger(__name__)


class PersistenceGateway(ABC):
    """What the pairing editor needs from storage."""

    @abstractmethod
    def load_roster(self, event_id: str, include_maybe: bool = True) -> Roster:
        """Sign-ups for an event, with display names resolved."""

    @abstractmethod
    def load_assignment(self, event_id: str) -> PairingAssignment:
        """A fresh deep copy of the event's stored pairings."""

    @abstractmethod
    def save_assignment(self, event_id: str, assignment: PairingAssignment) -> None:
        """Replace the event's stored pairings with ``assignment``.

        Raises
        ------
        SaveFailedException
            If the write did not happen.
        """

    @abstractmethod
    def display_name(self, user_id: UserId) -> Optional[str]:
        """Display name for a user, None if unknown."""


# --- event document parsing shared by the gateways ---


def _check(result, context: str) -> Any:
    if not result.is_valid:
        raise InvalidEventDataException(f"{context}: {result.error_message}")
    return result.sanitized_value


def parse_sign_up(data: Dict[str, Any]) -> SignUp:
    """Build a SignUp from a stored record, validating every field."""
    if not isinstance(data, dict):
        raise InvalidEventDataException(f"Sign-up must be a mapping: {data!r}")
    user_id = _check(
        validate_non_empty(data.get("user_id") or data.get("userId"), "user_id"),
        "Sign-up",
    )
    context = f"Sign-up for {user_id}"
    _check(validate_role(data.get("role")), context)
    try:
        sign_up = SignUp.from_dict({**data, "user_id": user_id})
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidEventDataException(f"{context}: {e}") from e
    _check(validate_status(sign_up.status), context)
    _check(validate_activity(sign_up.activity), context)
    if sign_up.pace is not None and sign_up.activity not in PACED_ACTIVITIES:
        logger.warning(f"{context}: ignoring pace for activity {sign_up.activity}")
        sign_up = dataclasses.replace(sign_up, pace=None)
    if sign_up.pace is not None:
        pace_check = validate_pace(sign_up.pace)
        if not pace_check:
            # stored paces outside the entry limits are kept but reported
            logger.warning(f"{context}: {pace_check.error_message}")
    return sign_up


def parse_people(data: Dict[str, Any]) -> Dict[UserId, Person]:
    """Users directory: values are either a display name or a person record."""
    people: Dict[UserId, Person] = {}
    for user_id, value in (data or {}).items():
        if isinstance(value, str):
            people[user_id] = Person(id=user_id, display_name=value)
        elif isinstance(value, dict):
            try:
                people[user_id] = Person.from_dict({"id": user_id, **value})
            except (AttributeError, TypeError, ValueError) as e:
                raise InvalidEventDataException(
                    f"Bad user record for {user_id}: {e}"
                ) from e
        else:
            raise InvalidEventDataException(f"Bad user record for {user_id}")
    return people


def parse_event_document(
    document: Dict[str, Any],
) -> Tuple[Dict[str, Any], List[SignUp], Dict[UserId, Person]]:
    """Split an event document into event record, sign-ups and directory."""
    if not isinstance(document, dict) or not isinstance(document.get("event"), dict):
        raise InvalidEventDataException("Event document needs an 'event' object")
    sign_ups = [parse_sign_up(s) for s in document.get("sign_ups", [])]
    people = parse_people(document.get("users", {}))
    return document["event"], sign_ups, people


def create_gateway(kind: str, **kwargs) -> PersistenceGateway:
    """Select a gateway implementation once at startup.

    Args:
        kind: ``"memory"`` or ``"json"``
        **kwargs: passed to the implementation's constructor

    Raises:
        InvalidConfigurationException: for an unknown kind
    """
    from guidepairing.persistence.json_file import JsonFileGateway
    from guidepairing.persistence.memory import InMemoryGateway

    gateways = {"memory": InMemoryGateway, "json": JsonFileGateway}
    try:
        gateway_cls = gateways[kind]
    except KeyError:
        raise InvalidConfigurationException(
            f"Unknown gateway kind {kind!r}; expected one of {sorted(gateways)}"
        ) from None
    return gateway_cls(**kwargs)
