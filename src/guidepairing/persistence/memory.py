"""In-memory gateway for tests and demos."""

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

import copy
from typing import Any, Dict, Optional

from guidepairing.exceptions import EventNotFoundException, SaveFailedException
from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.person import Roster
from guidepairing.persistence.gateway import PersistenceGateway, parse_event_document
from guidepairing.type_hints import UserId


class InMemoryGateway(PersistenceGateway):
    """Keeps event documents in a dictionary.

    Parameters
    ----------
    events : dict of str to dict, optional
        Event documents keyed by event id, in the same shape as the JSON
        event files.
    """

    def __init__(self, events: Optional[Dict[str, Dict[str, Any]]] = None):
        self.events: Dict[str, Dict[str, Any]] = copy.deepcopy(events or {})
        self.save_count = 0

    def _document(self, event_id: str) -> Dict[str, Any]:
        try:
            return self.events[event_id]
        except KeyError:
            raise EventNotFoundException(f"No event with id {event_id!r}") from None

    def load_roster(self, event_id: str, include_maybe: bool = True) -> Roster:
        _, sign_ups, people = parse_event_document(self._document(event_id))
        return Roster(sign_ups, people, include_maybe=include_maybe)

    def load_assignment(self, event_id: str) -> PairingAssignment:
        event, _, _ = parse_event_document(self._document(event_id))
        return PairingAssignment.from_dict(copy.deepcopy(event.get("pairings")))

    def save_assignment(self, event_id: str, assignment: PairingAssignment) -> None:
        document = self._document(event_id)
        if not isinstance(document.get("event"), dict):
            raise SaveFailedException(f"Event {event_id!r} has no 'event' object")
        document["event"]["pairings"] = assignment.to_dict()
        self.save_count += 1

    def display_name(self, user_id: UserId) -> Optional[str]:
        for document in self.events.values():
            user = document.get("users", {}).get(user_id)
            if isinstance(user, str):
                return user
            if isinstance(user, dict) and user.get("display_name"):
                return user["display_name"]
        return None
