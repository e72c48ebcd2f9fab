"""Gateway storing each event as a JSON file."""

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

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from guidepairing.constants import SAVE_FILE_EXTENSION
from guidepairing.exceptions import (
    EventNotFoundException,
    InvalidEventDataException,
    LoadFailedException,
    PersistenceException,
    SaveFailedException,
)
from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.person import Roster
from guidepairing.persistence.gateway import (
    PersistenceGateway,
    parse_event_document,
    parse_people,
)
from guidepairing.type_hints import UserId
from guidepairing.utils import setup_logger

logger = setup_logger(__name__)


class JsonFileGateway(PersistenceGateway):
    """Reads and writes ``<event_id>.json`` files in a directory.

    A file holds ``{"event": {..., "pairings": {...}}, "sign_ups": [...],
    "users": {...}}``. Saving rewrites only ``event.pairings`` and keeps
    every other field as found on disk.

    Parameters
    ----------
    directory : str or Path
        Folder holding the event files.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    @classmethod
    def for_file(cls, path: Union[str, Path]) -> Tuple["JsonFileGateway", str]:
        """Gateway and event id for a single event file."""
        path = Path(path)
        return cls(path.parent), path.stem

    def path_for(self, event_id: str) -> Path:
        return self.directory / f"{event_id}{SAVE_FILE_EXTENSION}"

    def _read(self, event_id: str) -> Dict[str, Any]:
        path = self.path_for(event_id)
        if not path.exists():
            raise EventNotFoundException(f"No event file at {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidEventDataException(f"{path} is not valid JSON: {e}") from e
        except OSError as e:
            raise LoadFailedException(f"Could not read {path}: {e}") from e

    def load_roster(self, event_id: str, include_maybe: bool = True) -> Roster:
        _, sign_ups, people = parse_event_document(self._read(event_id))
        logger.info(f"Loaded {len(sign_ups)} sign-up(s) for event {event_id}")
        return Roster(sign_ups, people, include_maybe=include_maybe)

    def load_assignment(self, event_id: str) -> PairingAssignment:
        event, _, _ = parse_event_document(self._read(event_id))
        return PairingAssignment.from_dict(event.get("pairings"))

    def save_assignment(self, event_id: str, assignment: PairingAssignment) -> None:
        path = self.path_for(event_id)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            document = self._read(event_id)
            if not isinstance(document, dict) or not isinstance(
                document.get("event"), dict
            ):
                raise InvalidEventDataException("Event document needs an 'event' object")
            document["event"]["pairings"] = assignment.to_dict()
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=4, ensure_ascii=False)
            os.replace(tmp_path, path)
        except (OSError, TypeError, PersistenceException) as e:
            logger.exception(f"Error saving pairings for event {event_id}:")
            if tmp_path.exists():
                tmp_path.unlink()
            raise SaveFailedException(f"Could not save {path}: {e}") from e
        logger.info(f"Pairings for event {event_id} saved to {path}")

    def display_name(self, user_id: UserId) -> Optional[str]:
        for path in sorted(self.directory.glob(f"*{SAVE_FILE_EXTENSION}")):
            try:
                people = parse_people(self._read(path.stem).get("users", {}))
            except (InvalidEventDataException, LoadFailedException):
                logger.warning(f"Skipping unreadable event file {path}")
                continue
            person = people.get(user_id)
            if person is not None:
                return person.display_name
        return None
