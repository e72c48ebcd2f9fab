"""Data model for an event's pairing assignment."""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from guidepairing.exceptions import InvalidEventDataException
from guidepairing.type_hints import AthleteId, PairingEntryDict, PairingsDict, UserId


@dataclass
class PairingEntry:
    """The group headed by one athlete.

    Attributes
    ----------
    guides : list of str
        Guide ids paired with the head athlete.
    athletes : list of str
        Athlete ids absorbed into this group.
    """

    guides: List[UserId] = field(default_factory=list)
    athletes: List[UserId] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.guides and not self.athletes

    @property
    def members(self) -> List[UserId]:
        """Guides then athletes."""
        return self.guides + self.athletes

    def __contains__(self, user_id: object) -> bool:
        return user_id in self.guides or user_id in self.athletes

    def copy(self) -> "PairingEntry":
        return PairingEntry(guides=list(self.guides), athletes=list(self.athletes))

    def to_dict(self) -> PairingEntryDict:
        return {"guides": list(self.guides), "athletes": list(self.athletes)}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PairingEntry":
        data = data or {}
        guides = data.get("guides") or []
        athletes = data.get("athletes") or []
        if not isinstance(guides, list) or not isinstance(athletes, list):
            raise InvalidEventDataException(
                "Pairing entry members must be lists of user ids"
            )
        return cls(guides=[str(g) for g in guides], athletes=[str(a) for a in athletes])


class PairingAssignment:
    """Mapping from head athlete id to the guides and athletes grouped with them.

    Equality is structural and ignores both key order and member order.
    Entries left empty are treated as absent when comparing and are not
    written out by :meth:`to_dict`.
    """

    def __init__(self, entries: Optional[Dict[AthleteId, PairingEntry]] = None):
        self._entries: Dict[AthleteId, PairingEntry] = dict(entries or {})

    # --- mapping access ---

    def __contains__(self, athlete_id: object) -> bool:
        return athlete_id in self._entries

    def __iter__(self) -> Iterator[AthleteId]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PairingAssignment({self.to_dict()!r})"

    def items(self) -> List[Tuple[AthleteId, PairingEntry]]:
        return list(self._entries.items())

    def get(self, athlete_id: AthleteId) -> Optional[PairingEntry]:
        return self._entries.get(athlete_id)

    def ensure_entry(self, athlete_id: AthleteId) -> PairingEntry:
        """Return the athlete's entry, creating an empty one if needed."""
        entry = self._entries.get(athlete_id)
        if entry is None:
            entry = PairingEntry()
            self._entries[athlete_id] = entry
        return entry

    def remove_entry(self, athlete_id: AthleteId) -> Optional[PairingEntry]:
        return self._entries.pop(athlete_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def replace_with(self, other: "PairingAssignment") -> None:
        """Make this assignment a deep copy of ``other``, keeping identity."""
        self._entries = {k: e.copy() for k, e in other._entries.items()}

    # --- queries ---

    def has_content(self, athlete_id: AthleteId) -> bool:
        """Whether the athlete heads a non-empty group."""
        entry = self._entries.get(athlete_id)
        return entry is not None and not entry.is_empty

    def guide_owner(self, guide_id: UserId) -> Optional[AthleteId]:
        """Head athlete whose guides include ``guide_id``."""
        for athlete_id, entry in self._entries.items():
            if guide_id in entry.guides:
                return athlete_id
        return None

    def member_owner(
        self, user_id: UserId, exclude: Optional[AthleteId] = None
    ) -> Optional[AthleteId]:
        """Head athlete whose group contains ``user_id`` in either list."""
        for athlete_id, entry in self._entries.items():
            if athlete_id == exclude:
                continue
            if user_id in entry:
                return athlete_id
        return None

    def paired_guide_ids(self) -> Set[UserId]:
        return {g for entry in self._entries.values() for g in entry.guides}

    def absorbed_athlete_ids(self) -> Set[UserId]:
        return {a for entry in self._entries.values() for a in entry.athletes}

    def non_empty_items(self) -> List[Tuple[AthleteId, PairingEntry]]:
        return [(k, e) for k, e in self._entries.items() if not e.is_empty]

    # --- integrity ---

    def check_invariants(self) -> List[str]:
        """List every structural problem; an empty list means consistent."""
        problems: List[str] = []
        member_counts: Counter = Counter()
        for athlete_id, entry in self._entries.items():
            member_counts.update(entry.guides)
            member_counts.update(entry.athletes)
            if athlete_id in entry:
                problems.append(f"{athlete_id} is paired with themselves")
        for user_id, count in sorted(member_counts.items()):
            if count > 1:
                problems.append(f"{user_id} is assigned {count} times")
        for user_id in sorted(self.absorbed_athlete_ids()):
            if self.has_content(user_id):
                problems.append(
                    f"{user_id} is nested in another group but heads their own"
                )
        return problems

    # --- copying and comparison ---

    def copy(self) -> "PairingAssignment":
        """Deep copy of the assignment."""
        return PairingAssignment(
            {athlete_id: entry.copy() for athlete_id, entry in self._entries.items()}
        )

    def _normalized(self) -> Dict[AthleteId, Tuple[FrozenSet[str], FrozenSet[str]]]:
        return {
            athlete_id: (frozenset(entry.guides), frozenset(entry.athletes))
            for athlete_id, entry in self._entries.items()
            if not entry.is_empty
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairingAssignment):
            return NotImplemented
        return self._normalized() == other._normalized()

    __hash__ = None  # mutable

    # --- serialization ---

    def to_dict(self) -> PairingsDict:
        """Serialize to the stored ``pairings`` shape, skipping empty entries."""
        return {
            athlete_id: entry.to_dict()
            for athlete_id, entry in sorted(self._entries.items())
            if not entry.is_empty
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PairingAssignment":
        """Deserialize from the stored ``pairings`` shape.

        A missing field or an empty map means no pairings yet.
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise InvalidEventDataException("pairings must be a mapping")
        return cls(
            {str(athlete_id): PairingEntry.from_dict(entry) for athlete_id, entry in data.items()}
        )
