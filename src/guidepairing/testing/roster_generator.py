"""Random Roster Generator - builds event rosters and pairing sessions for tests.

Rosters can be described compactly (``"A1:athlete:8:00"``) or generated at
random from a seed, and random click sequences can be replayed against a
session to exercise the pairing rules.
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

import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from guidepairing.constants import (
    PACE_MAX_MINUTES,
    PACE_MIN_MINUTES,
    PACE_SECOND_STEPS,
    ROLE_ATHLETE,
    ROLE_GUIDE,
    STATUS_MAYBE,
    STATUS_NO,
    STATUS_YES,
)
from guidepairing.controllers.session import PairingSession
from guidepairing.models.pace import Pace
from guidepairing.models.person import Person, Roster, SignUp
from guidepairing.utils import setup_logger

logger = setup_logger(__name__)


def sign_up(
    user_id: str,
    role: str = ROLE_ATHLETE,
    pace: Optional[str] = None,
    status: str = STATUS_YES,
) -> SignUp:
    """Shorthand SignUp with the pace given as ``M:SS`` text."""
    return SignUp(
        user_id=user_id,
        role=role,
        status=status,
        pace=Pace.parse(pace) if pace else None,
    )


def build_roster(*entries: str, include_maybe: bool = True) -> Roster:
    """Build a roster from ``"id:role[:M:SS][:status]"`` strings.

    Example:
        >>> roster = build_roster("A1:athlete:8:00", "G1:guide:8:30", "A2:athlete")
    """
    sign_ups = []
    people = {}
    for entry in entries:
        parts = entry.split(":")
        user_id, role = parts[0], parts[1]
        rest = parts[2:]
        status = STATUS_YES
        if rest and rest[-1] in (STATUS_YES, STATUS_MAYBE, STATUS_NO):
            status = rest.pop()
        pace = ":".join(rest) if rest else None
        sign_ups.append(sign_up(user_id, role, pace, status))
        people[user_id] = Person(id=user_id, display_name=f"Runner {user_id}", role=role)
    return Roster(sign_ups, people, include_maybe=include_maybe)


@dataclass
class RosterGeneratorConfig:
    """Configuration for the random roster generator."""

    num_athletes: int = 8
    num_guides: int = 5
    seed: Optional[int] = None
    no_pace_rate: float = 0.2
    maybe_rate: float = 0.15
    declined_rate: float = 0.1


class RandomRosterGenerator:
    """Creates random rosters and click sequences."""

    def __init__(self, config: RosterGeneratorConfig):
        self.config = config
        self.random = (
            random.Random(config.seed) if config.seed is not None else random.Random()
        )

    def _pace(self) -> Optional[Pace]:
        if self.random.random() < self.config.no_pace_rate:
            return None
        return Pace(
            self.random.randint(PACE_MIN_MINUTES, PACE_MAX_MINUTES - 6),
            self.random.choice(PACE_SECOND_STEPS),
        )

    def _status(self) -> str:
        roll = self.random.random()
        if roll < self.config.declined_rate:
            return STATUS_NO
        if roll < self.config.declined_rate + self.config.maybe_rate:
            return STATUS_MAYBE
        return STATUS_YES

    def create_roster(self) -> Roster:
        sign_ups: List[SignUp] = []
        people: Dict[str, Person] = {}
        for role, prefix, count in (
            (ROLE_ATHLETE, "A", self.config.num_athletes),
            (ROLE_GUIDE, "G", self.config.num_guides),
        ):
            for i in range(1, count + 1):
                user_id = f"{prefix}{i}"
                sign_ups.append(
                    SignUp(
                        user_id=user_id, role=role, status=self._status(), pace=self._pace()
                    )
                )
                people[user_id] = Person(id=user_id, display_name=f"{role.title()} {i}", role=role)
        logger.debug(f"Created roster with {len(sign_ups)} sign-ups")
        return Roster(sign_ups, people)

    def random_clicks(self, roster: Roster, count: int) -> List[Tuple[str, str]]:
        """Random ``("athlete" | "guide" | "clear", id)`` events.

        Ids are drawn from every sign-up, declined ones included, plus an
        id that is not on the roster at all.
        """
        ids = [s.user_id for s in roster.sign_ups] + ["ghost"]
        events = []
        for _ in range(count):
            kind = self.random.choices(
                ["athlete", "guide", "clear"], weights=[6, 4, 1]
            )[0]
            events.append((kind, self.random.choice(ids)))
        return events

    def random_removals(
        self, session: PairingSession, count: int
    ) -> Iterable[Tuple[str, str]]:
        """Random (head, member) removal targets drawn from the live assignment."""
        for _ in range(count):
            items = session.assignment.non_empty_items()
            if not items:
                return
            head, entry = self.random.choice(items)
            yield head, self.random.choice(entry.members)


def replay(session: PairingSession, events: Iterable[Tuple[str, str]]) -> List[Any]:
    """Feed click events to a session and collect the verdicts."""
    verdicts = []
    for kind, user_id in events:
        if kind == "athlete":
            verdicts.append(session.click_athlete(user_id))
        elif kind == "guide":
            verdicts.append(session.click_guide(user_id))
        else:
            session.clear_selection()
            verdicts.append(None)
    return verdicts
