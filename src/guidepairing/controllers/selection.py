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

"""
Click-to-pair selection state.

This module turns two clicks on roster rows into a pairing request. It
knows nothing about widgets, so any front end (or a test) can drive it.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from guidepairing.type_hints import AthleteId, UserId


class SelectionPhase(Enum):
    """Which kind of person, if any, is armed for pairing."""

    IDLE = auto()  # Nothing selected
    ATHLETE_ARMED = auto()  # One athlete selected, waiting for a second click
    GUIDE_ARMED = auto()  # One guide selected, waiting for an athlete


@dataclass(frozen=True)
class SelectionState:
    """
    The armed selection.

    At most one of the two ids is set.

    Attributes
    ----------
    selected_athlete_id : str or None
        The armed athlete.
    selected_guide_id : str or None
        The armed guide.
    """

    selected_athlete_id: Optional[AthleteId] = None
    selected_guide_id: Optional[UserId] = None

    @property
    def phase(self) -> SelectionPhase:
        if self.selected_athlete_id is not None:
            return SelectionPhase.ATHLETE_ARMED
        if self.selected_guide_id is not None:
            return SelectionPhase.GUIDE_ARMED
        return SelectionPhase.IDLE

    @property
    def is_idle(self) -> bool:
        return self.phase == SelectionPhase.IDLE


IDLE = SelectionState()


@dataclass(frozen=True)
class PairingRequest:
    """A pairing the user asked for: ``candidate_id`` joins ``target_id``'s group."""

    target_id: AthleteId
    candidate_id: UserId


@dataclass(frozen=True)
class SelectionOutcome:
    """Result of feeding one event to the state machine.

    Attributes
    ----------
    state : SelectionState
        Selection after the event.
    request : PairingRequest or None
        Set when the event completed a pairing gesture.
    """

    state: SelectionState
    request: Optional[PairingRequest] = None


class SelectionStateMachine:
    """
    Tracks the armed athlete or guide and emits pairing requests.

    Transitions
    -----------
    - athlete while idle arms it; the same athlete again disarms
    - athlete while a guide is armed requests guide -> athlete
    - a different athlete while an athlete is armed requests that the first
      athlete joins the second one's group
    - guide while idle arms it; the same guide again disarms; a different
      guide replaces the armed one
    - guide while an athlete is armed requests guide -> athlete
    - clear always returns to idle

    Every transition that produces a request ends idle, whether or not the
    request is later accepted.
    """

    def __init__(self) -> None:
        self._state = IDLE

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected_athlete_id(self) -> Optional[AthleteId]:
        return self._state.selected_athlete_id

    @property
    def selected_guide_id(self) -> Optional[UserId]:
        return self._state.selected_guide_id

    def _to(
        self, state: SelectionState, request: Optional[PairingRequest] = None
    ) -> SelectionOutcome:
        self._state = state
        return SelectionOutcome(state=state, request=request)

    def click_athlete(self, athlete_id: AthleteId) -> SelectionOutcome:
        phase = self._state.phase
        if phase == SelectionPhase.GUIDE_ARMED:
            return self._to(
                IDLE, PairingRequest(athlete_id, self._state.selected_guide_id)
            )
        if phase == SelectionPhase.ATHLETE_ARMED:
            armed = self._state.selected_athlete_id
            if armed == athlete_id:
                return self._to(IDLE)
            # second-clicked athlete heads the group
            return self._to(IDLE, PairingRequest(athlete_id, armed))
        return self._to(SelectionState(selected_athlete_id=athlete_id))

    def click_guide(self, guide_id: UserId) -> SelectionOutcome:
        phase = self._state.phase
        if phase == SelectionPhase.ATHLETE_ARMED:
            return self._to(
                IDLE, PairingRequest(self._state.selected_athlete_id, guide_id)
            )
        if phase == SelectionPhase.GUIDE_ARMED and self._state.selected_guide_id == guide_id:
            return self._to(IDLE)
        return self._to(SelectionState(selected_guide_id=guide_id))

    def clear(self) -> SelectionOutcome:
        return self._to(IDLE)
