"""Pairing editor session for a single event.

A session owns the live assignment, a baseline snapshot for dirty checking,
the click selection and the roster lists. Front ends call its methods and
re-read its lists afterwards.
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

from typing import List, Optional

from guidepairing.constants import SEVERITY_NONE
from guidepairing.controllers.pairing_manager import PairingManager
from guidepairing.controllers.roster import RosterProjector
from guidepairing.controllers.selection import SelectionOutcome, SelectionStateMachine
from guidepairing.exceptions import PersistenceException, SaveFailedException
from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.config import EditorConfig
from guidepairing.models.person import Roster, SignUp
from guidepairing.pairing.compatibility import score_compatibility
from guidepairing.pairing.validator import PairingCheck
from guidepairing.persistence.gateway import PersistenceGateway
from guidepairing.type_hints import AthleteId, Severity, SortDirection, UserId
from guidepairing.utils import setup_logger

logger = setup_logger(__name__)


class PairingSession:
    """One administrator's editing session for one event's pairings.

    Args:
        event_id: Event being edited
        roster: Participants of the event
        assignment: Pairings loaded from storage; also used as the baseline
        gateway: Storage used by :meth:`save`, optional for offline use
        config: Editor settings
    """

    def __init__(
        self,
        event_id: str,
        roster: Roster,
        assignment: Optional[PairingAssignment] = None,
        gateway: Optional[PersistenceGateway] = None,
        config: Optional[EditorConfig] = None,
    ):
        self.event_id = event_id
        self.roster = roster
        self.gateway = gateway
        self.config = config or EditorConfig()
        self.assignment = assignment.copy() if assignment else PairingAssignment()
        self.baseline = self.assignment.copy()
        self.manager = PairingManager(self.assignment, roster)
        self.selection = SelectionStateMachine()
        self.projector = RosterProjector(
            roster, self.assignment, self.config.sort_direction
        )
        # last message for the user, e.g. shown in a status bar
        self.announcement: Optional[str] = None

    @classmethod
    def load(
        cls,
        event_id: str,
        gateway: PersistenceGateway,
        config: Optional[EditorConfig] = None,
    ) -> "PairingSession":
        """Start a session from stored event data."""
        config = config or EditorConfig()
        roster = gateway.load_roster(event_id, include_maybe=config.include_maybe)
        assignment = gateway.load_assignment(event_id)
        problems = assignment.check_invariants()
        if problems:
            logger.warning(f"Stored pairings for {event_id} are inconsistent: {problems}")
        logger.info(
            f"Opened event {event_id}: {len(roster)} participant(s), "
            f"{len(assignment.non_empty_items())} pairing group(s)"
        )
        return cls(event_id, roster, assignment, gateway, config)

    # --- selection ---

    @property
    def selected_athlete_id(self) -> Optional[AthleteId]:
        return self.selection.selected_athlete_id

    @property
    def selected_guide_id(self) -> Optional[UserId]:
        return self.selection.selected_guide_id

    def click_athlete(self, athlete_id: AthleteId) -> Optional[PairingCheck]:
        """Handle a click on an athlete row.

        Returns:
            The verdict when the click completed a pairing gesture, else None
        """
        return self._handle(self.selection.click_athlete(athlete_id))

    def click_guide(self, guide_id: UserId) -> Optional[PairingCheck]:
        """Handle a click on a guide row; see :meth:`click_athlete`."""
        return self._handle(self.selection.click_guide(guide_id))

    def clear_selection(self) -> None:
        self.selection.clear()

    def _handle(self, outcome: SelectionOutcome) -> Optional[PairingCheck]:
        if outcome.request is None:
            self.announcement = None
            return None
        return self._pair(outcome.request.target_id, outcome.request.candidate_id)

    def _pair(self, target_id: AthleteId, candidate_id: UserId) -> PairingCheck:
        verdict = self.manager.create_pairing(target_id, candidate_id)
        target = self.roster.display_name(target_id)
        candidate = self.roster.display_name(candidate_id)
        if verdict.allowed:
            self.announcement = f"Paired {candidate} with {target}"
        else:
            self.announcement = f"Cannot pair {candidate} with {target}: {verdict.reason}"
        return verdict

    # --- direct edits ---

    def create_pairing(self, target_id: AthleteId, candidate_id: UserId) -> PairingCheck:
        """Pair without going through the click selection."""
        self.selection.clear()
        return self._pair(target_id, candidate_id)

    def remove_pairing(self, target_id: AthleteId, candidate_id: UserId) -> bool:
        removed = self.manager.remove_pairing(target_id, candidate_id)
        if removed:
            self.announcement = (
                f"Removed {self.roster.display_name(candidate_id)} from "
                f"{self.roster.display_name(target_id)}"
            )
        return removed

    def unpair_all(self, target_id: AthleteId) -> List[UserId]:
        return self.manager.unpair_all(target_id)

    # --- lists ---

    @property
    def sort_direction(self) -> SortDirection:
        return self.projector.sort_direction

    def toggle_sort(self) -> SortDirection:
        return self.projector.toggle_sort()

    def athletes_list(self) -> List[SignUp]:
        return self.projector.athletes_list()

    def unpaired_guides_list(self) -> List[SignUp]:
        return self.projector.unpaired_guides_list()

    def candidate_severity(self, guide_id: UserId) -> Severity:
        """Pace severity of a guide against the armed athlete."""
        athlete_id = self.selection.selected_athlete_id
        if athlete_id is None:
            return SEVERITY_NONE
        return score_compatibility(
            self.roster.pace_of(athlete_id), self.roster.pace_of(guide_id)
        )

    # --- dirty state and persistence ---

    @property
    def has_unsaved_changes(self) -> bool:
        return self.assignment != self.baseline

    def discard_changes(self) -> None:
        """Return the live assignment to the last loaded or saved state."""
        self.assignment.replace_with(self.baseline)
        self.selection.clear()
        self.announcement = None

    def save(self) -> None:
        """Write the whole assignment to storage.

        On failure the live assignment and baseline are left as they were so
        the save can be retried.

        Raises:
            SaveFailedException: If there is no gateway or the write failed
        """
        if self.gateway is None:
            raise SaveFailedException("Session has no storage to save to")
        snapshot = self.assignment.copy()
        try:
            self.gateway.save_assignment(self.event_id, snapshot)
        except SaveFailedException:
            logger.exception(f"Error saving pairings for event {self.event_id}:")
            raise
        except (PersistenceException, OSError) as e:
            logger.exception(f"Error saving pairings for event {self.event_id}:")
            raise SaveFailedException(str(e)) from e
        self.baseline = snapshot
        self.announcement = "Pairings saved"
        logger.info(f"Saved pairings for event {self.event_id}")
