"""Main GUI window for Guide Pairing."""

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


import logging
from pathlib import Path
from typing import Optional

from PyQt6 import QtGui, QtWidgets
from PyQt6.QtCore import QFileInfo, Qt
from PyQt6.QtGui import QAction, QCloseEvent

from guidepairing import APP_NAME, APP_VERSION
from guidepairing.constants import SAVE_FILE_FILTER, SORT_ASCENDING
from guidepairing.controllers.session import PairingSession
from guidepairing.exceptions import GuidePairingException, PersistenceException
from guidepairing.gui.widgets import PairingsTreeWidget, PersonListWidget
from guidepairing.models.config import EditorConfig
from guidepairing.pairing.compatibility import describe_candidate
from guidepairing.persistence.json_file import JsonFileGateway
from guidepairing.utils import setup_logger

logger = setup_logger(__name__)


class GuidePairingMainWindow(QtWidgets.QMainWindow):
    """Main application window: athletes, unpaired guides and current pairings."""

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self.config = config or EditorConfig()
        self.session: Optional[PairingSession] = None
        self._current_filepath: Optional[str] = None

        self._setup_ui()
        self._update_ui_state()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 1100, 700)
        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QtWidgets.QHBoxLayout(central_widget)

        self.athlete_list = PersonListWidget(self)
        self.athlete_list.person_clicked.connect(self._on_athlete_clicked)
        self.guide_list = PersonListWidget(self)
        self.guide_list.person_clicked.connect(self._on_guide_clicked)
        self.pairings_tree = PairingsTreeWidget(self)
        self.pairings_tree.remove_requested.connect(self._on_remove_requested)
        self.pairings_tree.unpair_all_requested.connect(self._on_unpair_all_requested)

        for title, widget in (
            ("Athletes", self.athlete_list),
            ("Unpaired Guides", self.guide_list),
            ("Pairings", self.pairings_tree),
        ):
            group = QtWidgets.QGroupBox(title)
            layout = QtWidgets.QVBoxLayout(group)
            layout.addWidget(widget)
            main_layout.addWidget(group)

        self._setup_menu()
        self._setup_toolbar()

        escape = QtGui.QShortcut(QtGui.QKeySequence(Qt.Key.Key_Escape), self)
        escape.activated.connect(self._clear_selection)

        self.statusBar().showMessage("Ready - Open an event file.")
        logging.info(f"{APP_NAME} v{APP_VERSION} started.")

    def _setup_menu(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        self.open_action = self._create_action("&Open Event...", self.open_event, "Ctrl+O")
        self.save_action = self._create_action(
            "&Save Pairings", self.save_pairings, "Ctrl+S"
        )
        self.discard_action = self._create_action(
            "&Discard Changes", self.discard_changes
        )
        file_menu.addActions([self.open_action, self.save_action, self.discard_action])
        file_menu.addSeparator()
        file_menu.addAction(self._create_action("E&xit", self.close, "Ctrl+Q"))

        pairing_menu = menu_bar.addMenu("&Pairings")
        self.sort_action = self._create_action(
            "Toggle Pace &Sort", self.toggle_sort, "Ctrl+T"
        )
        self.clear_selection_action = self._create_action(
            "Clear &Selection", self._clear_selection
        )
        pairing_menu.addActions([self.sort_action, self.clear_selection_action])

    def _create_action(
        self, text: str, slot: callable, shortcut: str = "", tooltip: str = ""
    ) -> QAction:
        """Create and configure a QAction.

        Arguments
        ---------
            text: The text to display for the action.
            slot: The function to call when the action is triggered.
            shortcut: Optional keyboard shortcut (e.g., "Ctrl+S").
            tooltip: Optional tooltip to show on hover.

        Returns
        -------
            The configured QAction.
        """
        action = QAction(text, self)
        action.triggered.connect(slot)
        if shortcut:
            action.setShortcut(QtGui.QKeySequence(shortcut))
        if tooltip:
            action.setToolTip(tooltip)
            action.setStatusTip(tooltip)
        return action

    def _setup_toolbar(self) -> None:
        toolbar = self.addToolBar("Main Toolbar")
        toolbar.setObjectName("MainToolbar")
        toolbar.setMovable(False)
        toolbar.addActions([self.open_action, self.save_action])
        toolbar.addSeparator()
        toolbar.addAction(self.sort_action)

    # --- session ---

    def set_session(self, session: PairingSession, filepath: Optional[str] = None) -> None:
        self.session = session
        self._current_filepath = filepath
        self.refresh()
        self._update_ui_state()

    def open_event(self) -> None:
        if not self.check_save_before_proceeding():
            return
        filename, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Open Event", "", SAVE_FILE_FILTER
        )
        if filename:
            self.load_event_file(filename)

    def load_event_file(self, filename: str) -> bool:
        try:
            gateway, event_id = JsonFileGateway.for_file(filename)
            session = PairingSession.load(event_id, gateway, self.config)
        except GuidePairingException as e:
            logging.exception("Error loading event:")
            QtWidgets.QMessageBox.critical(
                self, "Load Error", f"Could not load event file:\n{e}"
            )
            return False
        self.set_session(session, filename)
        self.statusBar().showMessage(
            f"Loaded event from {QFileInfo(filename).fileName()}"
        )
        return True

    def save_pairings(self) -> bool:
        if self.session is None:
            return False
        try:
            self.session.save()
        except PersistenceException as e:
            QtWidgets.QMessageBox.critical(
                self, "Save Error", f"Could not save pairings:\n{e}"
            )
            self._update_ui_state()
            return False
        self.statusBar().showMessage(
            f"Pairings saved to {QFileInfo(self._current_filepath or '').fileName()}"
        )
        self._update_ui_state()
        return True

    def discard_changes(self) -> None:
        if self.session is None or not self.session.has_unsaved_changes:
            return
        self.session.discard_changes()
        self.refresh()
        self.statusBar().showMessage("Changes discarded")

    def toggle_sort(self) -> None:
        if self.session is None:
            return
        direction = self.session.toggle_sort()
        self.refresh()
        order = "slowest" if direction == SORT_ASCENDING else "fastest"
        self.statusBar().showMessage(f"Sorted by pace, {order} first")

    # --- click handling ---

    def _on_athlete_clicked(self, athlete_id: str) -> None:
        if self.session is None:
            return
        self.session.click_athlete(athlete_id)
        self._after_click()

    def _on_guide_clicked(self, guide_id: str) -> None:
        if self.session is None:
            return
        self.session.click_guide(guide_id)
        self._after_click()

    def _after_click(self) -> None:
        self.refresh()
        if self.session.announcement:
            self.statusBar().showMessage(self.session.announcement)

    def _clear_selection(self) -> None:
        if self.session is None:
            return
        self.session.clear_selection()
        self.refresh()

    def _on_remove_requested(self, head_id: str, member_id: str) -> None:
        if self.session is None:
            return
        if self.session.remove_pairing(head_id, member_id):
            self.statusBar().showMessage(self.session.announcement)
        self.refresh()

    def _on_unpair_all_requested(self, head_id: str) -> None:
        if self.session is None:
            return
        released = self.session.unpair_all(head_id)
        self.refresh()
        self.statusBar().showMessage(
            f"Released {len(released)} from {self.session.roster.display_name(head_id)}"
        )

    # --- display ---

    def refresh(self) -> None:
        """Re-read every list from the session."""
        session = self.session
        if session is None:
            self.athlete_list.clear()
            self.guide_list.clear()
            self.pairings_tree.clear()
            return
        roster = session.roster
        armed_athlete = session.selected_athlete_id
        self.athlete_list.populate(
            session.athletes_list(),
            roster,
            selected_id=armed_athlete,
            label_of=lambda user_id: describe_candidate(roster, user_id),
        )
        self.guide_list.populate(
            session.unpaired_guides_list(),
            roster,
            selected_id=session.selected_guide_id,
            severity_of=session.candidate_severity,
            label_of=lambda user_id: describe_candidate(roster, user_id, armed_athlete),
            colors=session.config.severity_colors,
        )
        self.pairings_tree.populate(session.assignment, roster)
        self._update_ui_state()

    def _update_ui_state(self):
        has_session = self.session is not None
        dirty = has_session and self.session.has_unsaved_changes
        self.save_action.setEnabled(dirty)
        self.discard_action.setEnabled(dirty)
        self.sort_action.setEnabled(has_session)
        self.clear_selection_action.setEnabled(has_session)

        title = APP_NAME
        if self._current_filepath:
            title += f" - {Path(self._current_filepath).name}"
        if dirty:
            title += "*"
        self.setWindowTitle(title)

    def check_save_before_proceeding(self) -> bool:
        if self.session is None or not self.session.has_unsaved_changes:
            return True

        msgbox = QtWidgets.QMessageBox(self)
        msgbox.setWindowTitle("Unsaved Changes")
        msgbox.setText("You have unsaved pairings. Do you want to save them?")
        msgbox.setIcon(QtWidgets.QMessageBox.Icon.Warning)

        btn_save = QtWidgets.QPushButton("Save")
        btn_discard = QtWidgets.QPushButton("Close without Saving")
        btn_cancel = QtWidgets.QPushButton("Cancel")
        msgbox.addButton(btn_save, QtWidgets.QMessageBox.ButtonRole.AcceptRole)
        msgbox.addButton(btn_discard, QtWidgets.QMessageBox.ButtonRole.DestructiveRole)
        msgbox.addButton(btn_cancel, QtWidgets.QMessageBox.ButtonRole.RejectRole)

        msgbox.exec()
        clicked = msgbox.clickedButton()

        if clicked == btn_save:
            return self.save_pairings()
        elif clicked == btn_discard:
            return True
        else:
            return False

    def closeEvent(self, event: QCloseEvent):
        if self.check_save_before_proceeding():
            logging.info(f"{APP_NAME} closing.")
            event.accept()
        else:
            event.ignore()
