"""Contains the click-to-select roster list widget."""

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

from typing import Callable, Dict, List, Optional

from PyQt6 import QtGui, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from guidepairing.constants import NO_PACE_LABEL
from guidepairing.models.pace import format_pace
from guidepairing.models.person import Roster, SignUp
from guidepairing.pairing.compatibility import severity_color
from guidepairing.type_hints import Severity, UserId


class PersonListWidget(QtWidgets.QListWidget):
    """QListWidget subclass listing athletes or guides for click-to-pair.

    Each row stores the user id under ``Qt.ItemDataRole.UserRole``. A left
    click emits :attr:`person_clicked`; the window decides what the click
    means.
    """

    person_clicked = pyqtSignal(str)

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.itemClicked.connect(self._on_item_clicked)

    def _on_item_clicked(self, item: QtWidgets.QListWidgetItem) -> None:
        user_id: Optional[UserId] = item.data(Qt.ItemDataRole.UserRole)
        if user_id:
            self.person_clicked.emit(user_id)

    def populate(
        self,
        sign_ups: List[SignUp],
        roster: Roster,
        selected_id: Optional[UserId] = None,
        severity_of: Optional[Callable[[UserId], Severity]] = None,
        label_of: Optional[Callable[[UserId], str]] = None,
        colors: Optional[Dict[str, str]] = None,
    ) -> None:
        """Rebuild the rows.

        Args:
            sign_ups: Rows in display order
            roster: Used for names and paces
            selected_id: Row to show as armed
            severity_of: Pace severity per row, for highlighting
            label_of: Accessible label per row
            colors: Highlight colour per severity
        """
        self.blockSignals(True)
        self.clear()
        for sign_up in sign_ups:
            user_id = sign_up.user_id
            pace = format_pace(roster.pace_of(user_id)) or NO_PACE_LABEL
            item = QtWidgets.QListWidgetItem(f"{roster.display_name(user_id)}  ({pace})")
            item.setData(Qt.ItemDataRole.UserRole, user_id)
            if sign_up.notes:
                item.setToolTip(sign_up.notes)
            if label_of is not None:
                item.setData(Qt.ItemDataRole.AccessibleTextRole, label_of(user_id))
            if severity_of is not None:
                color = severity_color(severity_of(user_id), colors)
                if color:
                    item.setBackground(QtGui.QBrush(QtGui.QColor(color)))
            self.addItem(item)
            if user_id == selected_id:
                item.setSelected(True)
                font = item.font()
                font.setBold(True)
                item.setFont(font)
        self.blockSignals(False)
