"""Tree of current pairing groups."""

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

from typing import Optional

from PyQt6 import QtCore, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from guidepairing.models.assignment import PairingAssignment
from guidepairing.models.person import Roster


class PairingsTreeWidget(QtWidgets.QTreeWidget):
    """Shows each head athlete with their guides and absorbed athletes.

    Right-click a member to remove them from the group, or a head athlete
    to release everyone in it.
    """

    remove_requested = pyqtSignal(str, str)  # head athlete id, member id
    unpair_all_requested = pyqtSignal(str)

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setHeaderLabels(["Athlete", "Role"])
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.customContextMenuRequested.connect(self._show_context_menu)
        self.itemDoubleClicked.connect(self._on_item_double_clicked)

    def populate(self, assignment: PairingAssignment, roster: Roster) -> None:
        self.clear()
        for head_id, entry in sorted(
            assignment.non_empty_items(),
            key=lambda item: roster.display_name(item[0]).lower(),
        ):
            head = QtWidgets.QTreeWidgetItem([roster.display_name(head_id), "athlete"])
            head.setData(0, Qt.ItemDataRole.UserRole, (head_id, None))
            for guide_id in entry.guides:
                child = QtWidgets.QTreeWidgetItem([roster.display_name(guide_id), "guide"])
                child.setData(0, Qt.ItemDataRole.UserRole, (head_id, guide_id))
                head.addChild(child)
            for athlete_id in entry.athletes:
                child = QtWidgets.QTreeWidgetItem(
                    [roster.display_name(athlete_id), "athlete"]
                )
                child.setData(0, Qt.ItemDataRole.UserRole, (head_id, athlete_id))
                head.addChild(child)
            self.addTopLevelItem(head)
            head.setExpanded(True)
        self.resizeColumnToContents(0)

    def _on_item_double_clicked(self, item: QtWidgets.QTreeWidgetItem, _column: int) -> None:
        head_id, member_id = item.data(0, Qt.ItemDataRole.UserRole)
        if member_id is not None:
            self.remove_requested.emit(head_id, member_id)

    def _show_context_menu(self, pos: QtCore.QPoint) -> None:
        item = self.itemAt(pos)
        if item is None:
            return
        head_id, member_id = item.data(0, Qt.ItemDataRole.UserRole)
        menu = QtWidgets.QMenu(self)
        if member_id is None:
            action = menu.addAction("Unpair Everyone")
            action.triggered.connect(lambda: self.unpair_all_requested.emit(head_id))
        else:
            action = menu.addAction("Remove Pairing")
            action.triggered.connect(
                lambda: self.remove_requested.emit(head_id, member_id)
            )
        menu.exec(self.viewport().mapToGlobal(pos))
