"""Guide Pairing entry point."""

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

import argparse
import platform
import sys
from typing import List, Optional

from PyQt6 import QtWidgets

from guidepairing import APP_NAME, APP_VERSION
from guidepairing.exceptions import ConfigurationException
from guidepairing.gui.mainwindow import GuidePairingMainWindow
from guidepairing.models.config import EditorConfig
from guidepairing.utils import setup_logger

logger = setup_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="guidepairing", description=f"{APP_NAME} - pair athletes with guides"
    )
    parser.add_argument("event", nargs="?", help="event file to open")
    parser.add_argument("--config", help="editor configuration file")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {APP_VERSION}"
    )
    return parser.parse_args(argv)


def run_app(event_file: Optional[str], config: EditorConfig) -> int:
    """Run the gui application.

    Returns
    -------
    int
        the exit code from app.exec()
    """
    app = QtWidgets.QApplication(sys.argv[:1])

    system = platform.system()
    if system == "Windows":
        app.setStyle("WindowsVista")
    elif system == "Darwin":
        app.setStyle("macos")
    else:
        app.setStyle("fusion")

    window = GuidePairingMainWindow(config)
    if event_file:
        window.load_event_file(event_file)
    window.show()

    return app.exec()


def main(argv: Optional[List[str]] = None):
    """Entry point."""
    args = parse_args(argv)
    try:
        config = EditorConfig.load(args.config)
    except ConfigurationException as e:
        logger.error("Could not load configuration: %s", e)
        sys.exit(2)
    exit_code = run_app(args.event, config)
    logger.info("run_app() exited with code: %s", exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
