"""Logging utilities."""

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
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from PyQt6 import QtCore

from guidepairing.constants import APP_NAME

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

LOG_FILE_NAME = "guide-pairing.log"

# one rotating file handler shared by every module logger
_file_handler: Optional[RotatingFileHandler] = None


def get_log_folder() -> Optional[str]:
    """Find a writable folder for the log file.

    Uses ``%APPDATA%\\Guide Pairing`` on Windows, Qt's AppDataLocation
    elsewhere, and Qt's TempLocation as a last resort.

    Returns
    -------
    str or None
        Path of the ``logs`` folder, or None when nothing is writable.
    """
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        base = os.path.join(os.environ["APPDATA"], APP_NAME)
    else:
        base = QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.AppDataLocation
        )
        if not base:
            base = QtCore.QStandardPaths.writableLocation(
                QtCore.QStandardPaths.StandardLocation.TempLocation
            )
    if not base:
        return None

    log_folder = os.path.join(base, "logs")
    try:
        os.makedirs(log_folder, exist_ok=True)
    except OSError:
        temp = QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.TempLocation
        )
        log_folder = os.path.join(temp, "logs")
        try:
            os.makedirs(log_folder, exist_ok=True)
        except OSError:
            return None
    return log_folder


def _get_file_handler(formatter: logging.Formatter) -> Optional[RotatingFileHandler]:
    global _file_handler
    if _file_handler is not None:
        return _file_handler

    log_folder = get_log_folder()
    if not log_folder:
        return None
    log_path = os.path.join(log_folder, LOG_FILE_NAME)
    try:
        # RotatingFileHandler keeps the log from growing without bound
        _file_handler = RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
    except OSError:
        return None
    _file_handler.setFormatter(formatter)
    return _file_handler


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(logging.INFO)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.INFO)
    lgr.addHandler(console_handler)

    file_handler = _get_file_handler(log_formatter)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr
