"""Editor configuration."""

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
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from guidepairing.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_SORT_DIRECTION,
    SEVERITY_COLORS,
    SORT_ASCENDING,
    SORT_DESCENDING,
)
from guidepairing.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)


@dataclass
class EditorConfig:
    """Pairing editor settings.

    Attributes
    ----------
    sort_direction : str
        Initial roster sort, ``"ascending"`` (slowest first) or
        ``"descending"`` (fastest first).
    include_maybe : bool
        Whether ``maybe`` RSVPs are offered for pairing.
    severity_colors : dict of str to str
        Highlight colour per pace severity.
    """

    sort_direction: str = DEFAULT_SORT_DIRECTION
    include_maybe: bool = True
    severity_colors: Dict[str, str] = field(
        default_factory=lambda: dict(SEVERITY_COLORS)
    )

    def __post_init__(self) -> None:
        if self.sort_direction not in (SORT_ASCENDING, SORT_DESCENDING):
            raise InvalidConfigurationException(
                f"Unknown sort direction: {self.sort_direction!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "sort_direction": self.sort_direction,
            "include_maybe": self.include_maybe,
            "severity_colors": dict(self.severity_colors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: If a field has the wrong type
        """
        include_maybe = data.get("include_maybe", True)
        if not isinstance(include_maybe, bool):
            raise InvalidConfigurationException(
                f"include_maybe must be true or false: {include_maybe!r}"
            )
        overrides = data.get("severity_colors", {})
        if not isinstance(overrides, dict) or not all(
            isinstance(v, str) for v in overrides.values()
        ):
            raise InvalidConfigurationException(
                f"severity_colors must map severities to colour strings: {overrides!r}"
            )
        colors = dict(SEVERITY_COLORS)
        colors.update(overrides)
        return cls(
            sort_direction=data.get("sort_direction", DEFAULT_SORT_DIRECTION),
            include_maybe=include_maybe,
            severity_colors=colors,
        )

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "EditorConfig":
        """Read configuration from ``path`` or the config environment variable.

        Defaults are returned when neither names a file.
        """
        if path is None:
            path = os.environ.get(CONFIG_ENV_VAR)
        if not path:
            return cls()
        path = Path(path)
        if not path.exists():
            raise MissingConfigurationException(f"Config file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidConfigurationException(
                f"Could not read config file {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Config file {path} must hold a JSON object"
            )
        return cls.from_dict(data)
