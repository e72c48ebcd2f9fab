"""Pace data model."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from guidepairing.exceptions import InvalidEventDataException


@dataclass(frozen=True)
class Pace:
    """A minutes-and-seconds per mile figure.

    Used both as an athlete's expected speed and as a guide's maximum
    comfortable speed. A smaller value is faster.

    Attributes
    ----------
    minutes : int
        Whole minutes per mile.
    seconds : int
        Remaining seconds, 0 to 59.
    """

    minutes: int
    seconds: int = 0

    def __post_init__(self) -> None:
        if self.minutes < 0 or not (0 <= self.seconds < 60):
            raise ValueError(f"Invalid pace {self.minutes}:{self.seconds}")

    def to_decimal(self) -> float:
        """Return the pace as decimal minutes per mile."""
        return self.minutes + self.seconds / 60

    def format(self) -> str:
        """Return the pace as ``M:SS``."""
        return f"{self.minutes}:{self.seconds:02d}"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, text: str) -> "Pace":
        """Parse ``M:SS`` (or bare ``M``) into a Pace.

        Raises
        ------
        ValueError
            If the text is not a pace.
        """
        text = text.strip()
        if ":" in text:
            minutes, _, seconds = text.partition(":")
            return cls(int(minutes), int(seconds))
        return cls(int(text))

    def to_dict(self) -> Dict[str, int]:
        """Serialize pace to dictionary."""
        return {"minutes": self.minutes, "seconds": self.seconds}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Pace"]:
        """Deserialize pace from dictionary; ``None`` stays ``None``.

        Raises
        ------
        InvalidEventDataException
            If ``data`` is not a mapping.
        """
        if not data:
            return None
        if not isinstance(data, dict):
            raise InvalidEventDataException(f"Pace must be a mapping: {data!r}")
        return cls(
            minutes=int(data.get("minutes", 0)), seconds=int(data.get("seconds", 0))
        )


def to_decimal_minutes(pace: Optional[Pace]) -> Optional[float]:
    """Decimal minutes per mile, or None if the pace is absent."""
    if pace is None:
        return None
    return pace.to_decimal()


def format_pace(pace: Optional[Pace]) -> Optional[str]:
    """``M:SS`` with zero padded seconds, or None if the pace is absent."""
    if pace is None:
        return None
    return pace.format()
