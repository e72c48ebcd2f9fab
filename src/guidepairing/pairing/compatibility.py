"""Pace compatibility between an athlete and a candidate guide.

The severity is advisory only. It colours guide rows and extends their
accessible labels but never blocks an assignment.
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

from typing import Dict, Optional, Tuple

from guidepairing.constants import (
    FAST_REGIME_MAX_PACE,
    FAST_REGIME_THRESHOLDS,
    NO_PACE_LABEL,
    SEVERITY_COLORS,
    SEVERITY_LABEL_SUFFIXES,
    SEVERITY_NONE,
    SEVERITY_SIGNIFICANT,
    SEVERITY_SLIGHT,
    SLOW_REGIME_THRESHOLDS,
)
from guidepairing.models.pace import Pace, format_pace
from guidepairing.models.person import Roster
from guidepairing.type_hints import Severity, UserId


def thresholds_for(athlete_pace: float) -> Tuple[float, float]:
    """Return the (slight, significant) minimum gaps for an athlete's pace.

    Faster athletes get tighter thresholds in absolute minutes per mile.
    """
    if athlete_pace <= FAST_REGIME_MAX_PACE:
        return FAST_REGIME_THRESHOLDS
    return SLOW_REGIME_THRESHOLDS


def score_compatibility(
    athlete_pace: Optional[Pace], guide_pace: Optional[Pace]
) -> Severity:
    """How much slower a guide is than an athlete.

    Parameters
    ----------
    athlete_pace : Pace or None
        The selected athlete's pace.
    guide_pace : Pace or None
        The candidate guide's pace.

    Returns
    -------
    str
        ``"none"``, ``"slight"`` or ``"significant"``. Missing paces and
        guides at least as fast as the athlete score ``"none"``.
    """
    if athlete_pace is None or guide_pace is None:
        return SEVERITY_NONE

    athlete = athlete_pace.to_decimal()
    diff = guide_pace.to_decimal() - athlete
    if diff <= 0:
        return SEVERITY_NONE

    slight, significant = thresholds_for(athlete)
    # compare with a small tolerance, seconds/60 is not exact in binary
    if diff >= significant - 1e-9:
        return SEVERITY_SIGNIFICANT
    if diff >= slight - 1e-9:
        return SEVERITY_SLIGHT
    return SEVERITY_NONE


def severity_color(
    severity: Severity, colors: Optional[Dict[str, str]] = None
) -> Optional[str]:
    """Highlight colour for a severity, None when no highlight applies."""
    colors = SEVERITY_COLORS if colors is None else colors
    return colors.get(severity)


def severity_label_suffix(severity: Severity) -> str:
    return SEVERITY_LABEL_SUFFIXES.get(severity, "")


def describe_candidate(
    roster: Roster, candidate_id: UserId, athlete_id: Optional[UserId] = None
) -> str:
    """Accessible label for a roster row.

    The label is the display name and pace; when an athlete is armed and the
    candidate is slower, the severity suffix is appended.
    """
    pace = roster.pace_of(candidate_id)
    label = f"{roster.display_name(candidate_id)}, {format_pace(pace) or NO_PACE_LABEL}"
    if athlete_id is None:
        return label
    severity = score_compatibility(roster.pace_of(athlete_id), pace)
    return label + severity_label_suffix(severity)
