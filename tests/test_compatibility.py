import pytest

from guidepairing.constants import (
    SEVERITY_COLORS,
    SEVERITY_NONE,
    SEVERITY_SIGNIFICANT,
    SEVERITY_SLIGHT,
)
from guidepairing.models.pace import Pace
from guidepairing.pairing.compatibility import (
    describe_candidate,
    score_compatibility,
    severity_color,
    thresholds_for,
)
from guidepairing.testing import build_roster


@pytest.mark.parametrize(
    "athlete, guide, expected",
    [
        # faster regime
        (Pace(9, 0), Pace(9, 30), SEVERITY_SLIGHT),
        (Pace(9, 0), Pace(10, 0), SEVERITY_SIGNIFICANT),
        (Pace(9, 0), Pace(9, 15), SEVERITY_NONE),
        (Pace(9, 0), Pace(9, 45), SEVERITY_SLIGHT),
        # slower regime
        (Pace(11, 0), Pace(12, 0), SEVERITY_SLIGHT),
        (Pace(11, 0), Pace(13, 0), SEVERITY_SIGNIFICANT),
        (Pace(11, 0), Pace(11, 45), SEVERITY_NONE),
        (Pace(11, 0), Pace(12, 45), SEVERITY_SLIGHT),
    ],
)
def test_severity_boundaries(athlete, guide, expected):
    assert score_compatibility(athlete, guide) == expected


def test_ten_minute_pace_uses_faster_regime():
    assert thresholds_for(10.0) == (0.5, 1.0)
    assert thresholds_for(10.25) == (1.0, 2.0)
    assert score_compatibility(Pace(10, 0), Pace(10, 30)) == SEVERITY_SLIGHT
    assert score_compatibility(Pace(10, 15), Pace(10, 45)) == SEVERITY_NONE


def test_faster_or_equal_guide_is_fine():
    assert score_compatibility(Pace(9, 0), Pace(7, 0)) == SEVERITY_NONE
    assert score_compatibility(Pace(9, 0), Pace(9, 0)) == SEVERITY_NONE


def test_missing_pace_is_none():
    assert score_compatibility(None, Pace(12, 0)) == SEVERITY_NONE
    assert score_compatibility(Pace(8, 0), None) == SEVERITY_NONE
    assert score_compatibility(None, None) == SEVERITY_NONE


def test_severity_color():
    assert severity_color(SEVERITY_NONE) is None
    assert severity_color(SEVERITY_SLIGHT) == SEVERITY_COLORS[SEVERITY_SLIGHT]
    assert severity_color(SEVERITY_SIGNIFICANT, {"significant": "red"}) == "red"
    assert severity_color(SEVERITY_SLIGHT, {"significant": "red"}) is None


def test_describe_candidate():
    roster = build_roster("A1:athlete:8:00", "G1:guide:8:30", "G2:guide", "G3:guide:7:30")
    assert describe_candidate(roster, "G1") == "Runner G1, 8:30"
    assert describe_candidate(roster, "G2", "A1") == "Runner G2, no pace"
    assert describe_candidate(roster, "G3", "A1") == "Runner G3, 7:30"
    assert (
        describe_candidate(roster, "G1", "A1") == "Runner G1, 8:30, slightly slower pace"
    )
    assert (
        describe_candidate(roster, candidate_id="G1", athlete_id="A1")
        == "Runner G1, 8:30, slightly slower pace"
    )
