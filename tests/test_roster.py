import pytest

from guidepairing.constants import SORT_ASCENDING, SORT_DESCENDING
from guidepairing.controllers.roster import RosterProjector, sort_by_pace
from guidepairing.exceptions import DuplicateSignUpException
from guidepairing.models.assignment import PairingAssignment, PairingEntry
from guidepairing.models.pace import Pace
from guidepairing.models.person import Person, Roster, SignUp
from guidepairing.testing import build_roster, sign_up


def _ids(sign_ups):
    return [s.user_id for s in sign_ups]


def test_sort_with_missing_pace():
    roster = build_roster("A:athlete:8:00", "B:athlete", "C:athlete:7:00")
    athletes = roster.athletes()
    assert _ids(sort_by_pace(athletes, roster, SORT_DESCENDING)) == ["C", "A", "B"]
    assert _ids(sort_by_pace(athletes, roster, SORT_ASCENDING)) == ["A", "C", "B"]


def test_sort_ties_keep_roster_order():
    roster = build_roster("A1:athlete:8:00", "A2:athlete", "A3:athlete:8:00", "A4:athlete")
    athletes = roster.athletes()
    assert _ids(sort_by_pace(athletes, roster, SORT_DESCENDING)) == ["A1", "A3", "A2", "A4"]
    assert _ids(sort_by_pace(athletes, roster, SORT_ASCENDING)) == ["A1", "A3", "A2", "A4"]


def test_profile_pace_used_when_sign_up_has_none():
    people = {"A1": Person(id="A1", display_name="Ann", pace=Pace(12, 0))}
    roster = Roster([sign_up("A1"), sign_up("A2", pace="9:00")], people)
    assert roster.pace_of("A1") == Pace(12, 0)
    assert _ids(sort_by_pace(roster.athletes(), roster, SORT_DESCENDING)) == ["A2", "A1"]


def test_projection_hides_absorbed_athletes_and_paired_guides():
    roster = build_roster(
        "A1:athlete:8:00", "A2:athlete:9:00", "A3:athlete", "G1:guide:8:30", "G2:guide"
    )
    assignment = PairingAssignment(
        {"A1": PairingEntry(guides=["G1"], athletes=["A2"])}
    )
    projector = RosterProjector(roster, assignment)
    assert _ids(projector.athletes_list()) == ["A1", "A3"]
    assert _ids(projector.unpaired_guides_list()) == ["G2"]
    assert projector.counts() == {
        "athletes": 3,
        "guides": 2,
        "paired_athletes": 2,
        "unpaired_guides": 1,
    }


def test_projection_skips_declined_sign_ups():
    roster = build_roster("A1:athlete", "A2:athlete:no", "G1:guide:maybe")
    projector = RosterProjector(roster, PairingAssignment())
    assert _ids(projector.athletes_list()) == ["A1"]
    assert _ids(projector.unpaired_guides_list()) == ["G1"]
    assert roster.status_counts() == {"yes": 1, "maybe": 1, "no": 1}


def test_toggle_sort():
    projector = RosterProjector(build_roster("A1:athlete"), PairingAssignment())
    assert projector.sort_direction == SORT_DESCENDING
    assert projector.toggle_sort() == SORT_ASCENDING
    assert projector.toggle_sort() == SORT_DESCENDING


def test_duplicate_sign_up_rejected():
    with pytest.raises(DuplicateSignUpException):
        Roster([SignUp("A1", "athlete"), SignUp("A1", "guide")])


def test_display_name_falls_back_to_id():
    roster = build_roster("A1:athlete")
    assert roster.display_name("A1") == "Runner A1"
    assert roster.display_name("X9") == "X9"
