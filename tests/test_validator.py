import pytest

from guidepairing.constants import (
    REASON_ALREADY_EXISTS,
    REASON_ATHLETE_TAKEN,
    REASON_CANDIDATE_NOT_FOUND,
    REASON_GUIDE_TAKEN,
    REASON_HAS_OWN_PAIRINGS,
    REASON_SELF,
    REASON_TARGET_NOT_ATHLETE,
    REASON_TARGET_NOT_FOUND,
)
from guidepairing.models.assignment import PairingAssignment, PairingEntry
from guidepairing.pairing.validator import can_pair
from guidepairing.testing import build_roster


def _roster(include_maybe=True):
    return build_roster(
        "A1:athlete:8:00",
        "A2:athlete:9:00",
        "A3:athlete",
        "G1:guide:8:30",
        "G2:guide",
        "D1:guide:no",
        "M1:athlete:10:00:maybe",
        include_maybe=include_maybe,
    )


def _assignment(**entries):
    return PairingAssignment(
        {
            head: PairingEntry(guides=list(guides), athletes=list(athletes))
            for head, (guides, athletes) in entries.items()
        }
    )


@pytest.mark.parametrize("user_id", ["A1", "G1", "ghost", "D1"])
def test_self_pairing_always_rejected(user_id):
    check = can_pair(user_id, user_id, _assignment(A1=(["G1"], [])), _roster())
    assert not check.allowed
    assert check.reason == REASON_SELF


def test_unknown_candidate_rejected():
    check = can_pair("A1", "ghost", PairingAssignment(), _roster())
    assert check.reason == REASON_CANDIDATE_NOT_FOUND


def test_declined_sign_up_is_unknown():
    check = can_pair("A1", "D1", PairingAssignment(), _roster())
    assert check.reason == REASON_CANDIDATE_NOT_FOUND


def test_maybe_sign_up_depends_on_roster_setting():
    assert can_pair("A1", "M1", PairingAssignment(), _roster()).allowed
    check = can_pair("A1", "M1", PairingAssignment(), _roster(include_maybe=False))
    assert check.reason == REASON_CANDIDATE_NOT_FOUND


def test_target_must_be_a_known_athlete():
    roster = _roster()
    assert can_pair("ghost", "G1", PairingAssignment(), roster).reason == (
        REASON_TARGET_NOT_FOUND
    )
    assert can_pair("G2", "G1", PairingAssignment(), roster).reason == (
        REASON_TARGET_NOT_ATHLETE
    )


def test_guide_allowed_when_free():
    check = can_pair("A1", "G1", PairingAssignment(), _roster())
    assert check.allowed
    assert check.reason is None
    assert check


def test_existing_pairing_rejected():
    assignment = _assignment(A1=(["G1"], ["A2"]))
    roster = _roster()
    assert can_pair("A1", "G1", assignment, roster).reason == REASON_ALREADY_EXISTS
    assert can_pair("A1", "A2", assignment, roster).reason == REASON_ALREADY_EXISTS


def test_guide_cannot_guide_two_groups():
    check = can_pair("A2", "G1", _assignment(A1=(["G1"], [])), _roster())
    assert check.reason == REASON_GUIDE_TAKEN


def test_athlete_with_own_group_cannot_be_absorbed():
    check = can_pair("A3", "A1", _assignment(A1=(["G1"], [])), _roster())
    assert check.reason == REASON_HAS_OWN_PAIRINGS


def test_athlete_with_empty_placeholder_can_be_absorbed():
    check = can_pair("A3", "A1", _assignment(A1=([], [])), _roster())
    assert check.allowed


def test_absorbed_athlete_cannot_join_another_group():
    check = can_pair("A3", "A2", _assignment(A1=([], ["A2"])), _roster())
    assert check.reason == REASON_ATHLETE_TAKEN


def test_absorbed_athlete_cannot_head_a_group():
    assignment = _assignment(A1=([], ["A2"]))
    roster = _roster()
    assert can_pair("A2", "G2", assignment, roster).reason == REASON_ATHLETE_TAKEN
    assert can_pair("A2", "A1", assignment, roster).reason == REASON_ATHLETE_TAKEN


def test_two_athletes_may_pair_without_guide():
    assert can_pair("A1", "A2", PairingAssignment(), _roster()).allowed


def test_validator_does_not_modify_assignment():
    assignment = _assignment(A1=(["G1"], []))
    before = assignment.to_dict()
    can_pair("A2", "G1", assignment, _roster())
    can_pair("A2", "A3", assignment, _roster())
    assert assignment.to_dict() == before
