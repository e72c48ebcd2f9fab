import pytest

from guidepairing.exceptions import InvalidEventDataException
from guidepairing.models.assignment import PairingAssignment, PairingEntry


def test_equality_ignores_order_and_empty_entries():
    a = PairingAssignment.from_dict(
        {
            "A1": {"guides": ["G1", "G2"], "athletes": ["A3"]},
            "A2": {"guides": ["G3"], "athletes": []},
        }
    )
    b = PairingAssignment(
        {
            "A2": PairingEntry(guides=["G3"]),
            "A4": PairingEntry(),
            "A1": PairingEntry(guides=["G2", "G1"], athletes=["A3"]),
        }
    )
    assert a == b
    b.get("A1").guides.remove("G2")
    assert a != b


def test_to_dict_skips_empty_entries():
    assignment = PairingAssignment(
        {"A2": PairingEntry(guides=["G1"]), "A1": PairingEntry()}
    )
    assert assignment.to_dict() == {"A2": {"guides": ["G1"], "athletes": []}}


def test_from_dict_handles_missing_members():
    assignment = PairingAssignment.from_dict({"A1": {"guides": ["G1"]}})
    assert assignment.get("A1").athletes == []
    assert PairingAssignment.from_dict(None) == PairingAssignment()
    with pytest.raises(InvalidEventDataException):
        PairingAssignment.from_dict(["A1"])


def test_copy_is_deep():
    original = PairingAssignment({"A1": PairingEntry(guides=["G1"])})
    clone = original.copy()
    clone.get("A1").guides.append("G2")
    assert original.get("A1").guides == ["G1"]


def test_lookups():
    assignment = PairingAssignment(
        {"A1": PairingEntry(guides=["G1"], athletes=["A2"]), "A3": PairingEntry()}
    )
    assert assignment.guide_owner("G1") == "A1"
    assert assignment.guide_owner("G2") is None
    assert assignment.member_owner("A2") == "A1"
    assert assignment.member_owner("A2", exclude="A1") is None
    assert assignment.paired_guide_ids() == {"G1"}
    assert assignment.absorbed_athlete_ids() == {"A2"}
    assert assignment.has_content("A1")
    assert not assignment.has_content("A3")
    assert [k for k, _ in assignment.non_empty_items()] == ["A1"]
    assert assignment.check_invariants() == []
