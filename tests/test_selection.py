from guidepairing.controllers.selection import (
    PairingRequest,
    SelectionPhase,
    SelectionStateMachine,
)


def test_athlete_click_arms_and_same_click_disarms():
    machine = SelectionStateMachine()
    outcome = machine.click_athlete("A1")
    assert outcome.request is None
    assert outcome.state.phase == SelectionPhase.ATHLETE_ARMED
    assert machine.selected_athlete_id == "A1"

    outcome = machine.click_athlete("A1")
    assert outcome.request is None
    assert machine.state.is_idle


def test_guide_then_athlete_requests_pairing():
    machine = SelectionStateMachine()
    machine.click_guide("G1")
    assert machine.state.phase == SelectionPhase.GUIDE_ARMED
    outcome = machine.click_athlete("A1")
    assert outcome.request == PairingRequest(target_id="A1", candidate_id="G1")
    assert machine.state.is_idle


def test_athlete_then_guide_requests_pairing():
    machine = SelectionStateMachine()
    machine.click_athlete("A1")
    outcome = machine.click_guide("G1")
    assert outcome.request == PairingRequest(target_id="A1", candidate_id="G1")
    assert machine.state.is_idle


def test_second_athlete_becomes_group_head():
    machine = SelectionStateMachine()
    machine.click_athlete("A3")
    outcome = machine.click_athlete("A2")
    assert outcome.request == PairingRequest(target_id="A2", candidate_id="A3")
    assert machine.state.is_idle


def test_guide_clicks_never_pair_guides():
    machine = SelectionStateMachine()
    machine.click_guide("G1")
    outcome = machine.click_guide("G2")
    assert outcome.request is None
    assert machine.selected_guide_id == "G2"
    machine.click_guide("G2")
    assert machine.state.is_idle


def test_clear_from_any_state():
    machine = SelectionStateMachine()
    machine.clear()
    assert machine.state.is_idle
    machine.click_athlete("A1")
    machine.clear()
    assert machine.selected_athlete_id is None
    machine.click_guide("G1")
    machine.clear()
    assert machine.selected_guide_id is None


def test_at_most_one_selection_armed():
    machine = SelectionStateMachine()
    for kind, user_id in [("a", "A1"), ("g", "G1"), ("g", "G2"), ("a", "A2"), ("a", "A2")]:
        if kind == "a":
            machine.click_athlete(user_id)
        else:
            machine.click_guide(user_id)
        state = machine.state
        assert state.selected_athlete_id is None or state.selected_guide_id is None
