import pytest

from pcsynth.lts import LTS, State, Transition


def test_equality():
    got = LTS()
    expected = LTS()
    got.add_transition("s0", "a1", "s1")
    expected.add_transition("s0", "a1", "s1")
    assert got == expected


def test_num_transitions():
    lts = LTS()
    lts.add_transition("s0", "a1", "s1")
    lts.add_transition("s1", "a2", "s2")
    lts.add_transition("s2", "a3", "s0")
    assert lts.num_of_transitions() == 3
    assert lts.num_of_states() == 3


def test_inequality_on_initial_state():
    a = LTS()
    b = LTS()
    a.set_initial_state("s0")
    b.set_initial_state("s1")
    b.add_state("s0")
    a.add_state("s1")
    assert a != b


def test_set_initial_state_creates_state():
    lts = LTS()
    lts.set_initial_state("s0")
    assert lts.initial_state == "s0"
    assert lts.has_state("s0")


def test_set_initial_state_without_create():
    lts = LTS()
    lts.set_initial_state("s0", False)
    assert lts.initial_state == "s0"
    assert not lts.has_state("s0")


def test_constructor_with_initial_state():
    assert LTS("s0").has_state("s0")


def test_add_state_reports_duplicates():
    lts = LTS()
    assert lts.add_state("s0") is True
    assert lts.add_state("s0") is False


def test_add_transition_without_create_raises_for_missing_start():
    lts = LTS()
    with pytest.raises(KeyError):
        lts.add_transition("s0", "a", "s1", False)


def test_add_transition_without_create_allows_missing_end():
    lts = LTS()
    lts.add_state("s0")
    lts.add_transition("s0", "a", "s1", False)
    assert not lts.has_state("s1")
    assert lts["s0"].transitions == [Transition("a", "s1")]


def test_getitem_missing_raises():
    with pytest.raises(KeyError):
        LTS()["nope"]


def test_erase_shallow_keeps_dangling_transitions():
    lts = LTS()
    lts.add_transition("s0", "a", "s1")
    assert lts.erase_shallow("s1") is True
    assert not lts.has_state("s1")
    assert lts.num_of_transitions() == 1
    assert lts.erase_shallow("s1") is False


def test_erase_deep_removes_incoming_transitions():
    lts = LTS()
    lts.add_transition("s0", "a", "s1")
    lts.add_transition("s0", "b", "s2")
    lts.add_transition("s2", "c", "s1")
    assert lts.erase_deep("s1") is True
    assert lts.num_of_transitions() == 1
    assert lts["s0"].transitions == [Transition("b", "s2")]
    assert lts["s2"].is_empty()
    assert lts.erase_deep("s1") is False


def test_state_transition_exists():
    state = State()
    state.add_transition("a", "s1")
    assert state.transition_exists("a", "s1")
    assert not state.transition_exists("a", "s2")
    assert not state.is_empty()


def test_tuple_keys():
    lts = LTS()
    lts.set_initial_state(("s0", "t0"))
    lts.add_transition(("s0", "t0"), (0, "a"), ("s1", "t0"))
    assert lts[("s0", "t0")].transitions[0].to == ("s1", "t0")
    assert ("s1", "t0") in lts