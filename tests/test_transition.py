from labtools.transition import Transition


def make_transition():
    return Transition("1", "0", "R", "q1")


def test_constructor():
    t = make_transition()
    assert t.read_symbol == "1"
    assert t.write_symbol == "0"
    assert t.move_direction == "R"
    assert t.next_state == "q1"


def test_equality():
    t = make_transition()
    assert t == Transition("1", "0", "R", "q1")
    assert not (t == Transition("0", "1", "L", "q2"))


def test_to_string():
    assert str(make_transition()) == "1 0 R q1"


def test_default_constructor():
    t = Transition()
    assert t.read_symbol == " "
    assert t.write_symbol == " "
    assert t.move_direction == "S"
    assert t.next_state == ""


def test_keyword_construction():
    t = Transition(read_symbol="B", write_symbol="B", move_direction="S", next_state="halt")
    assert str(t) == "B B S halt"