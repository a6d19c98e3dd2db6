from ds4report.data.state import BUTTON_NAMES, Buttons, ControllerState, Direction, Motion, Sticks, TouchContact, \
    Touchpad, Triggers, Vector3, direction_from_nibble


def make_state(direction=Direction.NEUTRAL, **pressed):
    buttons = Buttons(**{name: pressed.get(name, False) for name in BUTTON_NAMES})
    return ControllerState(
        direction=direction,
        buttons=buttons,
        sticks=Sticks(1, 2, 3, 4),
        triggers=Triggers(5, 6),
        motion=Motion(7, Vector3(8, 9, 10), Vector3(11, 12, 13)),
        touchpad=Touchpad(14, (TouchContact(True, 100, 200), TouchContact(False, 0, 0)))
    )


def test_button_fields_are_unique():
    assert len(set(BUTTON_NAMES)) == len(BUTTON_NAMES) == 13


def test_pressed():
    state = make_state(cross=True, r3=True)
    assert state.buttons.pressed() == ("cross", "r3")


def test_direction_components():
    assert Direction.UP_LEFT.is_up and Direction.UP_LEFT.is_left
    assert not Direction.UP_LEFT.is_down and not Direction.UP_LEFT.is_right
    assert Direction.DOWN_RIGHT.is_down and Direction.DOWN_RIGHT.is_right
    neutral = Direction.NEUTRAL
    assert not (neutral.is_up or neutral.is_down or neutral.is_left or neutral.is_right)


def test_direction_from_nibble_out_of_range():
    assert direction_from_nibble(-1) is Direction.NEUTRAL
    assert direction_from_nibble(8) is Direction.NEUTRAL
    assert direction_from_nibble(15) is Direction.NEUTRAL
    assert direction_from_nibble(7) is Direction.UP_LEFT


def test_state_is_immutable():
    state = make_state()
    try:
        state.direction = Direction.UP
    except AttributeError:
        pass
    else:
        raise AssertionError("ControllerState accepted an assignment")


def test_describe():
    line = make_state(Direction.LEFT, triangle=True).describe()
    assert "dir:left" in line
    assert "buttons:triangle" in line
    assert "ls:1,2 rs:3,4" in line
    assert "touch:(100, 200)" in line
