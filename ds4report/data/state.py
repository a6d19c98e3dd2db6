from collections import namedtuple
from enum import Enum


class Direction(Enum):
    NEUTRAL = "neutral"
    UP = "up"
    UP_RIGHT = "up_right"
    RIGHT = "right"
    DOWN_RIGHT = "down_right"
    DOWN = "down"
    DOWN_LEFT = "down_left"
    LEFT = "left"
    UP_LEFT = "up_left"

    @property
    def is_up(self):
        return self in (Direction.UP, Direction.UP_LEFT, Direction.UP_RIGHT)

    @property
    def is_down(self):
        return self in (Direction.DOWN, Direction.DOWN_LEFT, Direction.DOWN_RIGHT)

    @property
    def is_left(self):
        return self in (Direction.LEFT, Direction.UP_LEFT, Direction.DOWN_LEFT)

    @property
    def is_right(self):
        return self in (Direction.RIGHT, Direction.UP_RIGHT, Direction.DOWN_RIGHT)


# Hat values run clockwise from up. Anything else, 8 included, is released.
DIRECTION_NIBBLE = (
    Direction.UP,
    Direction.UP_RIGHT,
    Direction.RIGHT,
    Direction.DOWN_RIGHT,
    Direction.DOWN,
    Direction.DOWN_LEFT,
    Direction.LEFT,
    Direction.UP_LEFT
)


def direction_from_nibble(value):
    """
    Look up the direction pad state for a hat nibble.
    :param value: low four bits of the button byte
    :return: Direction
    """
    if 0 <= value < len(DIRECTION_NIBBLE):
        return DIRECTION_NIBBLE[value]
    return Direction.NEUTRAL


BUTTON_NAMES = ("triangle", "circle", "cross", "square", "l1", "r1", "l2", "r2", "l3", "r3", "options", "share",
                "touchpad_click")


class Buttons(namedtuple("Buttons", BUTTON_NAMES)):
    __slots__ = ()

    def pressed(self):
        """
        Names of the buttons held in this snapshot
        :return: tuple of field names
        """
        return tuple(name for name in self._fields if getattr(self, name))


Sticks = namedtuple("Sticks", ("left_x", "left_y", "right_x", "right_y"))
Triggers = namedtuple("Triggers", ("l2", "r2"))
Vector3 = namedtuple("Vector3", ("x", "y", "z"))
Motion = namedtuple("Motion", ("gyro_timestamp", "gyro", "accel"))
TouchContact = namedtuple("TouchContact", ("active", "x", "y"))
Touchpad = namedtuple("Touchpad", ("timestamp", "contacts"))


class ControllerState(namedtuple("ControllerState", ("direction", "buttons", "sticks", "triggers", "motion",
                                                     "touchpad"))):
    """
    One decoded report. Values are raw: no calibration, deadzone or sign conversion is applied.
    """
    __slots__ = ()

    def describe(self):
        """
        Single line summary used by the log output
        :return: str
        """
        contacts = ["(%d, %d)" % (contact.x, contact.y) for contact in self.touchpad.contacts if contact.active]
        return "dir:%s buttons:%s ls:%d,%d rs:%d,%d l2:%d r2:%d gyro:%d,%d,%d accel:%d,%d,%d touch:%s" % (
            self.direction.value, ",".join(self.buttons.pressed()) or "-",
            self.sticks.left_x, self.sticks.left_y, self.sticks.right_x, self.sticks.right_y,
            self.triggers.l2, self.triggers.r2,
            self.motion.gyro.x, self.motion.gyro.y, self.motion.gyro.z,
            self.motion.accel.x, self.motion.accel.y, self.motion.accel.z,
            " ".join(contacts) or "-"
        )
