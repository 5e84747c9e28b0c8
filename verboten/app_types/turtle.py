import logging
import math
from typing import Any, Callable, Union

from verboten.app_types.primatives.command import Slot, TurtleCommand
from verboten.app_types.primatives.pose import Pose
from verboten.utils.enforce import to_float
from verboten.utils.errors import InvalidAccessor, InvalidArgument, UnknownCommand


DebugSink = Callable[[str], Any]


class Turtle:
    """
    Read-only handle on a Pose.

    Readers hand back numbers and every motion hands back a new Turtle, so a
    turtle never changes once made. Commands are reached either through the
    methods below or by tag, e.g. ``turtle("fd")(100)``.
    """

    __slots__ = ("_pose", "_sink")

    logger = logging.getLogger("Turtle")

    def __init__(self, pose: Pose, sink: DebugSink = print):
        object.__setattr__(self, "_pose", pose)
        object.__setattr__(self, "_sink", sink)

    def __setattr__(self, name, value):
        raise AttributeError(f"Turtle is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"Turtle is immutable, cannot delete {name}")

    def __eq__(self, other):
        if not isinstance(other, Turtle):
            return NotImplemented
        return self._pose == other._pose

    def __hash__(self):
        return hash(self._pose)

    def __repr__(self) -> str:
        return f"Turtle(x={self.x!r}, y={self.y!r}, direction={self.direction!r})"

    """
    Dispatch
    """

    def dispatch(self, tag: Union[TurtleCommand, str]):
        """
        Look up a command by tag.
        :param tag: One of the TurtleCommand values
        :return: A number for x, y and direction, otherwise the command to call
        """
        try:
            command = TurtleCommand(tag)
        except ValueError:
            raise UnknownCommand(tag) from None

        if command is TurtleCommand.X:
            return self.x
        if command is TurtleCommand.Y:
            return self.y
        if command is TurtleCommand.Direction:
            return self.direction

        return {
            TurtleCommand.Update: self.update,
            TurtleCommand.Debug: self.debug,
            TurtleCommand.Forward: self.fd,
            TurtleCommand.Backward: self.bk,
            TurtleCommand.Right: self.rt,
            TurtleCommand.Left: self.lt,
        }[command]

    __call__ = dispatch

    """
    Accessors
    """

    @property
    def x(self) -> float:
        return self._pose.x

    @property
    def y(self) -> float:
        return self._pose.y

    @property
    def direction(self) -> float:
        return self._pose.direction

    def update(self, slot: Union[Slot, str], value) -> "Turtle":
        """
        Copy of this turtle with one field replaced.
        :param slot: x, y or direction
        :param value: New value, must be a number
        :return: Turtle
        """
        try:
            slot = Slot(slot)
        except ValueError:
            raise InvalidAccessor(slot) from None

        fields = {"x": self.x, "y": self.y, "direction": self.direction}
        fields[slot.value] = value
        return self._spawn(**fields)

    def debug(self) -> str:
        message = f"Turtle: x: {self.x!r}, y: {self.y!r}, direction: {self.direction!r}"
        self.logger.debug(message)
        self._sink(message)
        return message

    """
    Movement, each returns a fresh turtle
    """

    def fd(self, step) -> "Turtle":
        step = _number("step", step)
        return self._spawn(
            self.x + math.cos(self.direction) * step,
            self.y + math.sin(self.direction) * step,
            self.direction,
        )

    def bk(self, step) -> "Turtle":
        step = _number("step", step)
        return self._spawn(
            self.x - math.cos(self.direction) * step,
            self.y - math.sin(self.direction) * step,
            self.direction,
        )

    def rt(self, angle) -> "Turtle":
        angle = _number("angle", angle)
        return self._spawn(self.x, self.y, self.direction + angle)

    def lt(self, angle) -> "Turtle":
        angle = _number("angle", angle)
        return self._spawn(self.x, self.y, self.direction - angle)

    def _spawn(self, x, y, direction) -> "Turtle":
        turtle = Turtle(Pose.create(x, y, direction), self._sink)
        self.logger.debug("%r -> %r", self, turtle)
        return turtle


def _number(name: str, value) -> float:
    try:
        return to_float(value)
    except ValueError:
        raise InvalidArgument({name: value}) from None


def make_turtle(x, y, direction, sink: DebugSink = print) -> Turtle:
    """
    Build a turtle at (x, y) facing direction radians.
    :param sink: Receives the text written by debug(), print by default
    :return: Turtle
    """
    return Turtle(Pose.create(x, y, direction), sink)
