__all__ = [
    "Turtle",
    "make_turtle",
    "Pose",
    "TurtleCommand",
    "Slot",
    "MoveCommand",
    "MoveInstruction",
    "Instructions",
    "thread",
    "TurtleError",
    "InvalidArgument",
    "InvalidAccessor",
    "UnknownCommand",
]

from .app_types.primatives.command import MoveCommand, MoveInstruction, Slot, TurtleCommand
from .app_types.primatives.pose import Pose
from .app_types.turtle import Turtle, make_turtle
from .utils.errors import InvalidAccessor, InvalidArgument, TurtleError, UnknownCommand
from .utils.instructions import Instructions, thread
