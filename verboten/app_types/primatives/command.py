from enum import Enum

from pydantic import BaseModel, Field


class TurtleCommand(str, Enum):
    """
    Every tag a turtle answers to.
    """
    X = "x"
    Y = "y"
    Direction = "direction"
    Update = "update"
    Debug = "debug"
    Forward = "fd"
    Backward = "bk"
    Right = "rt"
    Left = "lt"


# Fields accepted by update
class Slot(str, Enum):
    X = "x"
    Y = "y"
    Direction = "direction"


class MoveCommand(str, Enum):
    Forward = "fd"
    Backward = "bk"
    Right = "rt"
    Left = "lt"


# A single motion with its step (fd/bk) or angle (rt/lt)
class MoveInstruction(BaseModel):
    move: MoveCommand
    amount: float = Field(default=0.0)
