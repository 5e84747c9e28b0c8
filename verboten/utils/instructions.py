import logging
from typing import Iterable, List, Optional, Tuple, Union

from verboten.app_types.primatives.command import MoveInstruction
from verboten.app_types.turtle import Turtle

logger = logging.getLogger("Instructions")

Step = Union[MoveInstruction, Tuple[str, float]]


class Instructions:

    def __init__(self, instructions: Iterable[MoveInstruction] = ()):
        self.instructions: List[MoveInstruction] = list(instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def add(self, instructions: Iterable[MoveInstruction]) -> None:
        """
        Method to add multiple instructions to the queue
        :param instructions:
        :return:
        """
        self.instructions.extend(instructions)

    def pop(self) -> Optional[MoveInstruction]:
        """
        Method to pop the next instruction
        :return: Optional[MoveInstruction]
        """
        if self.instructions:
            return self.instructions.pop(0)

        return None

    def apply(self, turtle: Turtle) -> Turtle:
        """
        Drain the queue, feeding each instruction the turtle the previous one produced.
        :param turtle: Starting turtle, left as it is
        :return: Turtle after the last instruction
        """
        logger.info(f"Applying {len(self)} instructions to {turtle!r}")
        instruction = self.pop()
        while instruction is not None:
            turtle = turtle(instruction.move.value)(instruction.amount)
            instruction = self.pop()
        return turtle


def to_instruction(step: Step) -> MoveInstruction:
    if isinstance(step, MoveInstruction):
        return step
    move, amount = step
    return MoveInstruction(move=move, amount=amount)


def thread(turtle: Turtle, *steps: Step) -> Turtle:
    """
    Run steps such as ("fd", 100), ("rt", 1.57) against turtle in order.
    """
    return Instructions(to_instruction(s) for s in steps).apply(turtle)
