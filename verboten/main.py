"""
Entry file to put a turtle through its paces.
"""
import logging
import math

from dotenv import load_dotenv

from verboten.app_types.primatives.command import MoveCommand, MoveInstruction
from verboten.app_types.turtle import make_turtle
from verboten.utils.instructions import Instructions
from verboten.utils.logger import init_logger


PACES = [
    MoveInstruction(move=MoveCommand.Forward, amount=100),
    MoveInstruction(move=MoveCommand.Right, amount=math.tau / 4),
    MoveInstruction(move=MoveCommand.Forward, amount=50),
    MoveInstruction(move=MoveCommand.Left, amount=math.tau / 8),
]


def main() -> None:
    load_dotenv()
    init_logger()
    logging.getLogger().info("Starting turtle demo")

    print("Making a turtle and putting it through its ... paces.")
    frank = Instructions(PACES).apply(make_turtle(0, 0, 0.0))
    frank.debug()
    print("\nFinished - Goodbye World!")


if __name__ == "__main__":
    main()
