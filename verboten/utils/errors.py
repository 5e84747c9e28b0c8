from typing import Any, Dict


class TurtleError(Exception):
    """
    Base class for every error raised by a turtle.
    """


class InvalidArgument(TurtleError, ValueError):
    """
    Raised when a turtle is built or moved with a value that is not a number.

    ``fields`` maps every rejected argument name to the value given for it;
    ``field`` and ``value`` are the first of those.
    """

    def __init__(self, fields: Dict[str, Any]):
        self.fields = dict(fields)
        self.field, self.value = next(iter(self.fields.items()))
        rejected = ", ".join(f"{name}={value!r}" for name, value in self.fields.items())
        super().__init__(f"Turtle arguments must be numbers, got {rejected}")


class InvalidAccessor(TurtleError, LookupError):
    """
    Raised when a slot or command outside the fixed set is requested.
    """

    def __init__(self, accessor):
        self.accessor = accessor
        super().__init__(f"Error turtle accessor {accessor} is invalid.")


class UnknownCommand(InvalidAccessor):
    pass
