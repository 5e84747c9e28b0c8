from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from verboten.utils.enforce import to_float
from verboten.utils.errors import InvalidArgument


class Pose(BaseModel):
    """
    Position and heading of a turtle. Heading is in radians and never normalised.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    direction: float

    @field_validator("x", "y", "direction", mode="before")
    @classmethod
    def validate_number(cls, v):
        return to_float(v)

    @classmethod
    def create(cls, x, y, direction) -> "Pose":
        """
        Build a pose, raising InvalidArgument instead of a pydantic error.
        """
        try:
            return cls(x=x, y=y, direction=direction)
        except ValidationError as e:
            given = {"x": x, "y": y, "direction": direction}
            rejected = [error["loc"][0] for error in e.errors()]
            raise InvalidArgument({field: given[field] for field in rejected}) from e
