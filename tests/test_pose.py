"""
Tests for the Pose model and its number checks.
"""
from decimal import Decimal
from fractions import Fraction

import pytest
from pydantic import ValidationError

from verboten.app_types.primatives.pose import Pose
from verboten.utils.enforce import enforce, is_number, to_float
from verboten.utils.errors import InvalidArgument


NOT_NUMBERS = ["Foo", " ", "1", None, True, [1], {"x": 1}, object()]


class TestEnforce:

    def test_returns_value_when_predicate_holds(self):
        assert enforce(is_number, 3) == 3

    def test_raises_when_predicate_fails(self):
        with pytest.raises(ValueError):
            enforce(is_number, "3")

    @pytest.mark.parametrize("value", [0, -4, 2.5, Fraction(1, 3), Decimal("1.5"), float("inf")])
    def test_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize("value", NOT_NUMBERS)
    def test_not_numbers(self, value):
        assert not is_number(value)

    def test_to_float_rejects_ints_too_large_for_a_float(self):
        with pytest.raises(ValueError):
            to_float(10 ** 400)

    def test_to_float_accepts_decimal(self):
        assert to_float(Decimal("2.25")) == 2.25


class TestPose:

    def test_create_stores_floats(self):
        pose = Pose.create(1, Fraction(1, 2), 3.0)
        assert (pose.x, pose.y, pose.direction) == (1.0, 0.5, 3.0)
        assert isinstance(pose.x, float)

    @pytest.mark.parametrize("value", NOT_NUMBERS)
    @pytest.mark.parametrize("field", ["x", "y", "direction"])
    def test_create_rejects_non_numbers(self, field, value):
        fields = {"x": 0, "y": 0, "direction": 0}
        fields[field] = value
        with pytest.raises(InvalidArgument) as exc:
            Pose.create(**fields)
        assert exc.value.field == field
        assert exc.value.value is value

    def test_model_raises_validation_error_directly(self):
        with pytest.raises(ValidationError):
            Pose(x="1", y=0, direction=0)

    def test_frozen(self):
        pose = Pose.create(0, 0, 0)
        with pytest.raises(ValidationError):
            pose.x = 5
        assert pose.x == 0

    def test_equal_poses_hash_alike(self):
        assert Pose.create(1, 2, 3) == Pose.create(1.0, 2.0, 3.0)
        assert hash(Pose.create(1, 2, 3)) == hash(Pose.create(1.0, 2.0, 3.0))

    def test_create_accepts_decimal(self):
        pose = Pose.create(Decimal("1.5"), 0, Decimal("-0.25"))
        assert (pose.x, pose.y, pose.direction) == (1.5, 0.0, -0.25)

    @pytest.mark.parametrize("field", ["x", "y", "direction"])
    def test_create_rejects_ints_too_large_for_a_float(self, field):
        fields = {"x": 0, "y": 0, "direction": 0}
        fields[field] = 10 ** 400
        with pytest.raises(InvalidArgument) as exc:
            Pose.create(**fields)
        assert exc.value.fields == {field: 10 ** 400}

    def test_create_names_every_bad_field(self):
        with pytest.raises(InvalidArgument) as exc:
            Pose.create("a", None, "b")
        assert exc.value.fields == {"x": "a", "y": None, "direction": "b"}
        assert exc.value.field == "x"
        assert "y=None" in str(exc.value)
        assert "direction='b'" in str(exc.value)

    def test_create_names_only_bad_fields(self):
        with pytest.raises(InvalidArgument) as exc:
            Pose.create(1, "2", 3)
        assert exc.value.fields == {"y": "2"}
