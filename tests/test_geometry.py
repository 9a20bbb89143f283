import pytest

from shottower.geometry import Offset, Range, Size
from shottower.schema import EnumError


def test_offset_from_dict():
    offset = Offset.from_dict({"x": 0.5, "y": -0.25})
    assert offset.x == 0.5
    assert offset.y == -0.25
    assert offset.validate() is None


def test_offset_defaults_to_origin():
    offset = Offset.from_dict({})
    assert (offset.x, offset.y) == (0.0, 0.0)
    assert offset.to_dict() == {}


def test_offset_round_trip():
    data = {"x": 1.0, "y": -1.0}
    assert Offset.from_dict(data).to_dict() == data


@pytest.mark.parametrize(
    "data, field", [({"x": 1.5}, "X"), ({"y": -2}, "Y"), ({"x": -1.01}, "X")]
)
def test_offset_out_of_range(data, field):
    with pytest.raises(EnumError) as info:
        Offset.from_dict(data).validate()
    assert info.value.schema == "Offset"
    assert info.value.field == field


def test_size_from_dict_truncates_to_int():
    size = Size.from_dict({"width": 1280.0, "height": 720})
    assert size.width == 1280
    assert size.height == 720
    assert size.validate() is None


def test_size_round_trip():
    data = {"width": 2, "height": 4096}
    size = Size.from_dict(data)
    assert size.validate() is None
    assert size.to_dict() == data


def test_size_missing_dimensions_are_allowed():
    size = Size.from_dict({})
    assert size.width is None and size.height is None
    assert size.validate() is None


@pytest.mark.parametrize(
    "data, field",
    [
        ({"width": 0}, "Width"),
        ({"width": 4098}, "Width"),
        ({"width": 641}, "Width"),
        ({"height": 1}, "Height"),
        ({"height": 5000}, "Height"),
    ],
)
def test_size_invalid(data, field):
    with pytest.raises(EnumError) as info:
        Size.from_dict(data).validate()
    assert info.value.schema == "Size"
    assert info.value.field == field
    assert info.value.value == int(next(iter(data.values())))


def test_size_rejects_values_beyond_32_bits():
    with pytest.raises(OverflowError):
        Size.from_dict({"width": 2**40})


def test_range_from_dict():
    rng = Range.from_dict({"start": 3, "length": 6.5})
    assert rng.start == 3.0
    assert rng.length == 6.5
    assert rng.validate() is None
    assert rng.to_dict() == {"start": 3.0, "length": 6.5}


def test_range_empty_is_valid():
    rng = Range.from_dict({})
    assert rng.to_dict() == {}
    assert rng.validate() is None


@pytest.mark.parametrize(
    "data, field", [({"start": -1}, "Start"), ({"length": -0.5}, "Length")]
)
def test_range_negative(data, field):
    with pytest.raises(EnumError) as info:
        Range.from_dict(data).validate()
    assert info.value.schema == "Range"
    assert info.value.field == field