"""Tests for the Pad value object and its host wire format."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain.pads.value_objects import Corner, Pad, PlanarPoint


def square(x0: float, y0: float, size: float) -> tuple[PlanarPoint, ...]:
    """Footprint in bottom-left, bottom-right, top-right, top-left order."""
    return (
        PlanarPoint(x=x0, y=y0),
        PlanarPoint(x=x0 + size, y=y0),
        PlanarPoint(x=x0 + size, y=y0 + size),
        PlanarPoint(x=x0, y=y0 + size),
    )


def make_pad(**overrides) -> Pad:
    fields = {
        "id": "abc123def456g",
        "footprint": square(10.0, 20.0, 15.0),
        "elevation": 12.5,
        "slope_percentage": 40,
        "apply_grade": True,
    }
    fields.update(overrides)
    return Pad(**fields)


def test_pad_corners_and_extent():
    pad = make_pad()

    assert pad.corner(Corner.BOTTOM_LEFT) == PlanarPoint(x=10.0, y=20.0)
    assert pad.corner(Corner.TOP_RIGHT) == PlanarPoint(x=25.0, y=35.0)
    assert pad.width == pytest.approx(15.0)
    assert pad.depth == pytest.approx(15.0)
    assert pad.center == PlanarPoint(x=17.5, y=27.5)


def test_pad_rectangle_allowed():
    bl, br, tr, tl = square(0.0, 0.0, 10.0)
    footprint = (bl, PlanarPoint(x=30.0, y=0.0), PlanarPoint(x=30.0, y=10.0), tl)

    pad = make_pad(footprint=footprint)

    assert pad.width == pytest.approx(30.0)
    assert pad.depth == pytest.approx(10.0)


def test_pad_payload_uses_host_keys():
    payload = make_pad().to_payload()

    assert payload == {
        "id": "abc123def456g",
        "coordinates": [
            {"x": 10.0, "y": 20.0},
            {"x": 25.0, "y": 20.0},
            {"x": 25.0, "y": 35.0},
            {"x": 10.0, "y": 35.0},
        ],
        "elevation": 12.5,
        "slopePercentage": 40,
        "applyGrade": True,
    }


def test_pad_parses_host_payload():
    pad = make_pad()

    assert Pad.model_validate(pad.to_payload()) == pad


@pytest.mark.parametrize(
    "bad_id", ["short", "ABC123DEF456G", "abc123def456g7", "abc-23def456g"]
)
def test_pad_invalid_id_raises(bad_id):
    with pytest.raises(ValidationError):
        make_pad(id=bad_id)


@pytest.mark.parametrize("slope", [9, 110, 250])
def test_pad_slope_out_of_range_raises(slope):
    with pytest.raises(ValidationError):
        make_pad(slope_percentage=slope)


def test_pad_slope_bounds_inclusive_exclusive():
    assert make_pad(slope_percentage=10).slope_percentage == 10
    assert make_pad(slope_percentage=109).slope_percentage == 109


def test_pad_clockwise_footprint_raises():
    bl, br, tr, tl = square(0.0, 0.0, 10.0)

    with pytest.raises(ValidationError, match="must exceed"):
        make_pad(footprint=(br, bl, tl, tr))


def test_pad_skewed_footprint_raises():
    bl, br, tr, tl = square(0.0, 0.0, 10.0)
    skewed = PlanarPoint(x=11.0, y=10.0)

    with pytest.raises(ValidationError, match="vertical"):
        make_pad(footprint=(bl, br, skewed, tl))


def test_pad_wrong_vertex_count_raises():
    with pytest.raises(ValidationError):
        make_pad(footprint=square(0.0, 0.0, 10.0)[:3])


def test_pad_is_frozen():
    pad = make_pad()

    with pytest.raises(ValidationError):
        pad.elevation = 0.0
