import dataclasses

import pytest

from trackforge.errors import InvalidParameter, UnknownPart
from trackforge.models.standards import (
    Standard,
    cutout_radius,
    standard_params,
    trackmaster,
    well_offsets,
    well_padding,
    wood,
)


def test_wood_catalog():
    p = wood()
    assert (p.width, p.height) == (40.0, 12.0)
    assert p.well_height == 9.0
    assert p.well_width == 5.7
    assert p.well_spacing == 19.25
    assert p.plug_radius == 6.0
    assert p.has_wells


def test_trackmaster_catalog_has_no_wells():
    p = trackmaster()
    assert p.plug_radius == 3.8
    assert p.well_height is not None
    assert p.width is None and p.well_width is None
    assert not p.has_wells
    with pytest.raises(InvalidParameter):
        well_padding(p)


def test_neck_lengths_are_named_fields():
    assert trackmaster().plug_neck_length == 4.75
    assert trackmaster().cutout_neck_length == 5.0
    assert wood().cutout_neck_length == 10.75


def test_well_positions_are_symmetric():
    p = wood()
    assert well_padding(p) == pytest.approx(4.675)
    low, high = well_offsets(p)
    assert low == pytest.approx(4.675)
    assert high == pytest.approx(29.625)
    # simétricas respecto al eje transversal
    assert low + (high + p.well_width) == pytest.approx(p.width)


def test_clearance_invariant():
    assert cutout_radius(wood()) - wood().plug_radius == pytest.approx(0.3)
    assert cutout_radius(trackmaster()) - trackmaster().plug_radius == pytest.approx(0.7)


@pytest.mark.parametrize("raw", ["wood", "WOOD", " wood ", Standard.WOOD])
def test_standard_lookup(raw):
    assert standard_params(raw) is wood()


def test_unknown_standard():
    with pytest.raises(UnknownPart):
        standard_params("lego")


def test_params_are_immutable_and_replaceable():
    p = wood()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.width = 41.0
    wide = dataclasses.replace(p, width=44.0)
    assert well_padding(wide) == pytest.approx(well_padding(p) + 2.0)
