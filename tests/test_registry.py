import pytest

from trackforge.csg import Difference, Union
from trackforge.errors import InvalidParameter, UnknownPart
from trackforge.models import ALIASES, REGISTRY, aliases_for, get_builder, resolve_slug
from trackforge.models.standards import Standard
from trackforge.models.wood_plug import build_wood_plug
from trackforge.models.wood_track import build_wood_track
from trackforge.parts import PartKind, PartRequest, build_part, part_slug

EXPECTED = {
    "wood_track", "wood_plug", "wood_cutout", "wood_straight",
    "trackmaster_plug", "trackmaster_cutout",
}


def test_all_builders_discovered():
    assert set(REGISTRY) == EXPECTED


@pytest.mark.parametrize(
    "slug, target",
    [
        ("wood-track", "wood_track"),
        ("WOOD_TRACK", "wood_track"),
        ("brio-plug", "wood_plug"),
        ("tm-cutout", "trackmaster_cutout"),
        ("recta-madera", "wood_straight"),
    ],
)
def test_alias_resolution(slug, target):
    assert resolve_slug(slug) == target
    assert get_builder(slug) is REGISTRY[target]


def test_unknown_slug():
    assert get_builder("monorail") is None
    assert get_builder("") is None


def test_aliases_listed():
    assert "wood-plug" in aliases_for("wood_plug")
    assert all(ALIASES[a] == "wood_plug" for a in aliases_for("wood_plug"))


def test_builders_accept_loose_params():
    tree = get_builder("wood-track")({"length_mm": "53,5"})
    assert tree == build_wood_track(53.5)
    assert get_builder("wood-plug")({"solid": "false"}) == build_wood_plug(False)


def test_builder_defaults():
    assert isinstance(get_builder("wood_track")({}), Difference)
    with pytest.raises(InvalidParameter):
        get_builder("wood_plug")({"solid": "maybe"})


# ---------------------- PartRequest ----------------------

def test_part_request_maps_to_constructor():
    req = PartRequest(standard="wood", kind="track", length=53.5)
    assert part_slug(req) == "wood_track"
    assert build_part(req) == build_wood_track(53.5)


def test_part_request_spring_plug():
    req = PartRequest(kind=PartKind.PLUG, solid=False)
    assert req.standard is Standard.WOOD
    assert build_part(req) == build_wood_plug(False)


def test_trackmaster_parts():
    assert isinstance(build_part(PartRequest(standard="trackmaster", kind="plug")), Union)
    assert isinstance(build_part(PartRequest(standard="trackmaster", kind="cutout")), Union)


def test_trackmaster_track_is_not_in_catalog():
    with pytest.raises(UnknownPart):
        build_part(PartRequest(standard="trackmaster", kind="track", length=50))


def test_track_needs_length():
    with pytest.raises(InvalidParameter):
        build_part(PartRequest(kind="track"))
    with pytest.raises(InvalidParameter):
        build_part(PartRequest(kind="straight", length=10.0))


def test_registry_holds_each_module_make_model():
    import importlib

    for name, fn in REGISTRY.items():
        mod = importlib.import_module(f"trackforge.models.{name}")
        assert fn is mod.make_model
