import math

import pytest

from trackforge.csg import Box, Hull, Transform, Union
from trackforge.errors import InvalidParameter
from trackforge.models._bevel import BevelDerived
from trackforge.models._cutout import NECK_WIDTH, funnel, neck_edges, plug_cutout
from trackforge.models.trackmaster_cutout import build_trackmaster_cutout
from trackforge.models.wood_cutout import build_wood_cutout

from .conftest import cylinders


def _bore(tree):
    return max(cylinders(tree), key=lambda c: c.height)


def test_wood_cutout_radius_and_position(config):
    tree = build_wood_cutout(config)
    assert isinstance(tree, Union)
    neck, bore = tree.children[0], tree.children[1]
    assert _bore(tree).radius1 == pytest.approx(6.3)
    assert bore.pose.origin == pytest.approx((10.75, 0.0, -config.overlap))
    # cuello abierto hacia fuera con epsilon
    assert neck.pose.origin[0] == pytest.approx(-config.overlap)
    assert neck.child.size[1] == NECK_WIDTH
    assert neck.child.size[2] == pytest.approx(12 + 2 * config.overlap)


def test_trackmaster_cutout_is_plain_reuse(config):
    assert build_trackmaster_cutout(config) == plug_cutout(3.8 + 0.7, 5, config=config)


def test_funnel_is_interpolated_hull(config):
    bv = BevelDerived.from_config(config)
    f = funnel(6.3, config)
    assert isinstance(f, Hull)
    radii = sorted(c.radius1 for c in cylinders(f))
    assert radii == pytest.approx([6.3 - bv.pad, 6.3 + bv.radius])
    # pendiente 45º: salto de radio == salto de altura
    outer, inner = f.children
    dz = inner.pose.origin[2] - (outer.pose.origin[2] + outer.child.height)
    assert dz == pytest.approx(radii[1] - radii[0])


def test_hourglass_has_funnel_on_both_faces(config):
    tree = build_wood_cutout(config)
    hulls = [c for c in tree.children if isinstance(c, Transform) and isinstance(_inner(c), Hull)]
    assert len(hulls) == 2


def _inner(node):
    while isinstance(node, Transform):
        node = node.child
    return node


def test_four_neck_corner_prisms(config):
    tree = build_wood_cutout(config)
    prisms = [c for c in tree.children[4:]]
    assert len(prisms) == 4
    assert all(isinstance(_inner(p), Box) for p in prisms)


def test_neck_edges_meet_bore():
    edges = neck_edges(6.3, 10.75, 12.0)
    x_join = 10.75 - math.sqrt(6.3 ** 2 - (NECK_WIDTH / 2) ** 2)
    assert [e.origin[0] for e in edges] == pytest.approx([0, 0, x_join, x_join])
    assert all(e.axis == "z" and e.length == 12.0 for e in edges)


@pytest.mark.parametrize(
    "radius, neck",
    [(0, 10), (-1, 10), (6.3, 0), (6.3, -2), (3.0, 10), (6.3, 2.0)],
)
def test_invalid_cutout_parameters(radius, neck):
    with pytest.raises(InvalidParameter):
        plug_cutout(radius, neck)


@pytest.mark.parametrize("radius", [float("inf"), True])
def test_cutout_rejects_non_finite_or_bool_radius(radius):
    with pytest.raises(InvalidParameter):
        plug_cutout(radius, 10.75)
