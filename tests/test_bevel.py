import math

import pytest

from trackforge.config import ManifoldConfig
from trackforge.csg import Transform
from trackforge.errors import InvalidParameter
from trackforge.models._bevel import SIN45, BevelDerived, Edge, chamfer_prism, derive_bevel


def test_derive_bevel_formula():
    b = derive_bevel(0.01, 1.0)
    assert b.pad == pytest.approx(SIN45 * 0.005)
    assert b.height == pytest.approx(SIN45 * 1.01)
    assert b.radius == pytest.approx(b.height - b.pad)


@pytest.mark.parametrize("overlap", [1e-4, 0.01, 0.1, 1.0])
@pytest.mark.parametrize("bevel_width", [1e-3, 0.5, 1.0, 3.0])
def test_bevel_radius_positive(overlap, bevel_width):
    assert derive_bevel(overlap, bevel_width).radius > 0


def test_from_config_matches_formula():
    cfg = ManifoldConfig(overlap=0.2, bevel_width=2.0)
    assert BevelDerived.from_config(cfg) == derive_bevel(0.2, 2.0)


def test_chamfer_prism_extends_past_edge_ends(config):
    edge = Edge("x", (0.0, 5.0, 12.0), 20.0, (1, 1))
    prism = chamfer_prism(edge, config)
    assert isinstance(prism, Transform)
    bv = BevelDerived.from_config(config)
    x, y, z = prism.pose.origin
    assert x == pytest.approx(-config.overlap)
    assert y == pytest.approx(5.0 + bv.pad)
    assert z == pytest.approx(12.0 + bv.pad)
    assert prism.pose.rotation == (0.0, 90.0, 0.0)
    bar = prism.child.child.child
    assert bar.size[2] == pytest.approx(20.0 + 2 * config.overlap)
    assert bar.size[0] == pytest.approx(config.bevel)


def test_chamfer_prism_is_rotated_45(config):
    prism = chamfer_prism(Edge("z", (0, 0, 0), 3.0, (-1, -1)), config)
    assert prism.child.pose.rotation == (0.0, 0.0, 45.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(axis="w", origin=(0, 0, 0), length=1.0, sign=(1, 1)),
        dict(axis="x", origin=(0, 0, 0), length=0.0, sign=(1, 1)),
        dict(axis="x", origin=(0, 0, 0), length=1.0, sign=(1, 0)),
    ],
)
def test_bad_edges(kwargs):
    with pytest.raises(InvalidParameter):
        Edge(**kwargs)


def test_sin45():
    assert SIN45 == pytest.approx(math.sqrt(2) / 2)
