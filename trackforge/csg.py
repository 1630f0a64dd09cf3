# trackforge/csg.py
"""
Árbol CSG: primitivas, booleanas y transformaciones rígidas.

Convenciones de marco local (sin flags `center`):
  - Box(size) ocupa [0, sx] x [0, sy] x [0, sz].
  - Cylinder(height, r1, r2) apoya en el plano XY, eje +Z, de z=0 a z=height.
Toda colocación pasa por un Pose explícito: primero rotación (grados,
x -> y -> z alrededor del origen local) y después traslación.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Sequence, Tuple, Union as _U

import numpy as np
import trimesh

from .errors import InvalidParameter

Vec3 = Tuple[float, float, float]


def vec3(obj: Any) -> Vec3:
    """Convierte tuple/list/ndarray a Vec3 de floats."""
    try:
        x, y, z = obj
    except (TypeError, ValueError):
        raise InvalidParameter(f"expected a 3-vector, got {obj!r}") from None
    return (float(x), float(y), float(z))


# ---------------------- Pose ----------------------

@dataclass(frozen=True)
class Pose:
    origin: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", vec3(self.origin))
        object.__setattr__(self, "rotation", vec3(self.rotation))

    @property
    def is_identity(self) -> bool:
        return self.origin == (0.0, 0.0, 0.0) and self.rotation == (0.0, 0.0, 0.0)

    def matrix(self) -> np.ndarray:
        """Matriz homogénea 4x4 (rotación estática xyz y luego traslación)."""
        rx, ry, rz = (math.radians(a) for a in self.rotation)
        R = trimesh.transformations.euler_matrix(rx, ry, rz, "sxyz")
        T = trimesh.transformations.translation_matrix(self.origin)
        return T @ R


# ---------------------- Nodos ----------------------

@dataclass(frozen=True)
class Box:
    size: Vec3

    def __post_init__(self) -> None:
        size = vec3(self.size)
        if min(size) <= 0 or not all(math.isfinite(c) for c in size):
            raise InvalidParameter(f"box size must be positive, got {size}")
        object.__setattr__(self, "size", size)


@dataclass(frozen=True)
class Cylinder:
    height: float
    radius1: float
    radius2: float

    def __post_init__(self) -> None:
        h, r1, r2 = float(self.height), float(self.radius1), float(self.radius2)
        if h <= 0 or not math.isfinite(h):
            raise InvalidParameter(f"cylinder height must be positive, got {h}")
        if r1 < 0 or r2 < 0 or (r1 == 0 and r2 == 0) or not math.isfinite(r1 + r2):
            raise InvalidParameter(f"invalid cylinder radii ({r1}, {r2})")
        object.__setattr__(self, "height", h)
        object.__setattr__(self, "radius1", r1)
        object.__setattr__(self, "radius2", r2)

    @property
    def is_frustum(self) -> bool:
        return self.radius1 != self.radius2


@dataclass(frozen=True)
class Union:
    children: Tuple["CSGNode", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", _nodes(self.children, "union"))


@dataclass(frozen=True)
class Difference:
    base: "CSGNode"
    subtracted: Tuple["CSGNode", ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "subtracted", tuple(self.subtracted))


@dataclass(frozen=True)
class Hull:
    children: Tuple["CSGNode", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", _nodes(self.children, "hull"))


@dataclass(frozen=True)
class Transform:
    child: "CSGNode"
    pose: Pose = field(default_factory=Pose)


CSGNode = _U[Box, Cylinder, Union, Difference, Hull, Transform]
NODE_TYPES = (Box, Cylinder, Union, Difference, Hull, Transform)


def _nodes(children: Iterable["CSGNode"], what: str) -> Tuple["CSGNode", ...]:
    out = tuple(children)
    if not out:
        raise InvalidParameter(f"{what} needs at least one child")
    return out


# ---------------------- Helpers de construcción ----------------------

def box(size: Sequence[float], at: Sequence[float] = (0.0, 0.0, 0.0)) -> CSGNode:
    """Caja con su esquina mínima en `at`."""
    return translate(Box(vec3(size)), at)


def centered_box(size: Sequence[float], center: Sequence[float] = (0.0, 0.0, 0.0)) -> CSGNode:
    sx, sy, sz = vec3(size)
    cx, cy, cz = vec3(center)
    return translate(Box((sx, sy, sz)), (cx - sx / 2.0, cy - sy / 2.0, cz - sz / 2.0))


def cylinder(
    height: float,
    radius: float | None = None,
    radius1: float | None = None,
    radius2: float | None = None,
    at: Sequence[float] = (0.0, 0.0, 0.0),
) -> CSGNode:
    """Cilindro (o tronco de cono si r1 != r2) con la base centrada en `at`."""
    if radius is not None:
        r1 = r2 = radius
    else:
        if radius1 is None or radius2 is None:
            raise InvalidParameter("cylinder needs radius or radius1+radius2")
        r1, r2 = radius1, radius2
    return translate(Cylinder(height, r1, r2), at)


def translate(node: CSGNode, offset: Sequence[float]) -> CSGNode:
    pose = Pose(origin=vec3(offset))
    return node if pose.is_identity else Transform(node, pose)


def rotate(node: CSGNode, angles: Sequence[float]) -> CSGNode:
    pose = Pose(rotation=vec3(angles))
    return node if pose.is_identity else Transform(node, pose)


def place(node: CSGNode, origin: Sequence[float], rotation: Sequence[float]) -> CSGNode:
    return Transform(node, Pose(origin=vec3(origin), rotation=vec3(rotation)))


def union(*children: CSGNode) -> CSGNode:
    return Union(children)


def difference(base: CSGNode, *cutters: CSGNode) -> CSGNode:
    return Difference(base, cutters)


def hull(*children: CSGNode) -> CSGNode:
    return Hull(children)


# ---------------------- Recorrido ----------------------

def children_of(node: CSGNode) -> Tuple[CSGNode, ...]:
    if isinstance(node, (Union, Hull)):
        return node.children
    if isinstance(node, Difference):
        return (node.base,) + node.subtracted
    if isinstance(node, Transform):
        return (node.child,)
    return ()


def walk(node: CSGNode) -> Iterator[CSGNode]:
    """Recorrido en profundidad (preorden)."""
    stack = [node]
    while stack:
        n = stack.pop()
        yield n
        stack.extend(reversed(children_of(n)))


def count_nodes(node: CSGNode) -> int:
    return sum(1 for _ in walk(node))


# ---------------------- Serialización (formato de intercambio) ----------------------

def to_dict(node: CSGNode) -> Dict[str, Any]:
    if isinstance(node, Box):
        return {"type": "box", "size": list(node.size)}
    if isinstance(node, Cylinder):
        return {"type": "cylinder", "height": node.height, "radius1": node.radius1, "radius2": node.radius2}
    if isinstance(node, Union):
        return {"type": "union", "children": [to_dict(c) for c in node.children]}
    if isinstance(node, Hull):
        return {"type": "hull", "children": [to_dict(c) for c in node.children]}
    if isinstance(node, Difference):
        return {
            "type": "difference",
            "base": to_dict(node.base),
            "subtracted": [to_dict(c) for c in node.subtracted],
        }
    if isinstance(node, Transform):
        return {
            "type": "transform",
            "origin": list(node.pose.origin),
            "rotation": list(node.pose.rotation),
            "child": to_dict(node.child),
        }
    raise TypeError(f"not a CSG node: {type(node).__name__}")


def from_dict(data: Dict[str, Any]) -> CSGNode:
    kind = str(data.get("type", "")).lower()
    if kind == "box":
        return Box(vec3(data["size"]))
    if kind == "cylinder":
        return Cylinder(data["height"], data["radius1"], data["radius2"])
    if kind == "union":
        return Union(tuple(from_dict(c) for c in data["children"]))
    if kind == "hull":
        return Hull(tuple(from_dict(c) for c in data["children"]))
    if kind == "difference":
        return Difference(from_dict(data["base"]), tuple(from_dict(c) for c in data.get("subtracted", [])))
    if kind == "transform":
        pose = Pose(origin=data.get("origin", (0, 0, 0)), rotation=data.get("rotation", (0, 0, 0)))
        return Transform(from_dict(data["child"]), pose)
    raise InvalidParameter(f"unknown CSG node type {kind!r}")


__all__ = [
    "Vec3", "vec3", "Pose",
    "Box", "Cylinder", "Union", "Difference", "Hull", "Transform", "CSGNode", "NODE_TYPES",
    "box", "centered_box", "cylinder", "translate", "rotate", "place",
    "union", "difference", "hull",
    "children_of", "walk", "count_nodes", "to_dict", "from_dict",
]
