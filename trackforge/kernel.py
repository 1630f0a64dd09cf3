# trackforge/kernel.py
"""
Evaluador de referencia: árbol CSG -> trimesh.Trimesh.

Primitivas, hulls y transformaciones con trimesh; booleanas con Manifold3D
(robustas, siempre devuelven una variedad cerrada). Sirve a los tests y al
servicio HTTP; la exportación de mallas queda fuera del paquete.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Optional

import manifold3d as m3d
import numpy as np
import trimesh

from .config import DEFAULT_CONFIG
from .csg import Box, CSGNode, Cylinder, Difference, Hull, Transform, Union
from .errors import NonManifoldGeometry

logger = logging.getLogger(__name__)


# ---------------------- Primitivas ----------------------

def _box(node: Box) -> trimesh.Trimesh:
    size = np.asarray(node.size, dtype=float)
    m = trimesh.creation.box(extents=size)
    m.apply_translation(size / 2.0)  # esquina mínima en el origen
    return m


def _ring(radius: float, z: float, sections: int) -> np.ndarray:
    if radius <= 0:
        return np.array([[0.0, 0.0, z]])
    a = np.linspace(0.0, 2.0 * math.pi, sections, endpoint=False)
    return np.column_stack([radius * np.cos(a), radius * np.sin(a), np.full(sections, z)])


def _cylinder(node: Cylinder, sections: int) -> trimesh.Trimesh:
    if not node.is_frustum:
        m = trimesh.creation.cylinder(radius=node.radius1, height=node.height, sections=sections)
        m.apply_translation((0.0, 0.0, node.height / 2.0))
        return m
    # tronco de cono: envolvente convexa de los dos anillos
    pts = np.vstack([_ring(node.radius1, 0.0, sections), _ring(node.radius2, node.height, sections)])
    return trimesh.points.PointCloud(pts).convex_hull


def _hull(meshes: Iterable[trimesh.Trimesh]) -> trimesh.Trimesh:
    pts = np.vstack([m.vertices for m in meshes if len(m.vertices)])
    return trimesh.points.PointCloud(pts).convex_hull


# ---------------------- Manifold3D bridges ----------------------

def _to_mf(mesh: trimesh.Trimesh) -> "m3d.Manifold":
    v = np.ascontiguousarray(mesh.vertices, dtype=np.float32)
    f = np.ascontiguousarray(mesh.faces, dtype=np.uint32)
    try:
        mf = m3d.Manifold(m3d.Mesh(vert_properties=v, tri_verts=f))
    except Exception as e:
        raise NonManifoldGeometry(f"operand rejected by manifold3d: {e}") from e
    status = mf.status()
    if status != m3d.Error.NoError:
        raise NonManifoldGeometry(f"operand rejected by manifold3d: {status}")
    return mf


def _from_mf(manifold_obj: "m3d.Manifold") -> trimesh.Trimesh:
    if manifold_obj.is_empty():
        return trimesh.Trimesh()
    mmesh = manifold_obj.to_mesh()
    v = np.asarray(mmesh.vert_properties, dtype=float)[:, :3]
    f = np.asarray(mmesh.tri_verts, dtype=np.int64)
    # sin process: la fusión de vértices coincidentes rompería la topología cerrada de manifold
    return trimesh.Trimesh(vertices=v, faces=f, process=False)


def _union_mf(meshes: Iterable[trimesh.Trimesh]) -> Optional["m3d.Manifold"]:
    acc = None
    for msh in meshes:
        if not len(msh.vertices):
            continue
        mm = _to_mf(msh)
        acc = mm if acc is None else (acc + mm)
    return acc


# ---------------------- Booleanas ----------------------

def union(meshes: Iterable[trimesh.Trimesh]) -> trimesh.Trimesh:
    acc = _union_mf(meshes)
    return trimesh.Trimesh() if acc is None else _from_mf(acc)


def difference(base: trimesh.Trimesh, cutters: Iterable[trimesh.Trimesh]) -> trimesh.Trimesh:
    if not len(base.vertices):
        return trimesh.Trimesh()
    mA = _to_mf(base)
    mB = _union_mf(cutters)  # unir cortadores y restar una sola vez
    return _from_mf(mA if mB is None else mA - mB)


# ---------------------- Evaluación ----------------------

def _eval(node: CSGNode, sections: int) -> trimesh.Trimesh:
    if isinstance(node, Box):
        return _box(node)
    if isinstance(node, Cylinder):
        return _cylinder(node, sections)
    if isinstance(node, Transform):
        m = _eval(node.child, sections).copy()
        m.apply_transform(node.pose.matrix())
        return m
    if isinstance(node, Hull):
        return _hull(_eval(c, sections) for c in node.children)
    if isinstance(node, Union):
        return union([_eval(c, sections) for c in node.children])
    if isinstance(node, Difference):
        return difference(_eval(node.base, sections), [_eval(c, sections) for c in node.subtracted])
    raise TypeError(f"not a CSG node: {type(node).__name__}")


def evaluate(node: CSGNode, sections: Optional[int] = None, strict: bool = True) -> trimesh.Trimesh:
    """
    Evalúa el árbol completo. Con `strict`, una malla resultante que no sea
    cerrada lanza NonManifoldGeometry en lugar de devolverse.
    """
    s = int(sections or DEFAULT_CONFIG.sections)
    mesh = _eval(node, s)
    if strict and len(mesh.faces) and not mesh.is_watertight:
        logger.warning("evaluated mesh is not watertight (%d faces)", len(mesh.faces))
        raise NonManifoldGeometry("evaluated mesh is not watertight")
    logger.debug("evaluated %d faces, volume=%.3f", len(mesh.faces), mesh.volume if len(mesh.faces) else 0.0)
    return mesh


def interference_volume(a: CSGNode, b: CSGNode, sections: Optional[int] = None) -> float:
    """Volumen común de dos piezas evaluadas (0 si encajan sin interferir)."""
    ma = _to_mf(evaluate(a, sections))
    mb = _to_mf(evaluate(b, sections))
    common = _from_mf(ma ^ mb)
    return float(common.volume) if len(common.faces) else 0.0


def mesh_stats(mesh: trimesh.Trimesh) -> Dict[str, Any]:
    if not len(mesh.faces):
        return {"faces": 0, "volume": 0.0, "watertight": False, "bounds": None, "extents": None}
    bounds: List[List[float]] = np.asarray(mesh.bounds, dtype=float).round(6).tolist()
    return {
        "faces": int(len(mesh.faces)),
        "volume": float(mesh.volume),
        "watertight": bool(mesh.is_watertight),
        "bounds": bounds,
        "extents": np.asarray(mesh.extents, dtype=float).round(6).tolist(),
    }


__all__ = ["evaluate", "union", "difference", "interference_volume", "mesh_stats"]
