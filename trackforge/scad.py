# trackforge/scad.py
# Árbol CSG -> código OpenSCAD (solo texto, sin E/S de ficheros)
from __future__ import annotations

from typing import List, Optional

from .config import DEFAULT_CONFIG
from .csg import Box, CSGNode, Cylinder, Difference, Hull, Transform, Union

_INDENT = "    "


def _f(x: float) -> str:
    s = f"{float(x):.6f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def _v(v) -> str:
    return "[" + ", ".join(_f(c) for c in v) + "]"


def _emit(node: CSGNode, depth: int, fn: int, out: List[str]) -> None:
    pad = _INDENT * depth
    if isinstance(node, Box):
        out.append(f"{pad}cube({_v(node.size)});")
    elif isinstance(node, Cylinder):
        if node.is_frustum:
            radii = f"r1={_f(node.radius1)}, r2={_f(node.radius2)}"
        else:
            radii = f"r={_f(node.radius1)}"
        out.append(f"{pad}cylinder(h={_f(node.height)}, {radii}, $fn={fn});")
    elif isinstance(node, Transform):
        ops = []
        if node.pose.origin != (0.0, 0.0, 0.0):
            ops.append(f"translate({_v(node.pose.origin)})")
        if node.pose.rotation != (0.0, 0.0, 0.0):
            ops.append(f"rotate({_v(node.pose.rotation)})")
        if not ops:
            _emit(node.child, depth, fn, out)
            return
        out.append(f"{pad}{' '.join(ops)} {{")
        _emit(node.child, depth + 1, fn, out)
        out.append(f"{pad}}}")
    elif isinstance(node, (Union, Hull, Difference)):
        if isinstance(node, Difference):
            name, kids = "difference", (node.base,) + node.subtracted
        else:
            name, kids = ("union" if isinstance(node, Union) else "hull"), node.children
        out.append(f"{pad}{name}() {{")
        for c in kids:
            _emit(c, depth + 1, fn, out)
        out.append(f"{pad}}}")
    else:
        raise TypeError(f"not a CSG node: {type(node).__name__}")


def to_scad(node: CSGNode, sections: Optional[int] = None) -> str:
    out: List[str] = []
    _emit(node, 0, int(sections or DEFAULT_CONFIG.sections), out)
    return "\n".join(out) + "\n"


__all__ = ["to_scad"]
