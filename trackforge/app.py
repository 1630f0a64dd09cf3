from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Literal, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from . import __version__
from .config import ManifoldConfig
from .csg import CSGNode, count_nodes, to_dict
from .errors import InvalidParameter, NonManifoldGeometry, TrackforgeError, UnknownPart
from .kernel import evaluate, mesh_stats
from .logging_config import setup_logging
from .models import METADATA, REGISTRY, aliases_for, resolve_slug
from .models.standards import standard_params
from .parts import PartRequest, build_part, part_slug
from .scad import to_scad

logger = logging.getLogger(__name__)

# -------------------------- Config & App --------------------------

def _split_origins(s: Optional[str]) -> list[str]:
    if not s:
        return []
    return [x.strip() for x in s.split(",") if x.strip()]

CORS_ALLOW = os.getenv("CORS_ALLOW_ORIGINS", "")
origins = _split_origins(CORS_ALLOW) or ["*"]

LOG_LEVEL = os.getenv("TRACKFORGE_LOG_LEVEL", "INFO")
setup_logging(LOG_LEVEL)

CONFIG = ManifoldConfig.from_env()

app = FastAPI(title="trackforge: track connector geometry", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------- Schemas --------------------------

class GenerateBody(BaseModel):
    part: Optional[PartRequest] = None          # petición tipada
    slug: Optional[str] = None                  # o slug del registro (snake/kebab/alias)
    params: Dict[str, Any] = Field(default_factory=dict)
    format: Literal["csg", "scad", "stats"] = "csg"

# -------------------------- Helpers --------------------------

def _http_error(e: TrackforgeError) -> HTTPException:
    if isinstance(e, UnknownPart):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, NonManifoldGeometry):
        return HTTPException(status_code=422, detail=f"Non-manifold geometry: {e}")
    return HTTPException(status_code=400, detail=f"Invalid parameter: {e}")


def _build(body: GenerateBody) -> tuple[str, CSGNode]:
    if body.part is not None:
        return part_slug(body.part), build_part(body.part, config=CONFIG)
    if not body.slug:
        raise InvalidParameter("either 'part' or 'slug' is required")
    snake = resolve_slug(body.slug)
    if snake is None:
        raise UnknownPart(f"Model '{body.slug}' not found")
    builder: Callable = REGISTRY[snake]
    return snake, builder(body.params or {}, config=CONFIG)

# -------------------------- Endpoints --------------------------

@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True, "version": __version__, "models": len(REGISTRY)}


@app.get("/models")
def list_models() -> Dict[str, Any]:
    return {
        name: {"aliases": aliases_for(name), **METADATA.get(name, {})}
        for name in sorted(REGISTRY)
    }


@app.get("/standards/{standard}")
def get_standard(standard: str) -> Dict[str, Any]:
    try:
        return standard_params(standard).as_dict()
    except TrackforgeError as e:
        raise _http_error(e)


@app.post("/generate")
def generate(body: GenerateBody) -> Dict[str, Any]:
    try:
        slug, tree = _build(body)
        out: Dict[str, Any] = {"slug": slug, "nodes": count_nodes(tree)}
        if body.format == "csg":
            out["csg"] = to_dict(tree)
        elif body.format == "scad":
            out["scad"] = to_scad(tree, CONFIG.sections)
        else:
            out["stats"] = mesh_stats(evaluate(tree, CONFIG.sections))
    except TrackforgeError as e:
        logger.info("generate rejected: %s", e)
        raise _http_error(e)
    logger.info("generated %s as %s (%d nodes)", slug, body.format, out["nodes"])
    return out
