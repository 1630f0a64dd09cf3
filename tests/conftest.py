from typing import List

import pytest

from trackforge.config import ManifoldConfig
from trackforge.csg import CSGNode, Cylinder, walk


def cylinders(tree: CSGNode) -> List[Cylinder]:
    return [n for n in walk(tree) if isinstance(n, Cylinder)]


@pytest.fixture
def config() -> ManifoldConfig:
    return ManifoldConfig()


@pytest.fixture
def coarse() -> ManifoldConfig:
    # menos segmentos: tests de evaluación más rápidos
    return ManifoldConfig(sections=32)
