import dataclasses
import logging

import pytest

from trackforge.config import DEFAULT_CONFIG, ManifoldConfig
from trackforge.errors import InvalidParameter
from trackforge.logging_config import setup_logging


def test_defaults():
    assert DEFAULT_CONFIG.overlap == 0.01
    assert DEFAULT_CONFIG.bevel_width == 1.0
    assert DEFAULT_CONFIG.bevel == pytest.approx(1.01)


def test_from_env():
    cfg = ManifoldConfig.from_env({
        "TRACKFORGE_OVERLAP": "0,02",
        "TRACKFORGE_BEVEL_WIDTH": "0.5",
        "TRACKFORGE_SECTIONS": "48",
    })
    assert cfg == ManifoldConfig(overlap=0.02, bevel_width=0.5, sections=48)


def test_from_env_empty_uses_defaults():
    assert ManifoldConfig.from_env({}) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "kwargs",
    [dict(overlap=0), dict(overlap=-0.1), dict(bevel_width=0), dict(sections=2)],
)
def test_invalid_config(kwargs):
    with pytest.raises(InvalidParameter):
        ManifoldConfig(**kwargs)


def test_bad_env_value():
    with pytest.raises(InvalidParameter):
        ManifoldConfig.from_env({"TRACKFORGE_OVERLAP": "tiny"})


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.overlap = 1.0


def test_setup_logging_accepts_names(tmp_path):
    log_file = tmp_path / "trackforge.log"
    logger = setup_logging("debug", log_file=str(log_file))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    logger = setup_logging()
    assert len(logger.handlers) == 1


def test_setup_logging_unknown_level_falls_back_to_info():
    logger = setup_logging("loud")
    assert logger.level == logging.INFO
    assert logger.name == "trackforge"


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "out.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    logging.getLogger("trackforge.models").info("tramo generado")
    for h in logger.handlers:
        h.flush()
    assert "tramo generado" in log_file.read_text(encoding="utf-8")
    setup_logging()
