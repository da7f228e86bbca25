"""
Locations of the sample meshes and planes shipped under ``data/``.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def project_root() -> Path:
    """Checkout directory holding the ``meshslicer`` package and ``data/``."""
    root = Path(__file__).parent.parent
    logger.debug("meshslicer checkout at %s", root)
    return root


def data_path(filename: str) -> Path:
    """Path of a bundled sample file, e.g. ``data_path("cube.obj")``."""
    p = project_root() / "data" / filename
    logger.debug("Sample file %s -> %s", filename, p)
    return p
