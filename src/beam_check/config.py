"""Configuration loading for beam checks.

Provides:
- YAML loading for the section table and design constants
- The cached default section table shipped with the package
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ConfigurationError
from .models.inputs import DesignConstants

logger = logging.getLogger(__name__)


DEFAULT_SECTIONS_PATH = Path(__file__).resolve().parent / "data" / "sections.yaml"


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Read a YAML file whose top level is a mapping.

    Parameters
    ----------
    path : str or Path
        File to read.

    Returns
    -------
    dict
        Parsed YAML content.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ConfigurationError
        If the file is not valid YAML or its top level is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.debug("Loading %s", path)
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a mapping at the top of {path}, got {type(data).__name__}"
        )
    return data


def load_design_constants(path: str | Path | None = None) -> DesignConstants:
    """Design constants from YAML, or the mild steel defaults.

    Recognised keys are ``youngs_modulus``, ``yield_stress`` and
    ``deflection_limit``; omitted keys keep their defaults.
    """
    if path is None:
        return DesignConstants()

    data = load_yaml(path)
    try:
        return DesignConstants(**data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid design constants in {path}: {exc}") from exc
