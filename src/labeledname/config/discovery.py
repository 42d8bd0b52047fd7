"""Locate and read ``labeledname.toml``.

An explicit path (``--config`` or ``LABELEDNAME_CONFIG``) wins; otherwise
the working directory and each of its parents are searched in turn.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "labeledname.toml"
CONFIG_ENV_VAR = "LABELEDNAME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A set ``LABELEDNAME_CONFIG`` is authoritative: when it points at a
    missing file no walk-up happens and None is returned.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse the TOML file at *path* into a plain dict.

    Returns ``{}`` when *path* is None or not a file. Invalid TOML is a
    user error and surfaces as :class:`click.ClickException`.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
