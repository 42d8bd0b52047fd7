"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, labeledname.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class RenderConfig(BaseModel):
    """[render] section: where and how names are rendered."""

    model_config = {"frozen": True}

    domain: str = "metrics"
    include_type: bool = False
