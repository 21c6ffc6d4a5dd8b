"""Typed configuration for the resolver type generator."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import ujson as json
import yaml
from pydantic import BaseModel, Field, ValidationError

DEFAULT_CONTEXT = "Request"
DEFAULT_HEADER = "import { Request } from 'express';\n"


class GeneratorConfig(BaseModel):
    """Options threaded through a single generation run."""

    context: str = Field(default=DEFAULT_CONTEXT, min_length=1)
    header: str = DEFAULT_HEADER
    # Indentation used for interface members.
    indent: str = "\t"

    model_config = {"extra": "forbid"}

    def with_overrides(self, **overrides: Any) -> GeneratorConfig:
        """Return a copy with every non-``None`` override applied and validated."""
        data = self.model_dump(mode="python")
        data.update({key: value for key, value in overrides.items() if value is not None})
        return GeneratorConfig(**data)


def load_generator_config(path: str | Path) -> GeneratorConfig:
    """Load a config from YAML or JSON."""
    path = Path(path)
    data: Any
    text = path.read_text()
    try:
        if path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise ValueError(f"Invalid config {path}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config {path}: expected a mapping, got {type(data).__name__}")
    try:
        return GeneratorConfig(**data)
    except ValidationError as exc:
        raise ValueError(f"Invalid config {path}") from exc


def save_generator_config(config: GeneratorConfig, path: str | Path) -> None:
    """Persist a config as YAML or JSON based on file suffix."""
    path = Path(path)
    if path.suffix in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(config.model_dump(mode="python"), sort_keys=False))
    else:
        path.write_text(json.dumps(config.model_dump(mode="python"), indent=2))
