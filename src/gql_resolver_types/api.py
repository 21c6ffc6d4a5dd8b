"""Public API for downstream modules."""

from __future__ import annotations

import logging
from pathlib import Path

from graphql import DocumentNode, parse

from .config import GeneratorConfig, load_generator_config, save_generator_config
from .emitter import UnsupportedDefinitionKind, generate_resolver_types

__all__ = [
    "GeneratorConfig",
    "UnsupportedDefinitionKind",
    "load_config",
    "save_config",
    "parse_schema",
    "load_schema",
    "generate_from_text",
    "generate",
]

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> GeneratorConfig:
    """Read a generator config from disk."""
    return load_generator_config(path)


def save_config(config: GeneratorConfig, path: str | Path) -> None:
    """Persist a generator config to disk."""
    save_generator_config(config, path)


def parse_schema(text: str) -> DocumentNode:
    """Parse GraphQL SDL into a document; syntax errors propagate."""
    return parse(text)


def load_schema(path: str | Path) -> DocumentNode:
    """Read and parse a GraphQL schema file."""
    path = Path(path)
    if not path.exists():
        msg = f"Schema file not found: {path}"
        raise FileNotFoundError(msg)
    logger.info("Reading schema from %s", path)
    return parse_schema(path.read_text(encoding="utf-8"))


def generate_from_text(text: str, config: GeneratorConfig | None = None) -> str:
    """Translate SDL text into TypeScript declarations."""
    config = config or GeneratorConfig()
    return generate_resolver_types(
        config.context,
        config.header,
        parse_schema(text),
        indent=config.indent,
    )


def generate(
    schema_path: str | Path,
    out_path: str | Path | None = None,
    config: GeneratorConfig | None = None,
) -> str:
    """Entry point used by the CLI: read a schema, emit declarations, optionally write them."""
    config = config or GeneratorConfig()
    document = load_schema(schema_path)
    output = generate_resolver_types(config.context, config.header, document, indent=config.indent)
    logger.info("Generated declarations for %d definitions", len(document.definitions))
    if out_path is not None:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
        logger.info("Wrote %s", out_path)
    return output
