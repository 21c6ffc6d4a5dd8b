from pathlib import Path

import pytest

from gql_resolver_types import api
from gql_resolver_types.config import DEFAULT_HEADER, GeneratorConfig


def test_defaults_target_express_request() -> None:
    config = GeneratorConfig()
    assert config.context == "Request"
    assert config.header == DEFAULT_HEADER
    assert config.indent == "\t"


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_config_roundtrip(tmp_path: Path, suffix: str) -> None:
    config = GeneratorConfig(context="Context", header="import { Context } from './ctx';\n", indent="  ")
    path = tmp_path / f"gen{suffix}"
    api.save_config(config, path)
    assert api.load_config(path) == config


def test_partial_yaml_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "gen.yml"
    path.write_text("context: Ctx\n")
    config = api.load_config(path)
    assert config.context == "Ctx"
    assert config.header == DEFAULT_HEADER


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "gen.yaml"
    path.write_text("")
    assert api.load_config(path) == GeneratorConfig()


def test_invalid_config_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "gen.yaml"
    path.write_text("context: Ctx\nunknown: 1\n")
    with pytest.raises(ValueError, match="Invalid config"):
        api.load_config(path)


def test_with_overrides_skips_none() -> None:
    config = GeneratorConfig(context="Ctx").with_overrides(context=None, header="// header\n")
    assert config.context == "Ctx"
    assert config.header == "// header\n"


def test_empty_context_rejected() -> None:
    with pytest.raises(ValueError):
        GeneratorConfig().with_overrides(context="")


def test_malformed_yaml_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "gen.yaml"
    path.write_text("context: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config"):
        api.load_config(path)


def test_malformed_json_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "gen.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid config"):
        api.load_config(path)


@pytest.mark.parametrize("text", ["- a\n- b\n", "just-a-string\n"])
def test_non_mapping_yaml_raises_value_error(tmp_path: Path, text: str) -> None:
    path = tmp_path / "gen.yaml"
    path.write_text(text)
    with pytest.raises(ValueError, match="expected a mapping"):
        api.load_config(path)
