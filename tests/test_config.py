"""
Tests for YAML/JSON config loading, validation and CLI merging.
"""

import json
from argparse import Namespace
from pathlib import Path

import pytest

from graphenum.cli.config import (
    apply_config,
    load_config,
    merge_config_with_args,
    validate_config,
)


class TestLoadConfig:

    def test_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("input: graph.txt\ncliques:\n  min_size: 3\n")
        assert load_config(path) == {"input": "graph.txt", "cliques": {"min_size": 3}}

    def test_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"match": {"limit": 5}}))
        assert load_config(path) == {"match": {"limit": 5}}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_config(path) == {}

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("x = 1\n")
        with pytest.raises(ValueError, match="Unsupported"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("cliques: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="dictionary"):
            load_config(path)


class TestValidateConfig:

    def test_valid(self):
        validate_config({"input": "g.txt", "cliques": {"min_size": 3, "limit": 10}})

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown keys"):
            validate_config({"cliques": {"min_sise": 3}})

    def test_non_positive(self):
        with pytest.raises(ValueError, match="positive integer"):
            validate_config({"match": {"limit": 0}})

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="positive integer"):
            validate_config({"cliques": {"min_size": True}})

    def test_section_must_be_mapping(self):
        with pytest.raises(ValueError, match="mapping"):
            validate_config({"cliques": 3})

    def test_path_must_be_string(self):
        with pytest.raises(ValueError, match="path string"):
            validate_config({"input": 5})


class TestMergeConfig:

    def _args(self, **overrides):
        values = dict(command="cliques", input=None, output=None, config=None,
                      min_size=1, limit=None, verbose=False)
        values.update(overrides)
        return Namespace(**values)

    def test_config_fills_defaults(self):
        config = {"input": "g.txt", "cliques": {"min_size": 3, "limit": 7}}
        merged = merge_config_with_args(config, self._args(), [])
        assert merged.input == Path("g.txt")
        assert merged.min_size == 3
        assert merged.limit == 7

    def test_explicit_cli_wins(self):
        config = {"input": "g.txt", "cliques": {"min_size": 3}}
        args = self._args(input=Path("other.txt"), min_size=2)
        merged = merge_config_with_args(config, args, ["-i", "other.txt", "--min-size", "2"])
        assert merged.input == Path("other.txt")
        assert merged.min_size == 2

    def test_equals_syntax_counts_as_explicit(self):
        config = {"cliques": {"limit": 100}}
        merged = merge_config_with_args(config, self._args(limit=5), ["--limit=5"])
        assert merged.limit == 5

    def test_other_sections_ignored(self):
        config = {"match": {"limit": 3}, "pattern": "p.txt"}
        merged = merge_config_with_args(config, self._args(), [])
        assert merged.limit is None
        assert not hasattr(merged, "pattern")

    def test_original_namespace_untouched(self):
        args = self._args()
        merge_config_with_args({"cliques": {"min_size": 4}}, args, [])
        assert args.min_size == 1

    def test_apply_without_config(self):
        args = self._args()
        assert apply_config(args) is args

    def test_apply_with_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("cliques:\n  limit: 2\n")
        merged = apply_config(self._args(config=path, cli_args=["--config", str(path)]))
        assert merged.limit == 2
