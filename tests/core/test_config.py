"""Tests for configuration loading."""

from __future__ import annotations

import os

import pytest

from ldgraph.config import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    LOCAL_CONFIG_FILENAME,
    ConfigLoader,
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    find_git_root,
    get_config,
    load_config,
    merge_configs,
    parse_toml,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer LDGRAPH_* variables out of these tests."""
    for name in list(os.environ):
        if name.startswith("LDGRAPH_"):
            monkeypatch.delenv(name, raising=False)


class TestConfigLoader:
    def test_dotted_get(self):
        config = ConfigLoader.from_dict({"analysis": {"max_nodes": 10}})
        assert config.get("analysis.max_nodes") == 10
        assert config.get("analysis.missing", "d") == "d"
        assert config.get("nothing.here") is None

    def test_get_through_non_dict(self):
        config = ConfigLoader.from_dict({"analysis": 3})
        assert config.get("analysis.workers", 1) == 1

    def test_section(self):
        config = ConfigLoader.from_dict({"analysis": {"workers": 2}, "flag": True})
        assert config.section("analysis") == {"workers": 2}
        assert config.section("flag") == {}
        assert config.section("absent") == {}

    def test_from_dict_copies(self):
        data = {"analysis": {"workers": 2}}
        config = ConfigLoader.from_dict(data)
        data["analysis"]["workers"] = 9
        assert config.get("analysis.workers") == 2

    def test_get_raw_is_copy(self):
        config = ConfigLoader.from_dict({"a": {"b": 1}})
        raw = config.get_raw()
        raw["a"]["b"] = 2
        assert config.get("a.b") == 1


class TestParseToml:
    def test_plain_containers(self):
        data = parse_toml('[analysis]\nmax_nodes = 10\ntags = ["a", "b"]\n')
        assert data == {"analysis": {"max_nodes": 10, "tags": ["a", "b"]}}
        assert type(data["analysis"]) is dict


class TestMergeConfigs:
    def test_deep_merge(self):
        base = {"analysis": {"workers": 1, "max_nodes": 5000}, "logging": {"level": "WARNING"}}
        result = merge_configs(base, {"analysis": {"workers": 4}})
        assert result == {"analysis": {"workers": 4, "max_nodes": 5000}, "logging": {"level": "WARNING"}}
        assert base["analysis"]["workers"] == 1

    def test_lists_replaced(self):
        assert merge_configs({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


class TestFindFiles:
    def test_find_git_root(self, tmp_path):
        (tmp_path / ".git").mkdir()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_git_root(nested) == tmp_path.resolve()

    def test_find_config_in_parent(self, tmp_path):
        (tmp_path / ".git").mkdir()
        config = tmp_path / CONFIG_FILENAME
        config.write_text("", encoding="utf-8")
        nested = tmp_path / "sub"
        nested.mkdir()
        assert find_config_file(nested) == config.resolve()

    def test_stops_at_git_root(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
        repo = tmp_path / "repo"
        (repo / ".git").mkdir(parents=True)
        assert find_config_file(repo) is None

    def test_stops_at_worktree_root_from_nested_dir(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("", encoding="utf-8")
        repo = tmp_path / "repo"
        nested = repo / "src" / "pkg"
        nested.mkdir(parents=True)
        (repo / ".git").write_text("gitdir: /elsewhere/.git/worktrees/repo\n", encoding="utf-8")
        assert find_git_root(nested) == repo.resolve()
        assert find_config_file(nested) is None


class TestTryParseEnvValue:
    def test_json_list(self):
        assert _try_parse_env_value('["a", "b"]') == ["a", "b"]

    def test_json_object(self):
        assert _try_parse_env_value('{"k": 1}') == {"k": 1}

    def test_malformed_json_stays_string(self):
        assert _try_parse_env_value("[oops") == "[oops"

    def test_booleans(self):
        assert _try_parse_env_value("TRUE") is True
        assert _try_parse_env_value("false") is False

    def test_numbers(self):
        assert _try_parse_env_value("8") == 8
        assert _try_parse_env_value("1e-4") == pytest.approx(1e-4)

    def test_plain_string(self):
        assert _try_parse_env_value("DEBUG") == "DEBUG"


class TestEnvOverrides:
    def test_existing_section(self, monkeypatch):
        monkeypatch.setenv("LDGRAPH_ANALYSIS_MAX_NODES", "25")
        config = _apply_env_overrides({"analysis": {"max_nodes": 5000}})
        assert config["analysis"]["max_nodes"] == 25

    def test_unknown_section_ignored(self, monkeypatch):
        monkeypatch.setenv("LDGRAPH_RENDER_COLOR", "red")
        config = _apply_env_overrides({"analysis": {}})
        assert config == {"analysis": {}}

    def test_longest_section_wins(self, monkeypatch):
        monkeypatch.setenv("LDGRAPH_A_B_C", "1")
        config = _apply_env_overrides({"a": {}, "a_b": {}})
        assert config == {"a": {}, "a_b": {"c": 1}}


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        (tmp_path / ".git").mkdir()
        config = load_config(start=tmp_path)
        assert config.path is None
        assert config.get_raw() == DEFAULT_CONFIG

    def test_file_and_local_override(self, tmp_path):
        (tmp_path / ".git").mkdir()
        (tmp_path / CONFIG_FILENAME).write_text(
            "[analysis]\nmax_nodes = 100\nworkers = 2\n", encoding="utf-8"
        )
        (tmp_path / LOCAL_CONFIG_FILENAME).write_text("[analysis]\nworkers = 8\n", encoding="utf-8")

        config = load_config(start=tmp_path)
        assert config.path == (tmp_path / CONFIG_FILENAME).resolve()
        assert config.get("analysis.max_nodes") == 100
        assert config.get("analysis.workers") == 8
        assert config.get("analysis.eigenvector_max_iterations") == 100

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[builder]\nsynthetic_id_prefix = "_:x"\n', encoding="utf-8")
        config = load_config(path)
        assert config.get("builder.synthetic_id_prefix") == "_:x"
        assert config.path == path

    def test_env_beats_file(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.toml"
        path.write_text("[analysis]\nworkers = 2\n", encoding="utf-8")
        monkeypatch.setenv("LDGRAPH_ANALYSIS_WORKERS", "6")
        assert load_config(path).get("analysis.workers") == 6

    def test_get_config_returns_dict(self, tmp_path):
        (tmp_path / ".git").mkdir()
        assert get_config(start=tmp_path)["logging"]["level"] == "WARNING"
