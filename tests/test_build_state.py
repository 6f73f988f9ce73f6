from __future__ import annotations

import json

import pytest

from buildpath.errors import BuildPathError
from buildpath.state.app_discovery import discover_project_apps
from buildpath.state.build_state import current_profiles_for, load_build_state
from buildpath.state.project_config import DepSpec, load_project_config
from buildpath.util.paths import find_project_root, profile_dir


def _write_config(root, data) -> None:
    (root / "buildpath.json").write_text(json.dumps(data), encoding="utf-8")


def _touch(path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")


@pytest.mark.parametrize(
    "profiles, expected",
    [
        (["default"], "default"),
        (["default", "test"], "test"),
        (["default", "test", "prod"], "test+prod"),
    ],
)
def test_profile_dir(profiles, expected):
    assert profile_dir(profiles) == expected


def test_current_profiles_start_with_default_and_drop_repeats():
    assert current_profiles_for(["test", " test", "", "default", "prod"]) == ["default", "test", "prod"]


def test_find_project_root_walks_up(tmp_path):
    _write_config(tmp_path, {})
    nested = tmp_path / "apps" / "a" / "src"
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path.resolve()


def test_find_project_root_falls_back_to_start(tmp_path):
    assert find_project_root(tmp_path) == tmp_path.resolve()


def test_dep_spec_shorthands():
    assert DepSpec.model_validate("cowboy").as_pair() == ("cowboy", {})
    assert DepSpec.model_validate(["cowboy", "2.9.0"]).as_pair() == ("cowboy", "2.9.0")
    assert DepSpec.model_validate({"name": "cowboy", "git": "url"}).as_pair() == ("cowboy", {"git": "url"})


def test_missing_config_gives_defaults(tmp_path):
    cfg = load_project_config(tmp_path / "buildpath.json")
    assert cfg.base_dir == "_build"
    assert cfg.apps is None
    assert cfg.deps_for("default") == []


def test_unknown_config_key_is_an_error(tmp_path):
    _write_config(tmp_path, {"bse_dir": "out"})
    with pytest.raises(BuildPathError, match="invalid project config"):
        load_project_config(tmp_path / "buildpath.json")


def test_malformed_json_is_an_error(tmp_path):
    (tmp_path / "buildpath.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(BuildPathError):
        load_project_config(tmp_path / "buildpath.json")


def test_discover_apps_in_order_and_skip_build_dir(tmp_path):
    _touch(tmp_path / "apps" / "web" / "src" / "web.app.src")
    _touch(tmp_path / "apps" / "core" / "src" / "core.app.src")
    _touch(tmp_path / "lib" / "legacy" / "ebin" / "legacy.app")
    _touch(tmp_path / "src" / "top.app.src")

    assert discover_project_apps(tmp_path, ["apps/*", "lib/*", "."]) == ["core", "web", "legacy", "top"]
    assert discover_project_apps(tmp_path, ["lib/*"], exclude=tmp_path / "lib") == []


def test_load_build_state_from_config(tmp_path):
    _write_config(
        tmp_path,
        {
            "apps": ["myapp"],
            "deps": ["cowboy", ["jsx", "3.1.0"]],
            "profiles": {"test": {"deps": [{"name": "meck", "version": "0.9"}]}},
        },
    )

    state = load_build_state(tmp_path, ["test"])

    assert state.base_dir() == str(tmp_path / "_build" / "test")
    assert state.project_apps() == ["myapp"]
    assert state.current_profiles() == ["default", "test"]
    assert [name for name, _ in state.deps_for_profile("default")] == ["cowboy", "jsx"]
    assert state.deps_for_profile("test") == [("meck", {"version": "0.9"})]
    assert state.deps_for_profile("prod") == []


def test_load_build_state_discovers_apps_and_honors_base_override(tmp_path):
    _touch(tmp_path / "src" / "solo.app.src")
    out = tmp_path / "out"

    state = load_build_state(tmp_path, base_dir_override=str(out))

    assert state.base_dir() == str(out / "default")
    assert state.project_apps() == ["solo"]
