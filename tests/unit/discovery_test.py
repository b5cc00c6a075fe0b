"""Unit tests for manifest discovery."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from dep_hydrate.config import HydrateOptions
from dep_hydrate.core.discovery import discover_manifests
from dep_hydrate.models import Runtime


def _paths(options: HydrateOptions) -> list[Path]:
    return [m.path for m in discover_manifests(options)]


def test_finds_all_three_manifest_kinds(make_project: Callable[[list[str]], Path]) -> None:
    root = make_project(
        [
            "src/http/get-index/package.json",
            "src/events/ping/requirements.txt",
            "src/queues/work/Gemfile",
            "src/http/get-index/index.js",
        ]
    )
    manifests = discover_manifests(HydrateOptions(project_root=root))

    by_path = {m.path: m.runtime for m in manifests}
    assert by_path == {
        Path("src/events/ping/requirements.txt"): Runtime.PYTHON,
        Path("src/http/get-index/package.json"): Runtime.JS,
        Path("src/queues/work/Gemfile"): Runtime.RUBY,
    }


def test_paths_are_relative_to_project_root(make_project: Callable[[list[str]], Path]) -> None:
    root = make_project(["src/http/a/package.json"])
    (manifest,) = discover_manifests(HydrateOptions(project_root=root))
    assert not manifest.path.is_absolute()
    assert manifest.cwd == Path("src/http/a")


def test_skips_installed_dependency_caches(make_project: Callable[[list[str]], Path]) -> None:
    root = make_project(
        [
            "src/http/a/package.json",
            "src/http/a/node_modules/left-pad/package.json",
            "src/events/b/requirements.txt",
            "src/events/b/vendor/somepkg/requirements.txt",
            "src/queues/c/Gemfile",
            "src/queues/c/vendor/bundle/ruby/3.2.0/gems/rake/Gemfile",
        ]
    )
    assert sorted(_paths(HydrateOptions(project_root=root))) == [
        Path("src/events/b/requirements.txt"),
        Path("src/http/a/package.json"),
        Path("src/queues/c/Gemfile"),
    ]


def test_shared_and_views_come_last(make_project: Callable[[list[str]], Path]) -> None:
    root = make_project(
        [
            "src/views/package.json",
            "src/shared/package.json",
            "src/http/a/package.json",
        ]
    )
    assert _paths(HydrateOptions(project_root=root)) == [
        Path("src/http/a/package.json"),
        Path("src/shared/package.json"),
        Path("src/views/package.json"),
    ]


def test_shared_pass_disabled_hides_shared_manifests(make_project: Callable[[list[str]], Path]) -> None:
    root = make_project(["src/shared/package.json", "src/views/Gemfile", "src/http/a/package.json"])
    assert _paths(HydrateOptions(project_root=root, hydrate_shared=False)) == [Path("src/http/a/package.json")]


def test_shared_found_even_when_basepath_excludes_it(make_project: Callable[[list[str]], Path]) -> None:
    root = make_project(["src/http/a/package.json", "src/shared/requirements.txt"])
    options = HydrateOptions(project_root=root, basepath="src/http")
    assert _paths(options) == [Path("src/http/a/package.json"), Path("src/shared/requirements.txt")]


def test_empty_tree_yields_nothing(tmp_path: Path) -> None:
    assert discover_manifests(HydrateOptions(project_root=tmp_path)) == []


def test_missing_basepath_yields_nothing(tmp_path: Path) -> None:
    assert discover_manifests(HydrateOptions(project_root=tmp_path, basepath="does-not-exist")) == []
