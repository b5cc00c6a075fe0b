"""Unit tests for the data model."""

from pathlib import Path

import pytest

from dep_hydrate.models import MANIFEST_NAMES, MANIFEST_RUNTIMES, ManifestFile, Record, RunSummary, Runtime, strip_ansi


class TestRuntime:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("package.json", Runtime.JS), ("requirements.txt", Runtime.PYTHON), ("Gemfile", Runtime.RUBY)],
    )
    def test_from_filename(self, name: str, expected: Runtime) -> None:
        assert Runtime.from_filename(name) is expected

    def test_unknown_filename(self) -> None:
        assert Runtime.from_filename("Gemfile.lock") is None

    def test_every_manifest_name_maps_to_a_runtime(self) -> None:
        assert set(MANIFEST_RUNTIMES) == MANIFEST_NAMES
        assert set(MANIFEST_RUNTIMES.values()) == set(Runtime)

    def test_cache_parts(self) -> None:
        assert Runtime.RUBY.cache_parts == ("vendor", "bundle")


class TestRecord:
    def test_from_term_strips_ansi(self) -> None:
        record = Record.from_term("\x1b[1mHydrate\x1b[0m done")
        assert record.raw.stdout == "Hydrate done"
        assert record.term.stdout == "\x1b[1mHydrate\x1b[0m done"

    def test_strip_ansi_keeps_plain_text(self) -> None:
        assert strip_ansi("line one\nline two") == "line one\nline two"


def test_manifest_cwd() -> None:
    assert ManifestFile(path=Path("src/http/a/package.json"), runtime=Runtime.JS).cwd == Path("src/http/a")


def test_run_summary_as_dicts() -> None:
    summary = RunSummary(records=[Record.from_term("hi")])
    assert summary.ok
    assert summary.as_dicts() == [{"raw": {"stdout": "hi"}, "term": {"stdout": "hi"}}]
