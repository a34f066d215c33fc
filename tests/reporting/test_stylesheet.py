import zipfile
from pathlib import Path

import pytest
from spotrun.errors import ConfigurationError, ResolutionError
from spotrun.reporting.resources import ArchiveEntryResource, InlineTextResource
from spotrun.reporting.stylesheet import resolve

CONTENT = "<xsl:stylesheet/>"


def make_jar(path: Path, entries: dict[str, str]) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return path


def test_resolve_binds_first_archive(tmp_path: Path):
    a = tmp_path / "a.jar"
    b = tmp_path / "b.jar"

    resource = resolve([b, a], "fancy.xsl")

    assert resource == ArchiveEntryResource(archive=b, entry="fancy.xsl")


def test_resolve_sorts_unordered_candidates(tmp_path: Path):
    a = tmp_path / "a.jar"
    b = tmp_path / "b.jar"

    assert resolve({b, a}, "fancy.xsl").archive == a


@pytest.mark.parametrize("candidates", [[], set(), ()])
def test_resolve_without_candidates_fails(candidates):
    with pytest.raises(ConfigurationError) as ei:
        resolve(candidates, "fancy-hist.xsl")

    assert ei.value.details == {"stylesheet": "fancy-hist.xsl"}


def test_resolve_is_idempotent(tmp_path: Path):
    jar = make_jar(tmp_path / "spotbugs.jar", {"xsl/fancy.xsl": CONTENT})
    work = tmp_path / "work"

    first = resolve([jar], "xsl/fancy.xsl", work_dir=work)
    second = resolve([jar], "xsl/fancy.xsl", work_dir=work)

    assert first == second
    assert first.as_file() == second.as_file()
    assert first.as_file().read_text(encoding="utf-8") == second.as_string() == CONTENT


def test_archive_resource_picks_up_rebuilt_archive(tmp_path: Path):
    jar = make_jar(tmp_path / "spotbugs.jar", {"fancy.xsl": "old"})
    resource = ArchiveEntryResource(archive=jar, entry="fancy.xsl", work_dir=tmp_path / "w")
    assert resource.as_file().read_text(encoding="utf-8") == "old"

    make_jar(jar, {"fancy.xsl": "new"})

    assert resource.as_file().read_text(encoding="utf-8") == "new"


def test_archive_resource_missing_entry(tmp_path: Path):
    jar = make_jar(tmp_path / "spotbugs.jar", {"other.xsl": CONTENT})

    with pytest.raises(ResolutionError) as ei:
        ArchiveEntryResource(archive=jar, entry="fancy.xsl").as_string()

    assert ei.value.code == "archive_entry_not_found"


def test_archive_resource_missing_archive(tmp_path: Path):
    with pytest.raises(ResolutionError) as ei:
        ArchiveEntryResource(archive=tmp_path / "nope.jar", entry="fancy.xsl").as_file()

    assert ei.value.code == "archive_not_found"


def test_archive_resource_invalid_archive(tmp_path: Path):
    bogus = tmp_path / "bogus.jar"
    bogus.write_text("not a zip", encoding="utf-8")

    with pytest.raises(ResolutionError) as ei:
        ArchiveEntryResource(archive=bogus, entry="fancy.xsl").as_string()

    assert ei.value.code == "invalid_archive"


def test_inline_resource_file_is_stable(tmp_path: Path):
    resource = InlineTextResource(text=CONTENT, work_dir=tmp_path)

    assert resource.as_file() == resource.as_file()
    assert resource.as_file().read_text(encoding="utf-8") == CONTENT
    assert InlineTextResource(text="other", work_dir=tmp_path).as_file() != resource.as_file()


def test_inline_resource_replaces_stale_file_without_leftovers(tmp_path: Path):
    resource = InlineTextResource(text=CONTENT, work_dir=tmp_path)
    target = resource.as_file()
    target.write_text("stale", encoding="utf-8")

    assert resource.as_file().read_text(encoding="utf-8") == CONTENT
    assert [p.name for p in target.parent.iterdir()] == [target.name]


def test_resource_write_failure_raises_resolution_error(tmp_path: Path):
    blocker = tmp_path / "work"
    blocker.write_text("a file, not a directory", encoding="utf-8")

    with pytest.raises(ResolutionError) as ei:
        InlineTextResource(text=CONTENT, work_dir=blocker).as_file()

    assert ei.value.code == "resource_write_failed"
