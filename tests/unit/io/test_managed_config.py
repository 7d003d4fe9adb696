"""Tests for the ocx-managed config section."""

from pathlib import Path

import pytest

from ocx.exceptions import ConfigDocumentError
from ocx.io import jsonc
from ocx.io.managed_config import (
    empty_managed_config,
    merge_install_plans,
    parse_managed_config,
    read_config_text,
    write_managed_config,
)
from ocx.models.config_root import ConfigRoot
from ocx.operations.plan import plan_installs
from tests.test_utils.manifests import fetched, manifest


def _project_root(tmp_path: Path) -> ConfigRoot:
    return ConfigRoot.create("project", tmp_path, tmp_path / ".opencode")


def test_read_config_text_missing_file(tmp_path: Path) -> None:
    assert read_config_text(tmp_path / "missing.jsonc") == ""


def test_read_config_text_directory_is_treated_as_empty(tmp_path: Path) -> None:
    assert read_config_text(tmp_path) == ""


def test_parse_missing_section() -> None:
    assert parse_managed_config('{"theme": "dark"}') == empty_managed_config()


def test_parse_existing_section() -> None:
    text = '{\n  // c\n  "ocx": {"items": {"tool": {"a": {"source": "s", "dir": "d", "entry": "e"}},},}\n}'

    managed = parse_managed_config(text)

    assert managed.items["tool"] == {"a": {"source": "s", "dir": "d", "entry": "e"}}
    assert managed.items["agent"] == {}


@pytest.mark.parametrize(
    "section",
    [
        '{"items": {"tool": {"a": }}}',
        "[1, 2]",
        '{"items": []}',
        '{"items": {"tool": "nope"}}',
        "{'single': 1}",
    ],
)
def test_malformed_section_is_discarded(section: str) -> None:
    text = '{"ocx": ' + section + "}"

    managed = parse_managed_config(text)

    assert managed.items["tool"] == {}


def test_type_mismatched_kind_does_not_affect_others() -> None:
    text = '{"ocx": {"items": {"tool": 3, "agent": {"x": {"source": "s"}}}}}'

    managed = parse_managed_config(text)

    assert managed.items["tool"] == {}
    assert managed.items["agent"] == {"x": {"source": "s"}}


def test_unparseable_document_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigDocumentError, match="opencode.jsonc"):
        parse_managed_config("[]", tmp_path / "opencode.jsonc")


def test_merge_replaces_records_wholesale(tmp_path: Path) -> None:
    existing = parse_managed_config(
        '{"ocx": {"items": {"tool": {"hello": {"source": "old", "dir": "x", "entry": "y", '
        '"extra": true}, "other": {"source": "keep"}}}}}'
    )
    plans = plan_installs([fetched(manifest("hello"), "embedded:tool/hello")], _project_root(tmp_path))

    merged = merge_install_plans(existing, plans)

    assert merged.items["tool"]["hello"] == {
        "source": "embedded:tool/hello",
        "dir": ".opencode/tool/hello",
        "entry": ".opencode/tool/hello/index.ts",
    }
    assert merged.items["tool"]["other"] == {"source": "keep"}
    assert existing.items["tool"]["hello"]["source"] == "old"


def test_write_preserves_unrelated_content(tmp_path: Path) -> None:
    config_path = tmp_path / "opencode.jsonc"
    text = '{\n  // my settings\n  "theme": "dark"\n}\n'
    plans = plan_installs([fetched(manifest("hello"))], _project_root(tmp_path))

    write_managed_config(config_path, text, merge_install_plans(empty_managed_config(), plans))

    written = config_path.read_text(encoding="utf-8")
    assert "// my settings" in written
    document = jsonc.loads(written)
    assert document["theme"] == "dark"
    assert set(document["ocx"]["items"]) == {"tool", "agent", "command", "themes"}
    assert document["ocx"]["items"]["tool"]["hello"]["dir"] == ".opencode/tool/hello"
    assert list(tmp_path.iterdir()) == [config_path]
