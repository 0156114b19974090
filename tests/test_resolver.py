from __future__ import annotations

from pathlib import Path

import pytest

from bedrock_backup.core.errors import NoCandidateError
from bedrock_backup.core.resolver import PathResolver
from tests.helpers import set_mtime, set_mtime_ns


def test_selects_newest_mtime_not_highest_version(server_root: Path, make_version) -> None:
    make_version("bedrock-server-1.20.10", 1_700_000_000)
    newer = make_version("bedrock-server-1.21.0", 1_700_500_000)

    result = PathResolver().select_latest_version_directory(str(server_root))

    assert result.name == "bedrock-server-1.21.0"
    assert result.path == str(newer)


def test_older_version_with_newer_mtime_wins(server_root: Path, make_version) -> None:
    make_version("bedrock-server-1.21.0", 1_700_000_000)
    make_version("bedrock-server-1.20.10", 1_700_500_000)

    result = PathResolver().select_latest_version_directory(str(server_root))
    assert result.name == "bedrock-server-1.20.10"


def test_equal_mtimes_resolve_to_greatest_name(server_root: Path, make_version) -> None:
    make_version("bedrock-server-1.20.1", 1_700_000_000)
    make_version("bedrock-server-1.20.3", 1_700_000_000)
    make_version("bedrock-server-1.20.2", 1_700_000_000)

    result = PathResolver().select_latest_version_directory(str(server_root))
    assert result.name == "bedrock-server-1.20.3"


def test_ignores_non_matching_entries(server_root: Path, make_version) -> None:
    make_version("bedrock-server-1.19.0", 1_600_000_000)
    make_version("bedrock-server-latest", 1_800_000_000)
    make_version("java-server-1.21.0", 1_800_000_000)
    make_version("bedrock-server-1.21", 1_800_000_000)
    stray_file = server_root / "bedrock-server-9.9.9.zip"
    stray_file.write_bytes(b"zip")
    set_mtime(stray_file, 1_900_000_000)

    result = PathResolver().select_latest_version_directory(str(server_root))
    assert result.name == "bedrock-server-1.19.0"


def test_trailing_qualifier_is_accepted(server_root: Path, make_version) -> None:
    make_version("bedrock-server-1.21.0.3-preview", 1_700_000_000)

    resolver = PathResolver()
    assert resolver.matches("bedrock-server-1.21.0.3-preview")
    assert resolver.select_latest_version_directory(str(server_root)).name == "bedrock-server-1.21.0.3-preview"


def test_custom_prefix(server_root: Path, make_version) -> None:
    make_version("bedrock-server-1.21.0", 1_800_000_000)
    make_version("dedicated-2.0.1", 1_700_000_000)

    result = PathResolver(version_prefix="dedicated").select_latest_version_directory(str(server_root))
    assert result.name == "dedicated-2.0.1"


def test_empty_root_raises(server_root: Path) -> None:
    with pytest.raises(NoCandidateError):
        PathResolver().select_latest_version_directory(str(server_root))


def test_all_non_matching_raises(server_root: Path, make_version) -> None:
    make_version("backups", 1_700_000_000)
    make_version("bedrock-server", 1_700_000_000)

    with pytest.raises(NoCandidateError):
        PathResolver().select_latest_version_directory(str(server_root))


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(NoCandidateError, match="does not exist"):
        PathResolver().select_latest_version_directory(str(tmp_path / "nope"))


def test_find_version_directories_lists_all_matches(server_root: Path, make_version) -> None:
    make_version("bedrock-server-1.20.10", 1_700_000_000)
    make_version("bedrock-server-1.21.0", 1_700_500_000)
    make_version("notes", 1_700_500_000)

    candidates = PathResolver().find_version_directories(str(server_root))
    assert sorted(c.name for c in candidates) == ["bedrock-server-1.20.10", "bedrock-server-1.21.0"]


def test_sub_microsecond_mtime_difference_decides(server_root: Path, make_version) -> None:
    base_ns = 1_700_000_000_000_000_000
    older = make_version("bedrock-server-1.21.0", 0)
    newer = make_version("bedrock-server-1.20.9", 0)
    set_mtime_ns(older, base_ns + 100)
    set_mtime_ns(newer, base_ns + 101)

    result = PathResolver().select_latest_version_directory(str(server_root))

    assert result.name == "bedrock-server-1.20.9"
    assert result.modified_ns == base_ns + 101
