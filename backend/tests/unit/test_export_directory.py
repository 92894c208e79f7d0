"""Tests for the directory export script."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from scripts.export_directory import build_map_export, build_table_export, export, parse_args
from staff_directory.services.directory_client import FetchError


def test_parse_args_defaults():
    args = parse_args([])
    assert args.search == ""
    assert args.sort is None
    assert args.desc is False
    assert args.page == 0
    assert args.page_size == 10
    assert args.map is False


def test_parse_args_rejects_unknown_sort_column():
    with pytest.raises(SystemExit):
        parse_args(["--sort", "salary"])


def test_parse_args_rejects_zero_page_size():
    with pytest.raises(SystemExit):
        parse_args(["--page-size", "0"])


def test_build_table_export_sorted_descending(sample_records):
    args = parse_args(["--sort", "city", "--desc", "--page-size", "2"])

    result = build_table_export(sample_records, args)

    assert result["headers"][0] == "First Name"
    assert result["total_count"] == 3
    assert [row[5] for row in result["rows"]] == ["Paris", "Lisbon"]
    assert result["message"] is None


def test_build_table_export_no_matches(sample_records):
    args = parse_args(["--search", "nobody"])

    result = build_table_export(sample_records, args)

    assert result["rows"] == []
    assert result["message"] == 'No results found for "nobody"'


def test_build_map_export_skips_invalid_coordinates(sample_records):
    result = build_map_export(sample_records)

    assert [p["id"] for p in result["points"]] == ["HT-1", "HT-3"]
    assert result["skipped"] == 1


@pytest.mark.anyio
async def test_export_returns_error_code_on_fetch_failure():
    args = parse_args(["--map"])

    with patch(
        "scripts.export_directory.DirectoryClient.list_employees",
        new=AsyncMock(side_effect=FetchError("down")),
    ):
        assert await export(args) == 1


@pytest.mark.anyio
async def test_export_prints_json(capsys, sample_records):
    args = parse_args(["--map"])

    with patch(
        "scripts.export_directory.DirectoryClient.list_employees",
        new=AsyncMock(return_value=sample_records),
    ):
        assert await export(args) == 0

    out = capsys.readouterr().out
    assert '"HT-1"' in out
    assert '"skipped": 1' in out
