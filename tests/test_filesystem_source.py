"""Filesystem-backed asset source."""

import asyncio
from pathlib import Path

import pytest

from device_simulator.assets import (
    AssetNotFoundError,
    AssetReadError,
    FileSystemAssetSource,
)


def test_reads_file_bytes(content_root: Path) -> None:
    source = FileSystemAssetSource(content_root)

    assert asyncio.run(source.read("css/site.css")) == b"body { margin: 0; }"


def test_missing_file(content_root: Path) -> None:
    source = FileSystemAssetSource(content_root)

    with pytest.raises(AssetNotFoundError) as info:
        asyncio.run(source.read("nope.htm"))

    assert info.value.code == "ENOENT"


def test_directory_is_read_error(content_root: Path) -> None:
    source = FileSystemAssetSource(content_root)

    with pytest.raises(AssetReadError) as info:
        asyncio.run(source.read("sub"))

    assert info.value.code == "EISDIR"


def test_path_outside_root_is_not_found(content_root: Path) -> None:
    (content_root.parent / "secret.txt").write_bytes(b"private")
    source = FileSystemAssetSource(content_root)

    with pytest.raises(AssetNotFoundError):
        asyncio.run(source.read("../secret.txt"))


def test_concurrent_reads(content_root: Path) -> None:
    source = FileSystemAssetSource(content_root)

    async def read_many():
        return await asyncio.gather(
            source.read("index.htm"),
            source.read("css/site.css"),
            source.read("config.json"),
        )

    index, css, config = asyncio.run(read_many())

    assert index.startswith(b"<html>")
    assert css.startswith(b"body")
    assert config.startswith(b"{")
