"""
Tests for sfr/streams/providers.py
"""

from __future__ import annotations

from pathlib import Path

import pytest

from sfr.streams import (
    ChainResourceProvider,
    PackageResourceProvider,
    ResourceProvider,
    SearchPathResourceProvider,
)

from tests.infrastructure import MemoryProvider, write


class TestSearchPathProvider:

    def test_first_root_wins(self, tmp_path: Path):
        write(tmp_path / "a" / "x.txt", "a")
        write(tmp_path / "b" / "x.txt", "b")
        provider = SearchPathResourceProvider([tmp_path / "a", tmp_path / "b"])

        with provider.open_by_path("x.txt") as stream:
            assert stream.read() == b"a"

    def test_falls_through_roots(self, tmp_path: Path):
        write(tmp_path / "b" / "sub" / "y.txt", "b")
        provider = SearchPathResourceProvider([tmp_path / "a", tmp_path / "b"])

        assert provider.locate("sub/y.txt") == tmp_path / "b" / "sub" / "y.txt"

    def test_leading_slash_ignored(self, tmp_path: Path):
        write(tmp_path / "x.txt", "x")
        provider = SearchPathResourceProvider([tmp_path])

        assert provider.locate("/x.txt") == tmp_path / "x.txt"

    def test_missing_returns_none(self, tmp_path: Path):
        provider = SearchPathResourceProvider([tmp_path])

        assert provider.open_by_path("nope.txt") is None
        assert provider.locate("nope.txt") is None

    def test_directories_are_not_resources(self, tmp_path: Path):
        (tmp_path / "dir").mkdir()

        assert SearchPathResourceProvider([tmp_path]).open_by_path("dir") is None

    def test_satisfies_protocol(self, tmp_path: Path):
        assert isinstance(SearchPathResourceProvider([tmp_path]), ResourceProvider)


class TestPackageProvider:

    def test_reads_package_data(self):
        provider = PackageResourceProvider(["sfr.content"])

        with provider.open_by_path("evaluator.py") as stream:
            assert b"ScriptFunction" in stream.read()

    def test_locate_on_disk_package(self):
        provider = PackageResourceProvider(["sfr.content"])

        assert provider.locate("dispatcher.py").name == "dispatcher.py"

    def test_missing_resource(self):
        assert PackageResourceProvider(["sfr.content"]).open_by_path("nope.bin") is None

    def test_unknown_package_fails_early(self):
        with pytest.raises(ModuleNotFoundError):
            PackageResourceProvider(["sfr_no_such_package"])


class TestChainProvider:

    def test_first_hit(self):
        chain = ChainResourceProvider([
            MemoryProvider({"x": b"1"}),
            MemoryProvider({"x": b"2", "y": b"3"}),
        ])

        assert chain.open_by_path("x").read() == b"1"
        assert chain.open_by_path("y").read() == b"3"
        assert chain.open_by_path("z") is None

    def test_empty_chain(self):
        assert ChainResourceProvider().open_by_path("x") is None
        assert ChainResourceProvider().locate("x") is None
