"""Tests for asset sources."""

import pytest

from lexifront import Lexicon
from lexifront.exceptions import AssetNotFoundError, StreamDecodeError
from lexifront.utils.assets import DirectoryAssetSource, PackageAssetSource, iter_lines


def test_iter_lines_text_and_bytes():
    assert list(iter_lines(["a 1\n", "b 2\r\n"])) == [(1, "a 1"), (2, "b 2")]
    assert list(iter_lines([b"\xe4\xbd\xa0 3\n"])) == [(1, "你 3")]


def test_iter_lines_keeps_leading_space():
    # A blank-symbol token line starts with a space
    assert list(iter_lines([" 0\n"])) == [(1, " 0")]


def test_iter_lines_invalid_utf8():
    lines = iter_lines([b"ok\n", b"\xff\n"])
    assert next(lines) == (1, "ok")
    with pytest.raises(StreamDecodeError) as exc_info:
        next(lines)
    assert exc_info.value.line_number == 2


class TestDirectoryAssetSource:
    def test_open_existing(self, temp_dir):
        (temp_dir / "tokens.txt").write_bytes(b"a 1\n")
        source = DirectoryAssetSource(temp_dir)
        assert source.exists("tokens.txt")
        with source.open("tokens.txt") as f:
            assert f.read() == b"a 1\n"

    def test_missing(self, temp_dir):
        source = DirectoryAssetSource(str(temp_dir))
        assert not source.exists("nope.txt")
        with pytest.raises(AssetNotFoundError, match="nope.txt"):
            source.open("nope.txt")

    def test_directory_is_not_an_asset(self, temp_dir):
        (temp_dir / "sub").mkdir()
        assert not DirectoryAssetSource(temp_dir).exists("sub")

    def test_lexicon_from_assets(self, english_files):
        tokens_path, _ = english_files
        source = DirectoryAssetSource(tokens_path.parent)
        lexicon = Lexicon.from_assets(source, punctuations=".", language="english")
        assert lexicon.convert_text_to_token_ids("hi there") == [1, 2, 9, 3, 4, 5]

    def test_lexicon_from_assets_custom_names(self, temp_dir, chinese_tokens, chinese_lexicon_text):
        (temp_dir / "zh_tokens.txt").write_text(chinese_tokens, encoding="utf-8")
        (temp_dir / "zh_lexicon.txt").write_text(chinese_lexicon_text, encoding="utf-8")
        lexicon = Lexicon.from_assets(
            DirectoryAssetSource(temp_dir),
            tokens_name="zh_tokens.txt",
            lexicon_name="zh_lexicon.txt",
            punctuations=",",
            language="chinese",
        )
        assert lexicon.convert_text_to_token_ids("你好") == [0, 10, 11, 0, 1]

    def test_lexicon_from_missing_assets(self, temp_dir):
        with pytest.raises(AssetNotFoundError):
            Lexicon.from_assets(DirectoryAssetSource(temp_dir), language="english")


class TestPackageAssetSource:
    def test_open_packaged_resource(self):
        source = PackageAssetSource("lexifront")
        assert source.exists("__init__.py")
        with source.open("__init__.py") as f:
            assert b"__version__" in f.read()

    def test_subdir(self):
        source = PackageAssetSource("lexifront", subdir="core")
        assert source.exists("lexicon.py")

    def test_missing_resource(self):
        source = PackageAssetSource("lexifront")
        assert not source.exists("no_such_asset.txt")
        with pytest.raises(AssetNotFoundError):
            source.open("no_such_asset.txt")

    def test_missing_package(self):
        source = PackageAssetSource("lexifront_no_such_package")
        assert not source.exists("tokens.txt")
        with pytest.raises(AssetNotFoundError):
            source.open("tokens.txt")

    def test_plain_module_is_not_an_asset_package(self):
        source = PackageAssetSource("lexifront.config")
        assert not source.exists("tokens.txt")
        with pytest.raises(AssetNotFoundError):
            source.open("tokens.txt")

    def test_files_type_error_means_missing(self, monkeypatch):
        def not_a_package(package):
            raise TypeError(f"{package!r} is not a package")

        monkeypatch.setattr("lexifront.utils.assets.resources.files", not_a_package)
        source = PackageAssetSource("lexifront.config")
        assert not source.exists("tokens.txt")
        with pytest.raises(AssetNotFoundError):
            source.open("tokens.txt")
