"""Smoke tests for the colorcet_tool command line and the CSV loader."""

import pytest
from PIL import Image

import colorcet_tool
from colorcet_maps.sources import load_raw_tables


class TestLoadRawTables:
    def test_keys_are_stems(self, table_dir, raw_tables):
        tables = load_raw_tables(table_dir)
        assert tables == raw_tables

    def test_strips_utf8_bom(self, tmp_path):
        (tmp_path / "CET-L03.csv").write_bytes(b"\xef\xbb\xbf0,0,0\n255,255,255\n")
        tables = load_raw_tables(tmp_path)
        assert tables["CET-L03"].startswith("0,0,0")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_raw_tables(tmp_path / "nope")

    def test_no_matching_files(self, tmp_path):
        (tmp_path / "readme.txt").write_text("x")
        with pytest.raises(FileNotFoundError, match=r"\*\.csv"):
            load_raw_tables(tmp_path)


class TestCLI:
    def test_list(self, table_dir, capsys):
        colorcet_tool.main(["list", str(table_dir)])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Colorblind Cyclic 1\t2"
        assert "Cyclic 3 (shift 50%)\t5" in lines

    def test_export(self, table_dir, tmp_path):
        out = tmp_path / "strip.png"
        colorcet_tool.main(
            ["export", str(table_dir), "Linear 3", "--out", str(out), "--width", "20", "--height", "2"]
        )
        with Image.open(out) as img:
            assert img.size == (20, 2)

    def test_locate(self, table_dir, capsys):
        colorcet_tool.main(["locate", str(table_dir), "Colorblind Linear 1", "255,255,255"])
        assert capsys.readouterr().out.strip() == "255,255,255\t1.0000"

    def test_unknown_name(self, table_dir):
        with pytest.raises(SystemExit):
            colorcet_tool.main(["export", str(table_dir), "Nope 9"])

    def test_bad_directory(self, tmp_path):
        with pytest.raises(SystemExit):
            colorcet_tool.main(["list", str(tmp_path / "missing")])

    def test_parse_rgb(self):
        assert colorcet_tool.parse_rgb("1, 2 ,3") == (1, 2, 3)
        with pytest.raises(Exception):
            colorcet_tool.parse_rgb("1,2,300")
