"""Tests for scripts/index_screenplay.py."""

import json

import pytest

from core.exceptions import SourceReadException
from scripts.index_screenplay import build_report, main, read_source


class TestIndexScreenplayScript:
    """Tests for the index_screenplay command line script."""

    def test_build_report(self, brick_and_steel):
        report = build_report(brick_and_steel)
        assert report["title"] == "Brick & Steel"
        assert report["total_scenes"] == 2
        assert report["characters"] == ["BRICK", "STEEL"]
        assert report["character_scene_counts"] == {"BRICK": 2, "STEEL": 2}
        assert "content" not in report["scenes"][0]
        assert "tokens" not in report

    def test_build_report_with_tokens(self, kitchen_scene):
        report = build_report(kitchen_scene, include_tokens=True)
        assert [t["type"] for t in report["tokens"]][:1] == ["scene-heading"]

    def test_read_source_missing_file(self, tmp_path):
        with pytest.raises(SourceReadException):
            read_source(tmp_path / "missing.fountain")

    def test_main_prints_json(self, tmp_path, capsys, kitchen_scene):
        source = tmp_path / "kitchen.fountain"
        source.write_text(kitchen_scene, encoding="utf-8")
        assert main([str(source)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["scenes"][0]["heading"] == "INT. KITCHEN - DAY"

    def test_main_count(self, tmp_path, capsys, brick_and_steel):
        source = tmp_path / "brick.fountain"
        source.write_text(brick_and_steel, encoding="utf-8")
        assert main([str(source), "--count"]) == 0
        assert capsys.readouterr().out.strip() == "2"

    def test_main_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.fountain")]) == 1
