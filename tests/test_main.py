"""Tests for the python -m skinmemo entry point."""

import pytest
from pathlib import Path

from skinmemo.__main__ import main


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("SKINMEMO_PRESETS_DIR", str(tmp_path / "presets"))
    monkeypatch.delenv("SKINMEMO_LOG_LEVEL", raising=False)
    (tmp_path / "presets").mkdir()
    (tmp_path / "presets" / "frost.md").write_text(
        '---\ncolor: "#00AAFF"\nsegments: [rare]\n---\n', encoding="utf-8"
    )


class TestMain:
    def test_format(self, capsys):
        assert main(["format", "rare", "#ff0000", "tier=3"]) == 0
        assert capsys.readouterr().out.strip() == "token-skin:rare:FF0000:tier=3"

    def test_format_hash_text_kept(self, capsys):
        assert main(["format", "#hashtag"]) == 0
        assert capsys.readouterr().out.strip() == "token-skin:#hashtag"

    def test_format_nothing(self, capsys):
        assert main(["format", "  "]) == 0
        assert capsys.readouterr().out == "\n"

    def test_preset(self, capsys):
        assert main(["preset", "frost"]) == 0
        assert capsys.readouterr().out.strip() == "token-skin:rare:00AAFF"

    def test_unknown_preset(self, capsys):
        assert main(["preset", "lava"]) == 1
        assert "Unknown preset" in capsys.readouterr().err

    def test_list(self, capsys):
        assert main(["list"]) == 0
        assert capsys.readouterr().out.splitlines() == ["frost"]

    def test_usage(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().out
