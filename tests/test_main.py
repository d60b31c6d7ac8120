from __future__ import annotations

import json
from pathlib import Path

import pytest

# main pulls in the Qt widgets module, which needs a usable GUI stack
pytest.importorskip("PySide6.QtWidgets")

from core.models import PaperSize  # noqa: E402
from infrastructure.settings import JsonSettings  # noqa: E402
from main import _make_sorter, _parse_board_config  # noqa: E402


def _settings(tmp_path: Path, data: dict) -> JsonSettings:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return JsonSettings(path)


def test_sorter_uses_configured_locale(tmp_path: Path):
    sorter = _make_sorter(_settings(tmp_path, {"collation": {"locale": "fr_FR"}}))
    assert sorter.locale_name == "fr_FR"
    assert sorter.sort_names(["ZOLA", "élie", "Bernard"]) == ["Bernard", "élie", "ZOLA"]


def test_sorter_falls_back_on_unknown_locale(tmp_path: Path):
    sorter = _make_sorter(_settings(tmp_path, {"collation": {"locale": "zz_ZZ"}}))
    assert sorter.locale_name == "fr_FR"


def test_board_config_ignores_invalid_values(tmp_path: Path):
    config = _parse_board_config(
        _settings(tmp_path, {"board": {"grid_size": 42, "paper_size": "A5"}})
    )
    assert config.grid_size == 3
    assert config.paper_size is PaperSize.A5
