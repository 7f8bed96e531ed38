"""
Tests for the media-masonry command line interface.
"""

import json
from unittest.mock import patch

import pytest
from PIL import Image

from media_masonry.cli import main
from media_masonry.core.utils import load_items_json, save_items_json


@pytest.fixture
def items_file(tmp_path, make_item):
    path = tmp_path / "items.json"
    save_items_json(
        [
            make_item("a", 100, 100),
            make_item("b", 200, 100),
            make_item("c", 50, 100),
            make_item("bad", 100, 0),
        ],
        path,
    )
    return path


class TestLayoutCommand:
    """Tests for `media-masonry layout`."""

    def test_layout_when_output_given_then_writes_layout_json(self, items_file, tmp_path):
        out = tmp_path / "layout.json"

        code = main(["layout", str(items_file), "-o", str(out)])

        assert code == 0
        data = json.loads(out.read_text())
        assert data["rows"][0]["items"] == ["a", "b", "c"]
        assert data["rows"][0]["height"] == 77
        assert data["dropped"] == ["bad"]

    def test_layout_when_no_output_then_prints_json(self, items_file, capsys):
        code = main(["layout", str(items_file)])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [p["id"] for p in data["placements"]] == ["a", "b", "c"]

    def test_layout_when_config_given_then_applied(self, items_file, tmp_path):
        cfg = tmp_path / "cfg.json"
        cfg.write_text(json.dumps({"max_window_size": 1}))
        out = tmp_path / "layout.json"

        main(["layout", str(items_file), "--config", str(cfg), "-o", str(out)])

        data = json.loads(out.read_text())
        assert [row["items"] for row in data["rows"]] == [["a"], ["b"], ["c"]]

    def test_layout_when_html_and_png_requested_then_both_written(self, items_file, tmp_path):
        html_path = tmp_path / "grid.html"
        png_path = tmp_path / "grid.png"

        code = main([
            "layout", str(items_file),
            "-o", str(tmp_path / "layout.json"),
            "--html", str(html_path),
            "--png", str(png_path),
            "--thumbs", str(tmp_path),
        ])

        assert code == 0
        assert 'data-id="a"' in html_path.read_text()
        with Image.open(png_path) as img:
            assert img.size == (280, 77)

    def test_layout_when_raw_records_with_kind_then_parsed(self, tmp_path, gif_record):
        raw = tmp_path / "raw.json"
        raw.write_text(json.dumps([gif_record("g1", 100, 100), gif_record("g2", 100, 100)]))
        out = tmp_path / "layout.json"

        code = main(["layout", str(raw), "--kind", "gif", "-o", str(out)])

        assert code == 0
        assert json.loads(out.read_text())["rows"][0]["items"] == ["g1", "g2"]

    def test_layout_when_items_file_missing_then_exit_code_1(self, tmp_path):
        assert main(["layout", str(tmp_path / "missing.json")]) == 1

    def test_layout_when_item_has_no_id_then_exit_code_1(self, tmp_path, caplog):
        items = tmp_path / "items.json"
        items.write_text(json.dumps([{"width": 100, "height": 100}]))

        assert main(["layout", str(items)]) == 1
        assert "Item entry 0" in caplog.text

    def test_layout_when_item_entry_not_a_dict_then_exit_code_1(self, tmp_path):
        items = tmp_path / "items.json"
        items.write_text(json.dumps([["a", 100, 100]]))

        assert main(["layout", str(items)]) == 1

    def test_layout_when_config_invalid_then_exit_code_1(self, items_file, tmp_path):
        cfg = tmp_path / "cfg.json"
        cfg.write_text(json.dumps({"min_height": 0}))

        assert main(["layout", str(items_file), "--config", str(cfg)]) == 1


class TestFetchCommand:
    """Tests for `media-masonry fetch` (HTTP source mocked)."""

    def test_fetch_when_pages_available_then_saves_items(self, tmp_path, gif_record):
        out = tmp_path / "items.json"

        with patch("media_masonry.cli.KlipyPageSource") as source_cls:
            source_cls.return_value.fetch_page.return_value = [gif_record("g1"), gif_record("g2")]
            code = main([
                "fetch", "--kind", "sticker", "--query", "cats",
                "--api-key", "KEY", "--pages", "3", "-o", str(out),
            ])

        assert code == 0
        items = load_items_json(out)
        assert [i.id for i in items] == ["g1", "g2"]
        # Short first page ends the results
        source_cls.return_value.fetch_page.assert_called_once()

    def test_fetch_when_api_key_empty_then_exit_code_1(self, tmp_path):
        assert main(["fetch", "--api-key", "", "-o", str(tmp_path / "items.json")]) == 1
