import json

import numpy as np
from PIL import Image

from gridpath import load_map_rows, path_to_dict, save_image, save_json


def test_load_map_rows_skips_blank_lines(tmp_path):
    map_file = tmp_path / "map.txt"
    map_file.write_text("S--\n\n-X-\n--G\n")
    assert load_map_rows(map_file) == ["S--", "-X-", "--G"]


def test_load_map_rows_missing_file(tmp_path, capsys):
    assert load_map_rows(tmp_path / "missing.txt") is None
    assert "Error loading map" in capsys.readouterr().out


def test_path_to_dict_found():
    data = path_to_dict((0, 0), (1, 1), [(0, 0), (1, 0), (1, 1)])
    assert data == {
        'start': [0, 0],
        'goal': [1, 1],
        'found': True,
        'length': 2,
        'path': [[0, 0], [1, 0], [1, 1]],
    }


def test_path_to_dict_not_found():
    data = path_to_dict((0, 0), (2, 2), None)
    assert data['found'] is False
    assert data['length'] is None
    assert data['path'] == []


def test_save_json_creates_parent_dirs(tmp_path):
    out = tmp_path / "nested" / "path.json"
    assert save_json({'found': True}, out)
    assert json.loads(out.read_text()) == {'found': True}


def test_save_image_writes_png(tmp_path):
    out = tmp_path / "grid.png"
    image = np.zeros((4, 5, 3), dtype=np.uint8)
    assert save_image(image, out)
    with Image.open(out) as loaded:
        assert loaded.size == (5, 4)


def test_load_map_rows_keeps_spaces_as_cells(tmp_path):
    map_file = tmp_path / "map.txt"
    map_file.write_text("S--\n -G\r\n\n")
    assert load_map_rows(map_file) == ["S--", " -G"]


def test_load_map_rows_invalid_utf8(tmp_path, capsys):
    map_file = tmp_path / "broken.txt"
    map_file.write_bytes(b"S-\xff\n--G\n")
    assert load_map_rows(map_file) is None
    assert "Error loading map" in capsys.readouterr().out
