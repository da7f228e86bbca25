import json

import pytest

from meshslicer import Plane, data_path, plane_from_dict, read_plane, write_plane


def test_read_bundled_plane():
    plane = read_plane(data_path("plane.json"))
    assert plane.origin == (0.5, 0.5, 0.5)
    assert plane.normal == (0.0, 0.0, 1.0)


def test_extra_keys_and_ints(tmp_path):
    path = tmp_path / "plane.json"
    path.write_text(json.dumps({"name": "cut", "origin": [1, 2, 3], "normal": [0, 1, 0]}))
    plane = read_plane(path)
    assert plane.origin == (1.0, 2.0, 3.0)
    assert plane.normal == (0.0, 1.0, 0.0)


def test_write_then_read(tmp_path):
    plane = Plane((0.25, -1.0, 3.5), (0.0, 0.6, 0.8))
    path = tmp_path / "p.json"
    write_plane(plane, path)
    assert read_plane(path) == plane


@pytest.mark.parametrize(
    "data",
    [
        {"origin": [0, 0, 0]},
        {"normal": [0, 0, 1]},
        {"origin": [0, 0], "normal": [0, 0, 1]},
        {"origin": [0, 0, 0], "normal": [0, "1", 0]},
        {"origin": [0, 0, 0], "normal": [0, True, 0]},
        {"origin": "0 0 0", "normal": [0, 0, 1]},
        [[0, 0, 0], [0, 0, 1]],
    ],
)
def test_malformed_content_raises(data):
    with pytest.raises(ValueError):
        plane_from_dict(data)


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"origin": [0, 0, 0], "normal": [0, 0, 1]')
    with pytest.raises(ValueError, match="Invalid JSON"):
        read_plane(path)


def test_non_finite_values_raise(tmp_path):
    path = tmp_path / "nan.json"
    path.write_text('{"origin": [NaN, 0, 0], "normal": [0, 0, 1]}')
    with pytest.raises(ValueError, match="finite"):
        read_plane(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_plane(tmp_path / "missing.json")
