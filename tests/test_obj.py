"""
Tests for OBJ reading and writing.
"""

import pytest

from meshslicer import TriangleMesh, data_path, format_obj, load_obj, parse_obj, save_obj


def test_load_cube():
    mesh = load_obj(data_path("cube.obj"))
    assert mesh.n_vertices == 8
    assert mesh.n_triangles == 12
    # 1-based in the file, 0-based in memory
    assert mesh.triangles[0] == (0, 2, 1)
    assert mesh.positions[6] == (1.0, 1.0, 1.0)
    mesh.validate()


def test_ignores_other_lines():
    lines = [
        "# comment",
        "mtllib cube.mtl",
        "v 0 0 0",
        "vn 0 0 1",
        "vt 0.5 0.5",
        "v 1 0 0",
        "",
        "g group",
        "v 0 1 0",
        "usemtl red",
        "f 1 2 3",
    ]
    mesh = parse_obj(lines)
    assert mesh.positions == [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    assert mesh.triangles == [(0, 1, 2)]


def test_face_with_slashes():
    mesh = parse_obj(["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1/1/1 2//2 3/3"])
    assert mesh.triangles == [(0, 1, 2)]


def test_negative_face_indices():
    mesh = parse_obj(["v 0 0 0", "v 1 0 0", "v 0 1 0", "f -3 -2 -1"])
    assert mesh.triangles == [(0, 1, 2)]


def test_polygon_is_fan_triangulated():
    mesh = parse_obj(
        ["v 0 0 0", "v 1 0 0", "v 1 1 0", "v 0 1 0", "v -1 1 0", "f 1 2 3 4 5"]
    )
    assert mesh.triangles == [(0, 1, 2), (0, 2, 3), (0, 3, 4)]


@pytest.mark.parametrize(
    "line, message",
    [
        ("v 1 2", "Line 2"),
        ("v 1 two 3", "Line 2"),
        ("f 1 2", "Line 2"),
        ("f 1 x 3", "Line 2"),
        ("f 0 1 2", "1-based"),
    ],
)
def test_malformed_lines_raise(line, message):
    with pytest.raises(ValueError, match=message):
        parse_obj(["v 0 0 0", line])


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_obj(tmp_path / "missing.obj")


def test_save_writes_one_based(tmp_path):
    mesh = TriangleMesh([(0, 0, 0), (1.5, 0, 0), (0, 2, 0)], [(0, 1, 2)])
    path = tmp_path / "tri.obj"
    save_obj(mesh, path)
    assert path.read_text().splitlines() == [
        "v 0 0 0",
        "v 1.5 0 0",
        "v 0 2 0",
        "f 1 2 3",
    ]


def test_saved_floats_reload_exactly(tmp_path):
    mesh = TriangleMesh([(0.1, 1 / 3, -2e-17), (1e10, 0, 7), (0, 1, 0)], [(2, 1, 0)])
    path = tmp_path / "out.obj"
    save_obj(mesh, path)
    again = load_obj(path)
    assert again.positions == mesh.positions
    assert again.triangles == mesh.triangles


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_obj(TriangleMesh(), tmp_path / "nope" / "out.obj")


def test_format_obj_empty():
    assert format_obj(TriangleMesh()) == []
