# -*- coding: utf-8 -*-
import numpy as np
import pytest

from meshdata.io.obj_loader import load_obj, parse_obj

TRIANGLE = "v 0 0 0\nv 1 0 0\nv 1 1 0\nf 1 2 3\n"

CUBE_FACE = """\
# one textured quad
mtllib cube.mtl
o Cube
v -1.0 -1.0 0.0
v 1.0 -1.0 0.0
v 1.0 1.0 0.0
v -1.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
vn 0.0 0.0 1.0
usemtl Material
s off
f 1/1/1 2/2/1 3/3/1 4/4/1
"""

def test_triangle_without_uv_or_normal(write_file):
    mesh = load_obj(write_file("tri.obj", TRIANGLE))
    assert mesh.indices.tolist() == [0, 1, 2]
    assert mesh.vertices.tolist() == [0, 0, 0, 0, 0, 0, 0, 0,
                                      1, 0, 0, 0, 0, 0, 0, 0,
                                      1, 1, 0, 0, 0, 0, 0, 0]
    assert mesh.stride == 8
    assert mesh.source_format == "obj"

def test_quad_with_all_attributes(write_file):
    mesh = load_obj(write_file("quad.obj", CUBE_FACE))
    assert mesh.indices.tolist() == [0, 1, 2, 0, 2, 3]
    records = mesh.as_records()
    assert records.shape == (4, 8)
    assert records[2].tolist() == [1, 1, 0, 1, 1, 0, 0, 1]
    assert records[3].tolist() == [-1, 1, 0, 0, 1, 0, 0, 1]

def test_repeated_reference_strings_resolve_to_same_index(write_file):
    text = TRIANGLE + "v 0 1 0\nf 1 3 4\nf 3 2 1\n"
    mesh = load_obj(write_file("shared.obj", text))
    assert mesh.indices.tolist() == [0, 1, 2, 0, 2, 3, 2, 1, 0]
    assert mesh.vertex_count == len(set(mesh.indices.tolist())) == 4

def test_uv_index_beyond_array_is_zero_filled(write_file):
    text = "v 1 2 3\nv 4 5 6\nv 7 8 9\nvt 0.5 0.5\nf 1/1 2/7 3/1\n"
    mesh = load_obj(write_file("uv.obj", text))
    records = mesh.as_records()
    assert records[1, 3:5].tolist() == [0.0, 0.0]
    assert records[0, 3:5].tolist() == [0.5, 0.5]

def test_malformed_floats_degrade_single_component(write_file):
    text = "v 1 oops 3\nv 1 0\nv 0 1 0\nf 1 2 3\n"
    mesh = load_obj(write_file("bad.obj", text))
    records = mesh.as_records()
    assert records[0, :3].tolist() == [1.0, 0.0, 3.0]
    assert records[1, :3].tolist() == [1.0, 0.0, 0.0]
    assert mesh.triangle_count == 1

def test_unknown_prefixes_comments_and_crlf_are_ignored(write_file):
    text = "# header\r\n\r\ng group\r\nv 0 0 0\r\nv 1 0 0\r\nv 0 1 0\r\nl 1 2\r\nf 1 2 3\r\n"
    mesh = load_obj(write_file("crlf.obj", text))
    assert mesh.indices.tolist() == [0, 1, 2]
    assert mesh.vertex_count == 3

def test_parse_obj_keeps_reference_strings_verbatim():
    raw, faces, failures = parse_obj(["v 0 0 0\n", "vt 0.5\n", "f  1/1/1   2//3 4\n"])
    assert faces == [["1/1/1", "2//3", "4"]]
    assert raw.positions == [(0.0, 0.0, 0.0)]
    assert raw.uvs == [(0.5, 0.0)]
    assert failures == 1

def test_empty_file_gives_empty_buffers(write_file):
    mesh = load_obj(write_file("empty.obj", ""))
    assert mesh.vertices.size == 0
    assert mesh.indices.size == 0
    assert mesh.vertices.dtype == np.float32
    assert mesh.indices.dtype == np.uint32

def test_repeat_extraction_is_byte_identical(write_file):
    path = write_file("quad.obj", CUBE_FACE)
    first, second = load_obj(path), load_obj(path)
    assert first.vertices.tobytes() == second.vertices.tobytes()
    assert first.indices.tobytes() == second.indices.tobytes()

def test_none_path_fails_fast():
    with pytest.raises(ValueError):
        load_obj(None)

def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "missing.obj")
