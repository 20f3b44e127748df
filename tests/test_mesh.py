import numpy as np
import pytest

from fjetsim.mesh import DrawMode, Mesh, VertexP, VertexPC, VertexPCTN, VertexPT


def _write(tmp_path, text):
    path = tmp_path / "model.obj"
    path.write_text(text, encoding="utf-8")
    return path


QUAD_OBJ = """\
# a unit quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


def test_vertex_fields_match_layout():
    full = VertexPCTN((0, 0, 0), (1, 1, 1), (0.5, 0.5), (0, 0, 1))
    sizes = (len(full.position), len(full.color), len(full.texture), len(full.normal))
    assert sizes == VertexPCTN.LAYOUT == (3, 3, 2, 3)
    textured = VertexPT((1, 2, 3), (0.25, 0.75))
    assert (len(textured.position), len(textured.texture)) == VertexPT.LAYOUT == (3, 2)
    coloured = VertexPC((1, 2, 3), (0, 1, 0))
    assert (len(coloured.position), len(coloured.color)) == VertexPC.LAYOUT == (3, 3)
    plain = VertexP((1, 2, 3))
    assert (len(plain.position),) == VertexP.LAYOUT == (3,)


def test_vertex_stores_float_tuples():
    v = VertexPC(np.array([1, 2, 3]), [0, 0, 1])
    assert v.position == (1.0, 2.0, 3.0)
    assert v.color == (0.0, 0.0, 1.0)


def test_vertex_rejects_wrong_component_count():
    with pytest.raises(ValueError):
        VertexPT((1.0, 2.0, 3.0), (0.5,))


def test_count_without_indices_is_vertex_count():
    verts = [VertexP((0, 0, 0)), VertexP((1, 0, 0)), VertexP((0, 1, 0))]
    mesh = Mesh(verts, mode=DrawMode.LINES)
    assert mesh.count == len(verts)
    assert not mesh.indexed
    assert mesh.mode is DrawMode.LINES


def test_count_with_indices_is_index_count():
    verts = [VertexP((0, 0, 0)), VertexP((1, 0, 0)), VertexP((0, 1, 0))]
    indices = [0, 1, 2, 2, 1, 0]
    mesh = Mesh(verts, indices)
    assert mesh.count == len(indices)
    assert mesh.indexed


def test_index_out_of_range_rejected():
    with pytest.raises(ValueError):
        Mesh([VertexP((0, 0, 0))], [0, 1])


def test_mixed_vertex_types_rejected():
    with pytest.raises(TypeError):
        Mesh([VertexP((0, 0, 0)), VertexPC((0, 0, 0), (1, 1, 1))])


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        Mesh([VertexP((0, 0, 0))], mode=12345)


def test_update_data_sets_count_to_vertices():
    verts = [VertexP((0, 0, 0)), VertexP((1, 0, 0)), VertexP((0, 1, 0))]
    mesh = Mesh(verts, [0, 1, 2, 0, 1, 2])
    new = verts + [VertexP((1, 1, 0))]
    mesh.update_data(new)
    assert mesh.count == len(new)
    assert mesh.vertices == new
    assert mesh.indices == [0, 1, 2, 0, 1, 2]


def test_mesh_is_transformable():
    mesh = Mesh([VertexP((0, 0, 0))])
    mesh.set_translation((2.0, 3.0, 4.0))
    np.testing.assert_allclose(mesh.model[:3, 3], [2.0, 3.0, 4.0])


def test_load_obj_quad_triangulated(tmp_path):
    mesh = Mesh.load_obj(_write(tmp_path, QUAD_OBJ))
    assert mesh.mode is DrawMode.TRIANGLES
    assert len(mesh.vertices) == 4
    assert mesh.count == 6
    positions = {v.position for v in mesh.vertices}
    assert positions == {(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)}
    assert all(v.normal == (0.0, 0.0, 1.0) for v in mesh.vertices)
    assert all(v.color == (1.0, 1.0, 1.0) for v in mesh.vertices)


def test_load_obj_fan_shares_first_corner(tmp_path):
    mesh = Mesh.load_obj(_write(tmp_path, QUAD_OBJ))
    first, second = mesh.indices[:3], mesh.indices[3:]
    assert mesh.indices[0] in first and mesh.indices[0] in second


def test_load_obj_deduplicates_shared_vertices(tmp_path):
    text = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3\nf 1 3 4\n"
    mesh = Mesh.load_obj(_write(tmp_path, text))
    assert len(mesh.vertices) == 4
    assert mesh.count == 6


def test_load_obj_negative_indices_match_positive(tmp_path):
    pos = Mesh.load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"))
    neg = Mesh.load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n"))
    assert pos.vertices == neg.vertices
    assert pos.indices == neg.indices


def test_load_obj_reads_vertex_colors_and_defaults(tmp_path):
    text = "v 0 0 0 0.5 0.25 1\nv 1 0 0 0 1 0\nv 0 1 0 1 0 0\nf 1 2 3\n"
    mesh = Mesh.load_obj(_write(tmp_path, text))
    by_pos = {v.position: v for v in mesh.vertices}
    assert by_pos[(0.0, 0.0, 0.0)].color == (0.5, 0.25, 1.0)
    assert by_pos[(1.0, 0.0, 0.0)].texture == (0.0, 0.0)
    assert by_pos[(1.0, 0.0, 0.0)].normal == (0.0, 0.0, 0.0)


def test_load_obj_rejects_bad_index(tmp_path):
    with pytest.raises(ValueError):
        Mesh.load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nf 1 2 7\n"))


def test_load_obj_rejects_zero_index(tmp_path):
    with pytest.raises(ValueError):
        Mesh.load_obj(_write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n"))


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Mesh.load_obj(tmp_path / "absent.obj")