import pytest

from core.graph_editor.model import GraphModel


@pytest.fixture
def square():
    # Four corners of a 100 x 100 square, no edges
    model = GraphModel()
    for element, x, y in [("A", 0, 0), ("B", 100, 0), ("C", 100, 100), ("D", 0, 100)]:
        model.add_vertex(element, x, y)
    return model


def test_add_vertex_maps_coordinates(square):
    vertex = square.vertex_at(100, 0)

    assert vertex.element == "B"
    assert square.coords_of(vertex) == (100.0, 0.0)
    assert square.graph.num_vertices() == 4


def test_add_vertex_rejects_taken_coordinates(square):
    with pytest.raises(ValueError):
        square.add_vertex("E", 0.0, 0)
    assert square.graph.num_vertices() == 4


def test_add_edge_refuses_parallel_edges_and_loops(square):
    first = square.add_edge((0, 0), (100, 0), "ab")

    assert first is not None
    assert square.add_edge((100, 0), (0, 0), "ba") is None
    assert square.add_edge((0, 0), (0, 0)) is None
    assert square.add_edge((0, 0), (55, 55)) is None
    assert square.add_edge(None, (0, 0)) is None
    assert square.graph.num_edges() == 1
    assert square.edge_coords()[first] == (0.0, 0.0, 100.0, 0.0)


def test_default_edge_element(square):
    edge = square.add_edge((0, 0), (100, 0))
    assert edge.element == "NONE"


def test_move_vertex_updates_edge_ends(square):
    ab = square.add_edge((0, 0), (100, 0))
    da = square.add_edge((0, 100), (0, 0))

    moved = square.move_vertex(0, 0, -50, -50)

    assert set(moved) == {ab, da}
    assert square.vertex_at(0, 0) is None
    assert square.vertex_at(-50, -50).element == "A"
    assert square.edge_coords()[ab] == (-50.0, -50.0, 100.0, 0.0)
    assert square.edge_coords()[da] == (0.0, 100.0, -50.0, -50.0)


def test_move_vertex_errors(square):
    with pytest.raises(ValueError):
        square.move_vertex(10, 10, 20, 20)
    with pytest.raises(ValueError):
        square.move_vertex(0, 0, 100, 0)


def test_delete_vertex_drops_its_edges(square):
    square.connect_all_vertices()

    removed = square.delete_vertex(0, 0)

    assert removed.element == "A"
    assert square.graph.num_vertices() == 3
    assert square.graph.num_edges() == 3
    assert len(square.edge_coords()) == 3
    assert square.delete_vertex(0, 0) is None


def test_delete_edge_in_either_direction(square):
    ab = square.add_edge((0, 0), (100, 0))
    bc = square.add_edge((100, 0), (100, 100))

    assert square.delete_edge((100, 0, 0, 0)) is ab
    assert square.delete_edge((100, 0, 100, 100)) is bc
    assert square.delete_edge((100, 0, 100, 100)) is None
    assert square.graph.num_edges() == 0


def test_connectivity(square):
    assert not GraphModel().graph_is_connected()
    assert not square.graph_is_connected()

    square.add_edge((0, 0), (100, 0))
    square.add_edge((100, 0), (100, 100))
    assert not square.graph_is_connected()

    square.add_edge((100, 100), (0, 100))
    assert square.graph_is_connected()


def test_single_vertex_is_connected_and_complete():
    model = GraphModel()
    model.add_vertex("A", 0, 0)

    assert model.graph_is_connected()
    assert model.graph_is_complete()


def test_connect_all_vertices_makes_complete_graph(square):
    assert not GraphModel().graph_is_complete()
    assert not square.graph_is_complete()

    square.connect_all_vertices()

    assert square.graph.num_edges() == 6
    assert square.graph_is_complete()
    assert square.graph_is_connected()


def test_connect_and_disconnect_vertex(square):
    square.connect_vertex((0, 0))
    assert square.graph.num_edges() == 3
    assert sorted(square.opposite_vertices((0, 0))) == [(0.0, 100.0), (100.0, 0.0), (100.0, 100.0)]

    square.disconnect_vertex((0, 0))
    assert square.graph.num_edges() == 0
    assert square.edge_coords() == {}
    assert square.opposite_vertices((0, 0)) == []


def test_connect_to_nearest_skips_connected_vertices():
    model = GraphModel()
    model.add_vertex("A", 0, 0)
    model.add_vertex("B", 10, 0)
    model.add_vertex("C", 50, 0)

    first = model.connect_to_nearest((0, 0))
    second = model.connect_to_nearest((0, 0))

    assert {v.element for v in first.endpoints()} == {"A", "B"}
    assert {v.element for v in second.endpoints()} == {"A", "C"}
    assert model.connect_to_nearest((0, 0)) is None


def test_remove_all_edges(square):
    square.connect_all_vertices()
    square.remove_all_edges()

    assert square.graph.num_edges() == 0
    assert square.edge_coords() == {}
    assert all(v.degree == 0 for v in square.graph.vertices())


def test_last_added_pair():
    model = GraphModel()
    assert model.connect_last_added() is None
    assert model.last_added_coords() is None

    model.add_vertex("A", 0, 0)
    assert model.connect_last_added() is None
    model.add_vertex("B", 100, 0)
    model.add_vertex("C", 200, 0)

    edge = model.connect_last_added()
    assert [v.element for v in edge.endpoints()] == ["C", "B"]
    assert model.last_added_coords() == (200.0, 0.0)

    model.clear_last_added()
    assert model.connect_last_added() is None


def test_deleted_vertex_leaves_last_added():
    model = GraphModel()
    model.add_vertex("A", 0, 0)
    model.add_vertex("B", 100, 0)
    model.delete_vertex(100, 0)

    assert model.last_added_coords() == (0.0, 0.0)
    assert model.connect_last_added() is None


def test_align_vertices_to_grid():
    model = GraphModel(grid_size=100)
    model.add_vertex("A", 20, 30)
    model.add_vertex("B", 180, 160)
    edge = model.add_edge((20, 30), (180, 160))

    model.align_vertices_to_grid()

    assert model.vertex_at(0, 0).element == "A"
    assert model.vertex_at(200, 200).element == "B"
    assert model.edge_coords()[edge] == (0.0, 0.0, 200.0, 200.0)


def test_align_skips_taken_corners():
    model = GraphModel(grid_size=100)
    model.add_vertex("A", 0, 0)
    model.add_vertex("B", 10, 10)

    model.align_vertices_to_grid()

    assert model.vertex_at(0, 0).element == "A"
    # (0, 100) and (100, 0) are equally close, the smaller corner wins
    assert model.vertex_at(0, 100).element == "B"
    assert model.graph.num_vertices() == 2


def test_clear_graph(square):
    square.connect_all_vertices()
    square.clear_graph()

    assert square.graph.num_vertices() == 0
    assert square.graph.num_edges() == 0
    assert square.vertex_coords() == {}
    assert square.last_added_coords() is None


def test_copy_is_independent(square):
    square.add_edge((0, 0), (100, 0), "ab")
    duplicate = square.copy()

    duplicate.add_edge((100, 0), (100, 100))
    duplicate.delete_vertex(0, 0)

    assert square.graph.num_vertices() == 4
    assert square.graph.num_edges() == 1
    assert duplicate.graph.num_vertices() == 3
    assert duplicate.graph.num_edges() == 1
    assert duplicate.to_dict()["vertices"][0]["element"] == "B"


def test_to_dict(square):
    square.add_edge((0, 0), (100, 100), "ac")
    payload = square.to_dict()

    assert [v["element"] for v in payload["vertices"]] == ["A", "B", "C", "D"]
    assert payload["vertices"][2] == {"index": 2, "element": "C", "x": 100.0, "y": 100.0, "degree": 1}
    assert payload["edges"] == [
        {"element": "ac", "origin": 0, "destination": 2, "coords": [0.0, 0.0, 100.0, 100.0]}
    ]


@pytest.mark.parametrize("x, y", [(float("inf"), 0), (0, float("-inf")), (float("nan"), 0)])
def test_non_finite_coordinates_are_rejected(square, x, y):
    with pytest.raises(ValueError):
        square.add_vertex("E", x, y)
    with pytest.raises(ValueError):
        square.move_vertex(0, 0, x, y)

    assert square.graph.num_vertices() == 4
    assert square.vertex_at(0, 0).element == "A"


@pytest.mark.parametrize("grid_size", [0, -100, float("nan"), float("inf"), True, "100"])
def test_grid_size_must_be_positive(grid_size):
    with pytest.raises(ValueError):
        GraphModel(grid_size=grid_size)


def test_fractional_grid_size():
    model = GraphModel(grid_size=2.5)
    model.add_vertex("A", 1, 1)

    model.align_vertices_to_grid()
    assert model.vertex_at(0, 0).element == "A"
