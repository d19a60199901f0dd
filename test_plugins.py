import pytest

from core.graph_editor.engine import GraphEngine
from core.graph_editor.registry import PluginRegistry
from datasource_text.datasource_text_plugin.plugin import TextDatasourcePlugin
from visualizer_simple.visualizer_simple_plugin.plugin import SimpleVisualizer

SQUARE = (
    "A 0.0 0.0\n"
    "B 100.0 0.0\n"
    "C 100.0 100.0\n"
    "D 0.0 100.0\n"
    "\n"
    "ab 0 1\n"
    "bc 1 2\n"
    "cd 2 3\n"
)


@pytest.fixture
def engine():
    registry = PluginRegistry()
    registry.register_datasource("text", TextDatasourcePlugin)
    registry.register_visualizer("simple", SimpleVisualizer)
    return GraphEngine()


@pytest.fixture
def square_file(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text(SQUARE, encoding="utf-8")
    return str(path)


def test_registry_is_a_singleton():
    assert PluginRegistry() is PluginRegistry()


def test_registry_lists_registered_plugins(engine):
    assert "text" in engine.registry.list_datasources()
    assert "simple" in engine.registry.list_visualizers()
    assert engine.registry.get_datasource("text") is TextDatasourcePlugin
    assert engine.registry.get_visualizer("missing") is None


def test_engine_load_sets_workspace_graph(engine, square_file):
    model = engine.load("text", square_file)

    assert engine.get_current_graph() is model
    assert model.graph.num_vertices() == 4
    assert engine.is_connected()
    assert not engine.is_complete()


def test_engine_process_renders_loaded_graph(engine, square_file):
    html = engine.process("text", "simple", square_file)

    assert "<svg" in html
    assert html.count("<circle") == 4
    assert engine.get_current_graph().graph.num_edges() == 3


def test_engine_save_writes_current_graph(engine, square_file, tmp_path):
    engine.load("text", square_file)
    engine.get_current_graph().delete_edge((0, 0, 100, 0))
    target = tmp_path / "out.txt"

    engine.save("text", str(target))

    saved = target.read_text(encoding="utf-8")
    assert saved.startswith("A 0.0 0.0\n")
    assert "ab 0 1" not in saved
    assert saved.endswith("bc 1 2\ncd 2 3\n")


def test_engine_unknown_plugins(engine, square_file):
    with pytest.raises(ValueError, match="Datasource 'csv' not found"):
        engine.load("csv", square_file)
    with pytest.raises(ValueError, match="Visualizer 'tree' not found"):
        engine.process("text", "tree", square_file)


def test_engine_without_graph(engine):
    engine.clear_workspace()

    with pytest.raises(ValueError, match="No graph loaded"):
        engine.render("simple")
    with pytest.raises(ValueError):
        engine.save("text", "unused.txt")
    assert engine.list_vertices() == []
    assert engine.list_edges() == []


def test_engine_undo_restores_previous_graph(engine, square_file):
    first = engine.load("text", square_file)
    engine.load("text", square_file)

    assert engine.undo() is first
    assert engine.get_current_graph() is first
