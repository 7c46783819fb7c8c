import sqlite3

import pytest

from imsql.db_model import DbModel
from imsql.nodes import (
    BaseVertex,
    DbColumnVertex,
    DbTableNode,
    EdgeProperty,
    NodeProperty,
    SpreadsheetNode,
    SpreadsheetVertex,
    TransformInputKeyVertex,
    TransformInputValueVertex,
    TransformNode,
    TransformOutputVertex,
    VertexDirection,
    VertexProperty,
)
from imsql.values import Int64Value, NullValue, StringValue


class _Graph:
    def __init__(self):
        self._vertices = []
        self._node_vertices = {}
        self._inputs = {}

    def add(self, vertex, node):
        vertex.vertex_id = len(self._vertices)
        self._vertices.append(vertex)
        self._node_vertices.setdefault(node, []).append(vertex.vertex_id)
        return vertex

    def connect(self, source, target):
        self._inputs[target.vertex_id] = source

    def input_vertex(self, vtx):
        return self._inputs.get(vtx)

    def vertices(self, node):
        return self._node_vertices.get(node, [])

    def vertex(self, vtx):
        return self._vertices[vtx]


class _Fixed(BaseVertex):
    def __init__(self, graph, values):
        super().__init__(graph)
        self.values = values

    @property
    def name(self):
        return "fixed"

    def get_value(self, row_id):
        return self.values.get(row_id)

    def get_all_values(self):
        return list(self.values.values())


@pytest.fixture
def graph():
    return _Graph()


@pytest.fixture
def db(tmp_path):
    path = tmp_path / "people.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE people (id INTEGER, name TEXT)")
    conn.executemany("INSERT INTO people VALUES (?, ?)", [(1, "ada"), (2, "bob")])
    conn.commit()
    conn.close()
    model = DbModel(path)
    yield model
    model.close()


def test_spreadsheet_vertex_without_input(graph):
    sheet = SpreadsheetNode(graph)
    column = graph.add(SpreadsheetVertex(graph, "id"), sheet)
    assert column.name == "id"
    assert column.get_input_vertex() is None
    assert column.get_value(0) is None
    assert column.get_all_values() == []


def test_spreadsheet_vertex_forwards_input(graph):
    sheet = SpreadsheetNode(graph)
    owner = SpreadsheetNode(graph)
    source = graph.add(_Fixed(graph, {1: Int64Value(7)}), owner)
    column = graph.add(SpreadsheetVertex(graph, "c"), sheet)
    graph.connect(source, column)
    assert column.get_input_vertex() is source
    assert column.get_value(1) == Int64Value(7)
    assert column.get_all_values() == [Int64Value(7)]


def test_spreadsheet_node_row_values(graph):
    sheet = SpreadsheetNode(graph)
    owner = SpreadsheetNode(graph)
    source = graph.add(_Fixed(graph, {3: StringValue("x")}), owner)
    first = graph.add(SpreadsheetVertex(graph, "a"), sheet)
    graph.add(SpreadsheetVertex(graph, "b"), sheet)
    graph.connect(source, first)
    assert sheet.name == "Spreadsheet"
    assert [v.name for v in sheet.vertices()] == ["a", "b"]
    assert sheet.get_row_values(3) == [StringValue("x"), None]


def test_db_column_vertex_reads_column(graph, db):
    table = db.table_by_name("people")
    node = DbTableNode(graph, table)
    vertex = graph.add(DbColumnVertex(graph, table.column_by_name("name")), node)
    node.add_vertex(vertex)
    assert node.name == "people"
    assert vertex.name == "name"
    assert node.column_vertices == [vertex]
    assert vertex.get_value(1) == StringValue("ada")
    assert vertex.get_value(99) is None
    assert vertex.get_all_values() == [StringValue("ada"), StringValue("bob")]


def _transform(graph, keys, values):
    node = TransformNode(graph)
    owner = SpreadsheetNode(graph)
    key_src = graph.add(_Fixed(graph, keys), owner)
    val_src = graph.add(_Fixed(graph, values), owner)
    node.input_key_vertex = graph.add(TransformInputKeyVertex(graph, node), node)
    node.input_value_vertex = graph.add(TransformInputValueVertex(graph, node), node)
    node.output_vertex = graph.add(TransformOutputVertex(graph, node), node)
    graph.connect(key_src, node.input_key_vertex)
    graph.connect(val_src, node.input_value_vertex)
    return node


def test_transform_names(graph):
    node = _transform(graph, {}, {})
    assert node.name == "Transform"
    assert [v.name for v in node.vertices()] == ["key", "value", "output"]


def test_transform_looks_up_by_integer_key(graph):
    node = _transform(graph, {0: Int64Value(5)}, {5: StringValue("hit")})
    assert node.output_vertex.get_value(0) == StringValue("hit")


def test_transform_missing_key_gives_none(graph):
    node = _transform(graph, {}, {5: StringValue("hit")})
    assert node.output_vertex.get_value(0) is None


def test_transform_null_key_gives_null(graph):
    node = _transform(graph, {0: NullValue()}, {})
    assert node.output_vertex.get_value(0) == NullValue()


def test_transform_string_key_rejected(graph):
    node = _transform(graph, {0: StringValue("k")}, {})
    with pytest.raises(RuntimeError, match="String keys"):
        node.output_vertex.get_value(0)


def test_transform_key_get_all_values_unsupported(graph):
    node = _transform(graph, {}, {})
    with pytest.raises(RuntimeError, match="not supported"):
        node.input_key_vertex.get_all_values()


def test_transform_value_get_all_values_unsupported(graph):
    node = _transform(graph, {}, {})
    with pytest.raises(RuntimeError, match="not supported"):
        node.input_value_vertex.get_all_values()


def test_transform_output_get_all_values_unsupported(graph):
    node = _transform(graph, {}, {})
    with pytest.raises(RuntimeError, match="not supported"):
        node.output_vertex.get_all_values()


def test_transform_input_without_connection_raises(graph):
    node = TransformNode(graph)
    key = graph.add(TransformInputKeyVertex(graph, node), node)
    with pytest.raises(LookupError):
        key.get_value(0)


def test_transform_output_without_inputs_raises(graph):
    node = TransformNode(graph)
    out = graph.add(TransformOutputVertex(graph, node), node)
    with pytest.raises(LookupError):
        out.get_value(0)


def test_property_records():
    vertex = SpreadsheetVertex(_Graph(), "id")
    prop = VertexProperty(vertex=vertex, direction=VertexDirection.OUTPUT)
    prop.direction = VertexDirection.BIDIRECTIONAL
    assert prop.direction is VertexDirection.BIDIRECTIONAL
    first, second = NodeProperty(node_id=0), NodeProperty(node_id=1)
    first.vertices.append(4)
    assert second.vertices == []
    assert EdgeProperty(id=2) == EdgeProperty(id=2)


def test_vertex_id_defaults_to_zero():
    vertex = SpreadsheetVertex(_Graph(), "id")
    assert vertex.vertex_id == 0