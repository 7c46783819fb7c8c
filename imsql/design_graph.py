"""The design graph: nodes, their vertices, and the edges that carry data between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from imsql.db_model import DbColumnModel, DbModel
from imsql.nodes import (
    BaseNode,
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
from imsql.values import Int64Value


@dataclass(frozen=True)
class _Edge:
    source: int
    target: int
    prop: EdgeProperty


class DesignGraphModel:
    """The graph shown in the designer, built from a database's tables and foreign keys."""

    def __init__(self, db_model: DbModel) -> None:
        self.db_model = db_model
        self._vertices: List[VertexProperty] = []
        self._edges: List[_Edge] = []
        self._node_properties: Dict[BaseNode, NodeProperty] = {}
        self._next_object_id = 0
        self.spreadsheet_node: SpreadsheetNode = self._add_spreadsheet_node()
        self._attach_db()

    def _attach_db(self) -> None:
        column_vertices: Dict[DbColumnModel, int] = {}
        for table in self.db_model.tables:
            table_node = self._add_empty_node(DbTableNode(self, table))
            for column in table.columns:
                column_vertex = DbColumnVertex(self, column)
                table_node.add_vertex(column_vertex)
                column_vertices[column] = self.make_vertex(
                    column_vertex, VertexDirection.OUTPUT, table_node
                )

        for from_column, to_column in self.db_model.relationships():
            from_vtx = column_vertices[from_column]
            to_vtx = column_vertices[to_column]
            # The referencing column also passes data on downstream.
            self._vertices[to_vtx].direction = VertexDirection.BIDIRECTIONAL
            self._make_edge(from_vtx, to_vtx)

    def _take_id(self) -> int:
        object_id = self._next_object_id
        self._next_object_id += 1
        return object_id

    def _add_empty_node(self, node: BaseNode) -> BaseNode:
        self._node_properties[node] = NodeProperty(node_id=self._take_id())
        return node

    def _add_spreadsheet_node(self) -> SpreadsheetNode:
        node = SpreadsheetNode(self)
        self._add_empty_node(node)
        self.make_vertex(SpreadsheetVertex(self, "id"), VertexDirection.INPUT, node)
        return node

    def _check_vertex(self, vtx: int) -> None:
        if not 0 <= vtx < len(self._vertices):
            raise IndexError(f"No vertex {vtx} in the design graph.")

    def _make_edge(self, source: int, target: int) -> _Edge:
        self._check_vertex(source)
        self._check_vertex(target)
        edge = _Edge(source, target, EdgeProperty(id=self._take_id()))
        self._edges.append(edge)
        return edge

    def nodes(self) -> List[BaseNode]:
        """Every node, in the order it was added."""
        return list(self._node_properties)

    def vertices(self, node: BaseNode) -> List[int]:
        """The vertices belonging to ``node``, in the order they were added."""
        return list(self._node_properties[node].vertices)

    def get_vertex_direction(self, vtx: int) -> VertexDirection:
        return self._vertices[vtx].direction

    def vertex_name(self, vtx: int) -> str:
        return self._vertices[vtx].vertex.name

    def vertex(self, vtx: int) -> BaseVertex:
        return self._vertices[vtx].vertex

    def edges(self) -> List[_Edge]:
        """Every edge, in the order it was added."""
        return list(self._edges)

    def edge_source(self, edge: _Edge) -> int:
        return edge.source

    def edge_target(self, edge: _Edge) -> int:
        return edge.target

    def add_spreadsheet_column(self, column_name: str) -> int:
        """Add an input column to the spreadsheet and return its vertex."""
        return self.make_vertex(
            SpreadsheetVertex(self, column_name), VertexDirection.INPUT, self.spreadsheet_node
        )

    def get_row_ids(self) -> List[int]:
        """The row identifiers fed into the spreadsheet's ``id`` column."""
        if self.spreadsheet_node is None:
            return []
        id_vertex = next(
            vtx
            for vtx in self.vertices(self.spreadsheet_node)
            if self._vertices[vtx].direction is VertexDirection.INPUT
            and self._vertices[vtx].vertex.name == "id"
        )
        row_ids = []
        for value in self._vertices[id_vertex].vertex.get_all_values():
            if not isinstance(value, Int64Value):
                raise RuntimeError("Expected Int64Value for row ID.")
            row_ids.append(value.value)
        return row_ids

    def add_transform_node(self) -> TransformNode:
        """Add a key/value lookup node with its three vertices."""
        node = TransformNode(self)
        self._add_empty_node(node)
        key_vertex = TransformInputKeyVertex(self, node)
        value_vertex = TransformInputValueVertex(self, node)
        output_vertex = TransformOutputVertex(self, node)
        self.make_vertex(key_vertex, VertexDirection.INPUT, node)
        self.make_vertex(value_vertex, VertexDirection.INPUT, node)
        self.make_vertex(output_vertex, VertexDirection.OUTPUT, node)
        node.input_key_vertex = key_vertex
        node.input_value_vertex = value_vertex
        node.output_vertex = output_vertex
        return node

    def add_edge(self, source: int, target: int) -> _Edge:
        """Connect ``source`` to ``target``."""
        return self._make_edge(source, target)

    def input_vertex(self, vtx: int) -> Optional[BaseVertex]:
        """The vertex feeding ``vtx``, or None; more than one feeding vertex is an error."""
        sources = [edge.source for edge in self._edges if edge.target == vtx]
        if not sources:
            return None
        if len(sources) != 1:
            raise RuntimeError(f"Vertex {vtx} has {len(sources)} inputs; expected one.")
        return self._vertices[sources[0]].vertex

    def node_id(self, node: BaseNode) -> int:
        return self._node_properties[node].node_id

    def edge_id(self, edge: _Edge) -> int:
        return edge.prop.id

    def make_vertex(self, vertex: BaseVertex, direction: VertexDirection, node: BaseNode) -> int:
        """Register ``vertex`` under ``node`` and return its index."""
        vtx = len(self._vertices)
        self._vertices.append(VertexProperty(vertex=vertex, direction=direction))
        self._node_properties[node].vertices.append(vtx)
        vertex.vertex_id = vtx
        return vtx