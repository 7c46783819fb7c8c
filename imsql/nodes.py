"""Nodes and vertices of the design graph, and the property records the graph keeps."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence

from imsql.values import Int64Value, NullValue, StringValue, Value

if TYPE_CHECKING:
    from imsql.db_model import DbColumnModel, DbTableModel


class VertexDirection(enum.Enum):
    """Which way data may flow through a vertex."""

    INPUT = "input"
    OUTPUT = "output"
    BIDIRECTIONAL = "bidirectional"


@dataclass
class VertexProperty:
    """What the graph stores for each vertex."""

    vertex: BaseVertex
    direction: VertexDirection


@dataclass(frozen=True)
class EdgeProperty:
    """What the graph stores for each edge."""

    id: int


@dataclass
class NodeProperty:
    """What the graph stores for each node: its vertices and its identifier."""

    node_id: int
    vertices: List[int] = field(default_factory=list)


class GraphView(Protocol):
    """The part of the design graph that nodes and vertices consult."""

    def input_vertex(self, vtx: int) -> Optional[BaseVertex]: ...

    def vertices(self, node: BaseNode) -> Sequence[int]: ...

    def vertex(self, vtx: int) -> BaseVertex: ...


class BaseVertex(ABC):
    """A connection point on a node that yields column values."""

    def __init__(self, graph: GraphView, vertex_id: int = 0) -> None:
        self.graph = graph
        self.vertex_id = vertex_id

    @property
    @abstractmethod
    def name(self) -> str:
        """The vertex's display name."""

    @abstractmethod
    def get_value(self, row_id: int) -> Optional[Value]:
        """The value at ``row_id``, or None if there is nothing to read."""

    @abstractmethod
    def get_all_values(self) -> List[Value]:
        """Every value this vertex yields."""

    def get_input_vertex(self) -> Optional[BaseVertex]:
        """The vertex feeding into this one, or None if nothing is connected."""
        return self.graph.input_vertex(self.vertex_id)

    def _require_input(self) -> BaseVertex:
        source = self.get_input_vertex()
        if source is None:
            raise LookupError(f"Vertex '{self.name}' has no input connected.")
        return source

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, id={self.vertex_id})"


class BaseNode(ABC):
    """A box in the designer holding a group of vertices."""

    def __init__(self, graph: GraphView) -> None:
        self.graph = graph

    @property
    @abstractmethod
    def name(self) -> str:
        """The node's display name."""

    def vertices(self) -> List[BaseVertex]:
        """The vertices registered for this node, in order."""
        return [self.graph.vertex(vtx) for vtx in self.graph.vertices(self)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SpreadsheetVertex(BaseVertex):
    """A spreadsheet column; shows whatever its connected input yields."""

    def __init__(self, graph: GraphView, name: str) -> None:
        super().__init__(graph)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_value(self, row_id: int) -> Optional[Value]:
        source = self.get_input_vertex()
        if source is None:
            return None
        return source.get_value(row_id)

    def get_all_values(self) -> List[Value]:
        source = self.get_input_vertex()
        if source is None:
            return []
        return source.get_all_values()


class SpreadsheetNode(BaseNode):
    """The spreadsheet whose columns are shown as a table."""

    @property
    def name(self) -> str:
        return "Spreadsheet"

    def get_row_values(self, row_id: int) -> List[Optional[Value]]:
        """The value of every column at ``row_id``, in column order."""
        return [vertex.get_value(row_id) for vertex in self.vertices()]


class DbColumnVertex(BaseVertex):
    """A vertex reading straight from a database column."""

    def __init__(self, graph: GraphView, column: DbColumnModel) -> None:
        super().__init__(graph)
        self.column = column

    @property
    def name(self) -> str:
        return self.column.name

    def get_value(self, row_id: int) -> Optional[Value]:
        return self.column.get_value(row_id)

    def get_all_values(self) -> List[Value]:
        return self.column.get_rows()


class DbTableNode(BaseNode):
    """A node standing for a database table."""

    def __init__(self, graph: GraphView, table: DbTableModel) -> None:
        super().__init__(graph)
        self.table = table
        self.column_vertices: List[DbColumnVertex] = []

    @property
    def name(self) -> str:
        return self.table.name

    def add_vertex(self, vertex: DbColumnVertex) -> None:
        self.column_vertices.append(vertex)


class TransformInputValueVertex(BaseVertex):
    """The transform input holding the values to look up."""

    def __init__(self, graph: GraphView, node: TransformNode) -> None:
        super().__init__(graph)
        self.node = node

    @property
    def name(self) -> str:
        return "value"

    def get_value(self, row_id: int) -> Optional[Value]:
        return self._require_input().get_value(row_id)

    def get_all_values(self) -> List[Value]:
        raise RuntimeError("GetAllValues is not supported for TransformInputValueVertex.")


class TransformInputKeyVertex(BaseVertex):
    """The transform input holding the keys used for lookup."""

    def __init__(self, graph: GraphView, node: TransformNode) -> None:
        super().__init__(graph)
        self.node = node

    @property
    def name(self) -> str:
        return "key"

    def get_value(self, row_id: int) -> Optional[Value]:
        return self._require_input().get_value(row_id)

    def get_all_values(self) -> List[Value]:
        raise RuntimeError("GetAllValues is not supported for TransformInputKeyVertex.")


class TransformOutputVertex(BaseVertex):
    """The transform output: the value found at the row named by the key."""

    def __init__(self, graph: GraphView, node: TransformNode) -> None:
        super().__init__(graph)
        self.node = node

    @property
    def name(self) -> str:
        return "output"

    def get_value(self, row_id: int) -> Optional[Value]:
        key_vertex = self.node.input_key_vertex
        value_vertex = self.node.input_value_vertex
        if key_vertex is None or value_vertex is None:
            raise LookupError("Transform node is missing its input vertices.")
        key = key_vertex.get_value(row_id)
        match key:
            case None:
                return None
            case NullValue():
                return NullValue()
            case StringValue():
                raise RuntimeError("String keys are not supported in TransformOutputVertex.")
            case Int64Value(value=index):
                return value_vertex.get_value(index)
        raise TypeError(f"not a cell value: {key!r}")

    def get_all_values(self) -> List[Value]:
        raise RuntimeError("GetAllValues is not supported for TransformOutputVertex.")


class TransformNode(BaseNode):
    """A node that looks values up by key."""

    def __init__(self, graph: GraphView) -> None:
        super().__init__(graph)
        self.input_key_vertex: Optional[TransformInputKeyVertex] = None
        self.input_value_vertex: Optional[TransformInputValueVertex] = None
        self.output_vertex: Optional[TransformOutputVertex] = None

    @property
    def name(self) -> str:
        return "Transform"