import enum
import logging
import os
from dataclasses import dataclass, replace
from typing import Optional, Union

import graphviz  # type: ignore[import]

from .errors import UninitializedFieldError
from .identity import Identity, IdentityLike, to_identity
from .stmt import StmtList

log = logging.getLogger(__name__)


class GraphType(enum.Enum):
    GRAPH = "graph"
    DIGRAPH = "digraph"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Graph:
    """Graph is the root of a DOT description.

    :param graph_type: Directed or undirected.
    :param stmts: Body of the graph.
    :param strict: Disallow duplicate edges.
    :param id: Optional graph name.
    """

    graph_type: GraphType
    stmts: StmtList
    strict: bool = False
    id: Optional[Identity] = None

    def __post_init__(self):
        if self.id is not None:
            object.__setattr__(self, "id", to_identity(self.id))

    def __str__(self) -> str:
        strict = "strict " if self.strict else ""
        name = "" if self.id is None else str(self.id)
        return f"{strict}{self.graph_type} {name}{{{self.stmts}}}"

    @staticmethod
    def builder() -> "GraphBuilder":
        return GraphBuilder()

    def to_dot(self) -> str:
        return str(self)

    def source(self, engine: str = "dot") -> graphviz.Source:
        """Wrap the DOT text in a graphviz Source for the given layout engine."""
        if not self._validate_engine(engine):
            raise ValueError(f'"{engine}" is not a valid engine')
        return graphviz.Source(self.to_dot(), engine=engine)

    def pipe(self, format: str = "svg", engine: str = "dot") -> bytes:
        """Lay out the graph with Graphviz and return the rendered output."""
        if not self._validate_format(format):
            raise ValueError(f'"{format}" is not a valid output format')
        log.debug("piping graph through %s as %s", engine, format)
        return self.source(engine).pipe(format=format)

    def render(
        self,
        filename: Union[str, os.PathLike],
        format: str = "png",
        engine: str = "dot",
        view: bool = False,
    ) -> str:
        """Write the DOT source to filename and render it next to it.

        :param filename: Path of the DOT file to write, without the format suffix.
        :param format: Output file format. Default is 'png'.
        :param engine: Graphviz layout engine. Default is 'dot'.
        :param view: Open the rendered file after rendering.
        :return: Path of the rendered file.
        """
        if not self._validate_format(format):
            raise ValueError(f'"{format}" is not a valid output format')
        log.debug("rendering graph to %s with %s as %s", filename, engine, format)
        return self.source(engine).render(filename, format=format, view=view, quiet=True)

    def _repr_svg_(self) -> str:
        return self.pipe(format="svg").decode("utf-8")

    @staticmethod
    def _validate_format(format: str) -> bool:
        return format.lower() in graphviz.FORMATS

    @staticmethod
    def _validate_engine(engine: str) -> bool:
        return engine.lower() in graphviz.ENGINES


@dataclass(frozen=True)
class GraphBuilder:
    """GraphBuilder accumulates the fields of a Graph.

    graph_type and stmts are mandatory; strict defaults to False and id is
    optional.
    """

    _graph_type: Optional[GraphType] = None
    _stmts: Optional[StmtList] = None
    _strict: bool = False
    _id: Optional[Identity] = None

    def graph_type(self, graph_type: GraphType) -> "GraphBuilder":
        return replace(self, _graph_type=graph_type)

    def strict(self, strict: bool = True) -> "GraphBuilder":
        return replace(self, _strict=strict)

    def id(self, id: IdentityLike) -> "GraphBuilder":
        return replace(self, _id=to_identity(id))

    def stmts(self, stmts: StmtList) -> "GraphBuilder":
        return replace(self, _stmts=stmts)

    def build(self) -> Graph:
        if self._graph_type is None:
            raise UninitializedFieldError("graph_type")
        if self._stmts is None:
            raise UninitializedFieldError("stmts")
        return Graph(graph_type=self._graph_type, stmts=self._stmts, strict=self._strict, id=self._id)
