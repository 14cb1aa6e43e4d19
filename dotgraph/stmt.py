import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .attrs import AttrList
from .edge import Edge
from .identity import Identity, IdentityLike, to_identity
from .port import Port
from .subgraph import SubGraph


class AttrType(enum.Enum):
    """Scope of a default-attribute statement."""

    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"

    def __str__(self) -> str:
        return self.value


class Stmt(ABC):
    """Stmt is one statement of a graph or subgraph body."""

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class EdgeStmt(Stmt):
    edge: Edge

    def __str__(self) -> str:
        return str(self.edge)


@dataclass(frozen=True)
class NodeStmt(Stmt):
    id: Identity
    port: Optional[Port] = None
    attrs: Optional[AttrList] = None

    def __post_init__(self):
        object.__setattr__(self, "id", to_identity(self.id))

    def __str__(self) -> str:
        port = "" if self.port is None else str(self.port)
        attrs = "" if self.attrs is None else str(self.attrs)
        return f"{self.id}{port}{attrs}"


@dataclass(frozen=True)
class AttrStmt(Stmt):
    scope: AttrType
    attrs: AttrList

    def __str__(self) -> str:
        return f"{self.scope} {self.attrs}"


@dataclass(frozen=True)
class Equation(Stmt):
    """``a=b`` statement."""

    left: Identity
    right: Identity

    def __post_init__(self):
        object.__setattr__(self, "left", to_identity(self.left))
        object.__setattr__(self, "right", to_identity(self.right))

    def __str__(self) -> str:
        return f"{self.left}={self.right}"


@dataclass(frozen=True)
class SubGraphStmt(Stmt):
    subgraph: SubGraph

    def __str__(self) -> str:
        return str(self.subgraph)


@dataclass(frozen=True)
class StmtList:
    """StmtList is the ordered body of a graph or subgraph.

    Statements render in insertion order, each terminated by ``;``. Every
    method returns a new list.
    """

    stmts: Tuple[Stmt, ...] = ()

    def __str__(self) -> str:
        return "".join(f"{stmt};" for stmt in self.stmts)

    def __iter__(self):
        return iter(self.stmts)

    def __len__(self) -> int:
        return len(self.stmts)

    def add(self, stmt: Stmt) -> "StmtList":
        if not isinstance(stmt, Stmt):
            raise TypeError(f"{stmt!r} is not a valid Stmt")
        return StmtList(self.stmts + (stmt,))

    def extend(self, stmts: Iterable[Stmt]) -> "StmtList":
        result = self
        for stmt in stmts:
            result = result.add(stmt)
        return result

    def add_node(
        self,
        id: IdentityLike,
        port: Optional[Port] = None,
        attrs: Optional[AttrList] = None,
    ) -> "StmtList":
        return self.add(NodeStmt(to_identity(id), port, attrs))

    def add_attr(self, scope: AttrType, attrs: AttrList) -> "StmtList":
        return self.add(AttrStmt(scope, attrs))

    def add_edge(self, edge: Edge) -> "StmtList":
        return self.add(EdgeStmt(edge))

    def add_subgraph(self, sub: SubGraph) -> "StmtList":
        return self.add(SubGraphStmt(sub))

    def add_equation(self, left: IdentityLike, right: IdentityLike) -> "StmtList":
        return self.add(Equation(to_identity(left), to_identity(right)))
