import enum
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from . import subgraph
from .attrs import AttrList, AttrPair
from .identity import Identity, IdentityLike, to_identity
from .port import Port


class EdgeOp(enum.Enum):
    ARROW = "->"
    LINE = "--"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NodeId:
    """NodeId is a plain node reference used as an edge endpoint."""

    id: Identity
    port: Optional[Port] = None

    def __post_init__(self):
        object.__setattr__(self, "id", to_identity(self.id))

    def __str__(self) -> str:
        if self.port is None:
            return str(self.id)
        return f"{self.id}{self.port}"


EdgeNode = Union[NodeId, "subgraph.SubGraph"]


def _endpoint(target: Union[EdgeNode, IdentityLike]) -> EdgeNode:
    if isinstance(target, (NodeId, subgraph.SubGraph)):
        return target
    return NodeId(to_identity(target))


@dataclass(frozen=True)
class EdgeBody:
    """One step of an edge chain: an operator followed by its endpoint."""

    op: EdgeOp
    node: EdgeNode

    def __str__(self) -> str:
        return f"{self.op}{self.node}"


@dataclass(frozen=True)
class Edge:
    """Edge is a chain of endpoints joined by ``->`` or ``--``.

    Build one with head_node() or head_subgraph() and extend the chain with
    the *_to_* methods. Every method returns a new edge.
    """

    head: EdgeNode
    body: Tuple[EdgeBody, ...] = ()
    attrs: Optional[AttrList] = None

    def __str__(self) -> str:
        chain = "".join(str(step) for step in self.body)
        attrs = "" if self.attrs is None else str(self.attrs)
        return f"{self.head}{chain}{attrs}"

    def __rshift__(self, other: Union[EdgeNode, IdentityLike]) -> "Edge":
        """Implements Self >> Node and Self >> SubGraph."""
        return self._chain(EdgeOp.ARROW, _endpoint(other))

    def __sub__(self, other: Union[EdgeNode, IdentityLike]) -> "Edge":
        """Implements Self - Node and Self - SubGraph."""
        return self._chain(EdgeOp.LINE, _endpoint(other))

    @classmethod
    def head_node(cls, id: IdentityLike, port: Optional[Port] = None) -> "Edge":
        return cls(NodeId(to_identity(id), port))

    @classmethod
    def head_subgraph(cls, sub: "subgraph.SubGraph") -> "Edge":
        return cls(sub)

    def line_to_node(self, id: IdentityLike, port: Optional[Port] = None) -> "Edge":
        return self._chain(EdgeOp.LINE, NodeId(to_identity(id), port))

    def line_to_subgraph(self, sub: "subgraph.SubGraph") -> "Edge":
        return self._chain(EdgeOp.LINE, sub)

    def arrow_to_node(self, id: IdentityLike, port: Optional[Port] = None) -> "Edge":
        return self._chain(EdgeOp.ARROW, NodeId(to_identity(id), port))

    def arrow_to_subgraph(self, sub: "subgraph.SubGraph") -> "Edge":
        return self._chain(EdgeOp.ARROW, sub)

    def add_attrlist(self, attrs: AttrList) -> "Edge":
        """Attach an attribute list.

        The first list is taken as is. Any further list has its groups
        appended, followed by a fresh empty group.
        """
        if self.attrs is None:
            return replace(self, attrs=attrs)
        return replace(self, attrs=self.attrs.merge(attrs))

    def add_attribute(self, key: IdentityLike, value: IdentityLike) -> "Edge":
        """Append a single pair to the last attribute group."""
        attrs = AttrList() if self.attrs is None else self.attrs
        return replace(self, attrs=attrs.add(key, value))

    def add_attrpair(self, pair: AttrPair) -> "Edge":
        return self.add_attribute(*pair)

    def _chain(self, op: EdgeOp, node: EdgeNode) -> "Edge":
        return replace(self, body=self.body + (EdgeBody(op, node),))
