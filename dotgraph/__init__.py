"""
dotgraph builds DOT graph descriptions as typed trees and renders them to
DOT source text.
"""

from .attrs import AttrList, AttrPair
from .edge import Edge, EdgeBody, EdgeNode, EdgeOp, NodeId
from .errors import DotGraphError, InvalidIdentifier, UninitializedFieldError
from .graph import Graph, GraphBuilder, GraphType
from .identity import (
    HSV,
    RGBA,
    ArrowName,
    Bool,
    Double,
    Float,
    Identity,
    Integer,
    IntWidth,
    Quoted,
    String,
    is_valid_bare_identifier,
    to_identity,
)
from .port import Compass, CompassPort, FieldPort, Port
from .stmt import AttrStmt, AttrType, EdgeStmt, Equation, NodeStmt, Stmt, StmtList, SubGraphStmt
from .subgraph import Cluster, KeywordSubGraph, SubGraph

__all__ = [
    "ArrowName",
    "AttrList",
    "AttrPair",
    "AttrStmt",
    "AttrType",
    "Bool",
    "Cluster",
    "Compass",
    "CompassPort",
    "DotGraphError",
    "Double",
    "Edge",
    "EdgeBody",
    "EdgeNode",
    "EdgeOp",
    "EdgeStmt",
    "Equation",
    "FieldPort",
    "Float",
    "Graph",
    "GraphBuilder",
    "GraphType",
    "HSV",
    "Identity",
    "Integer",
    "IntWidth",
    "InvalidIdentifier",
    "KeywordSubGraph",
    "NodeId",
    "NodeStmt",
    "Port",
    "Quoted",
    "RGBA",
    "Stmt",
    "StmtList",
    "String",
    "SubGraph",
    "SubGraphStmt",
    "UninitializedFieldError",
    "is_valid_bare_identifier",
    "to_identity",
]
