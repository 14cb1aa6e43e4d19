from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .identity import Identity, IdentityLike, to_identity

if TYPE_CHECKING:
    from .stmt import StmtList


class SubGraph(ABC):
    """SubGraph groups statements, either as ``subgraph [id] {...}`` or as a bare ``{...}``.

    A subgraph owns its statement list and is fixed once constructed.
    """

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError

    @staticmethod
    def subgraph(id: Optional[IdentityLike], stmts: "StmtList") -> "KeywordSubGraph":
        return KeywordSubGraph(None if id is None else to_identity(id), stmts)

    @staticmethod
    def cluster(stmts: "StmtList") -> "Cluster":
        return Cluster(stmts)


@dataclass(frozen=True)
class KeywordSubGraph(SubGraph):
    id: Optional[Identity]
    stmts: "StmtList"

    def __post_init__(self):
        if self.id is not None:
            object.__setattr__(self, "id", to_identity(self.id))

    def __str__(self) -> str:
        name = "" if self.id is None else f"{self.id} "
        return f"subgraph {name}{{{self.stmts}}}"


@dataclass(frozen=True)
class Cluster(SubGraph):
    stmts: "StmtList"

    def __str__(self) -> str:
        return f"{{{self.stmts}}}"
