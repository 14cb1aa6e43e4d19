import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .identity import Identity, IdentityLike, to_identity


class Compass(enum.Enum):
    """Compass points a node port can be addressed by."""

    NORTH = "n"
    NORTH_EAST = "ne"
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH = "s"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"
    CENTER = "c"

    def __str__(self) -> str:
        return self.value


class Port(ABC):
    """Port addresses a part of a node: ``:field``, ``:field:compass`` or ``:compass``."""

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError

    @staticmethod
    def id(field: IdentityLike, compass: Optional[Compass] = None) -> "FieldPort":
        return FieldPort(to_identity(field), compass)

    @staticmethod
    def id_compass(field: IdentityLike, compass: Compass) -> "FieldPort":
        return FieldPort(to_identity(field), compass)

    @staticmethod
    def compass(compass: Compass) -> "CompassPort":
        return CompassPort(compass)


@dataclass(frozen=True)
class FieldPort(Port):
    field: Identity
    compass: Optional[Compass] = None

    def __post_init__(self):
        object.__setattr__(self, "field", to_identity(self.field))

    def __str__(self) -> str:
        if self.compass is None:
            return f":{self.field}"
        return f":{self.field}:{self.compass}"


@dataclass(frozen=True)
class CompassPort(Port):
    point: Compass

    def __str__(self) -> str:
        return f":{self.point}"
