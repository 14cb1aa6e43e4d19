"""
Identity models every literal token DOT accepts as a node name, attribute
key, attribute value or label.
"""
import enum
import math
import re
import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional, Tuple, Union

from .errors import InvalidIdentifier

# The high-byte class is the Latin-1 range only, not "any letter".
ID_PATTERN = re.compile(r"[A-Za-z\x80-\xff_][A-Za-z\x80-\xff0-9_]*")

_FLT_MAX = 3.4028234663852886e38

_QUOTE_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\0": "\\0",
    }
)


def is_valid_bare_identifier(text: str) -> bool:
    """Check that text can be written as a bare (unquoted) DOT identifier."""
    return ID_PATTERN.fullmatch(text) is not None


class IntWidth(enum.Enum):
    I8 = "i8"
    U8 = "u8"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    I128 = "i128"
    U128 = "u128"
    ISIZE = "isize"
    USIZE = "usize"

    @property
    def bounds(self) -> Tuple[int, int]:
        return _INT_BOUNDS[self]

    def contains(self, value: int) -> bool:
        low, high = self.bounds
        return low <= value <= high


def _signed(bits: int) -> Tuple[int, int]:
    return -(2 ** (bits - 1)), 2 ** (bits - 1) - 1


def _unsigned(bits: int) -> Tuple[int, int]:
    return 0, 2**bits - 1


_INT_BOUNDS: Dict[IntWidth, Tuple[int, int]] = {
    IntWidth.I8: _signed(8),
    IntWidth.U8: _unsigned(8),
    IntWidth.I16: _signed(16),
    IntWidth.U16: _unsigned(16),
    IntWidth.I32: _signed(32),
    IntWidth.U32: _unsigned(32),
    IntWidth.I64: _signed(64),
    IntWidth.U64: _unsigned(64),
    IntWidth.I128: _signed(128),
    IntWidth.U128: _unsigned(128),
    IntWidth.ISIZE: _signed(64),
    IntWidth.USIZE: _unsigned(64),
}


def to_single(value: float) -> float:
    """Round a float to the nearest single precision value."""
    if math.isnan(value) or math.isinf(value):
        return value
    if abs(value) > _FLT_MAX:
        return math.copysign(math.inf, value)
    return struct.unpack("f", struct.pack("f", value))[0]


def format_float(value: float, single: bool = False) -> str:
    """Format a float as the shortest positional decimal that reads back to it.

    DOT numerals have no exponent form, so large and small magnitudes are
    written out in full. Integral values drop the fractional part.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = _shortest_single(value) if single else repr(value)
    text = format(Decimal(text), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _shortest_single(value: float) -> str:
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if to_single(float(text)) == value:
            return text
    return repr(value)


def quote(text: str) -> str:
    """Wrap text in double quotes, escaping backslashes, quotes and control characters."""
    return f'"{text.translate(_QUOTE_ESCAPES)}"'


class Identity(ABC):
    """Identity is the closed set of literal kinds usable as a DOT token.

    Use the constructors on this class rather than instantiating the
    variants directly when the input is not known to be well-formed.
    """

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError

    @staticmethod
    def id(text: str) -> "String":
        """Create a bare identifier.

        :param text: Identifier text, e.g. ``node_1``.
        :raises InvalidIdentifier: if the text is not a legal bare identifier.
        """
        if not is_valid_bare_identifier(text):
            raise InvalidIdentifier(text)
        return String(text)

    @staticmethod
    def quoted(text: str) -> "Quoted":
        """Create a quoted string. Escaping is deferred to rendering."""
        return Quoted(text)

    @staticmethod
    def boolean(value: bool) -> "Bool":
        return Bool(value)

    @staticmethod
    def integer(value: int, width: IntWidth = IntWidth.I64) -> "Integer":
        return Integer(value, width)

    @staticmethod
    def single(value: float) -> "Float":
        return Float(value)

    @staticmethod
    def double(value: float) -> "Double":
        return Double(value)


@dataclass(frozen=True)
class String(Identity):
    """Bare identifier. The text is not re-validated on render."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Quoted(Identity):
    text: str

    def __str__(self) -> str:
        return quote(self.text)


@dataclass(frozen=True)
class Bool(Identity):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Integer(Identity):
    value: int
    width: IntWidth = IntWidth.I64

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{self.value!r} is not an integer")
        if not self.width.contains(self.value):
            raise ValueError(f"{self.value} is out of range for {self.width.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float(Identity):
    """Single precision float."""

    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", to_single(float(self.value)))

    def __str__(self) -> str:
        return format_float(self.value, single=True)


@dataclass(frozen=True)
class Double(Identity):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return format_float(self.value)


@dataclass(frozen=True)
class ArrowName(Identity):
    """Up to four arrow shape names, concatenated on render."""

    first: Optional[str] = None
    second: Optional[str] = None
    third: Optional[str] = None
    fourth: Optional[str] = None

    @property
    def names(self) -> Tuple[Optional[str], ...]:
        return self.first, self.second, self.third, self.fourth

    def __str__(self) -> str:
        return "".join(name for name in self.names if name is not None)


@dataclass(frozen=True)
class RGBA(Identity):
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not IntWidth.U8.contains(channel):
                raise ValueError(f"{channel} is not a valid color channel")

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


@dataclass(frozen=True)
class HSV(Identity):
    h: float
    s: float
    v: float

    def __post_init__(self):
        for name in ("h", "s", "v"):
            object.__setattr__(self, name, to_single(float(getattr(self, name))))

    def __str__(self) -> str:
        h, s, v = (format_float(x, single=True) for x in (self.h, self.s, self.v))
        return f"{h},+{s},+{v}"


IdentityLike = Union[Identity, str, bool, int, float]


def to_identity(value: IdentityLike) -> Identity:
    """Coerce a plain Python value into an Identity.

    Strings become bare identifiers when they are legal ones and quoted
    strings otherwise.
    """
    if isinstance(value, Identity):
        return value
    if isinstance(value, bool):
        return Bool(value)
    if isinstance(value, int):
        for width in (IntWidth.I64, IntWidth.I128, IntWidth.U128):
            if width.contains(value):
                return Integer(value, width)
        raise ValueError(f"{value} does not fit in any integer width")
    if isinstance(value, float):
        return Double(value)
    if isinstance(value, str):
        if is_valid_bare_identifier(value):
            return String(value)
        return Quoted(value)
    raise TypeError(f"{value!r} cannot be used as a DOT identity")
