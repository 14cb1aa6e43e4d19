class DotGraphError(Exception):
    """Base class for all dotgraph errors."""


class InvalidIdentifier(DotGraphError, ValueError):
    """Raised when a bare identifier does not match the DOT ID grammar."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid identifier: {text!r}")


class UninitializedFieldError(DotGraphError):
    """Raised by GraphBuilder.build() when a mandatory field was never set."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f'"{field}" must be initialized')
