# kgnode/common/errors.py
from __future__ import annotations


class MalformedEscapeError(ValueError):
    """Raised when an escaped N-Triples value contains an invalid escape sequence."""

    def __init__(self, value: str, position: int, message: str):
        super().__init__(f"{message} at offset {position} in {value!r}")
        self.value = value
        self.position = position
        self.message = message


class NodeSyntaxError(ValueError):
    """Raised when a token cannot be recognized as any RDF term kind."""

    def __init__(self, token: str, message: str):
        super().__init__(f"{message}: {token!r}")
        self.token = token
        self.message = message
