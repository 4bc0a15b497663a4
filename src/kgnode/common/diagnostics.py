# kgnode/common/diagnostics.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Tuple


class DiagnosticsSink(Protocol):
    """Receives non-fatal notices raised while constructing nodes."""

    def notice(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class LoggingSink:
    """Forwards diagnostics to a ``logging`` logger (notices at DEBUG level)."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("kgnode.model.node")

    def notice(self, message: str) -> None:
        self.logger.debug(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)


@dataclass
class CollectingSink:
    """Keeps diagnostics in memory, e.g. for inspection in tests."""
    records: List[Tuple[str, str]] = field(default_factory=list)

    def notice(self, message: str) -> None:
        self.records.append(("notice", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    @property
    def warnings(self) -> List[str]:
        return [m for level, m in self.records if level == "warning"]

    @property
    def notices(self) -> List[str]:
        return [m for level, m in self.records if level == "notice"]


DEFAULT_SINK = LoggingSink()
