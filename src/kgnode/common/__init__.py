"""
Common utilities for kgnode: logging setup, errors, diagnostics and the
N-Triples escape codec.
"""

import logging
from typing import Optional


def setup_logging(log_file: Optional[str] = None, level=logging.INFO):
    # Get the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Check if the root logger already has handlers (avoid adding multiple)
    if not root_logger.handlers:
        if log_file:
            handler = logging.FileHandler(log_file)
        else:
            handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)

        # Add the handler to the root logger
        root_logger.addHandler(handler)


from .errors import MalformedEscapeError, NodeSyntaxError
from .escape import escape_iri, escape_string, unescape
from .diagnostics import DiagnosticsSink, LoggingSink, CollectingSink, DEFAULT_SINK

__all__ = [
    "setup_logging",
    "MalformedEscapeError", "NodeSyntaxError",
    "escape_iri", "escape_string", "unescape",
    "DiagnosticsSink", "LoggingSink", "CollectingSink", "DEFAULT_SINK",
]
