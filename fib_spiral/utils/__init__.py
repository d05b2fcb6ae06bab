"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Atomic file writes and YAML I/O (fs)
    - Unified logging (logging_config)
    - Exported-document schema validation (validators)

No module in utils/ may import from geometry, construction or export.

Convenience imports:
    from fib_spiral.utils import fs, validators
    from fib_spiral.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    'fs',
    'logging_config',
    'validators',
    'setup_logging',
    'get_logger',
    'push_context',
]
