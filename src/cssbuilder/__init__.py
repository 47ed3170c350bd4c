"""cssbuilder: fluent builder for compound and combined CSS selectors."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.builder import SelectorBuilder, builder  # noqa: E402
from cssbuilder.config import BuilderConfig  # noqa: E402
from cssbuilder.errors import DuplicateError, OrderError, SelectorError  # noqa: E402
from cssbuilder.model import Rank, Selector, SelectorParts  # noqa: E402

__all__ = [
    "__version__",
    "BuilderConfig",
    "DuplicateError",
    "OrderError",
    "Rank",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SelectorParts",
    "builder",
]
