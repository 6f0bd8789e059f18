from .config import SuiteConfig
from .ops import get_op, has_op, list_ops
from .resolve import resolve_from_config

__all__ = [
    "SuiteConfig",
    "get_op",
    "has_op",
    "list_ops",
    "resolve_from_config",
]
