"""Registry of line formats."""

import logging
from typing import Callable, Dict, List

from sparselabel.parsers.base import LineFormat
from sparselabel.parsers.exceptions import UnknownLineFormatError

logger = logging.getLogger(__name__)

# Registry to hold line format functions
_LINE_FORMAT_REGISTRY: Dict[str, LineFormat] = {}

# Human-readable description per registered format
_LINE_FORMAT_DESCRIPTIONS: Dict[str, str] = {}


def register_line_format(name: str, description: str = "") -> Callable:
    """
    Decorator to register a line format function.

    Usage:
        @register_line_format("sparse", description="...")
        def parse_sparse_line(line, session, options):
            ...
    """
    def decorator(func: LineFormat) -> LineFormat:
        if name in _LINE_FORMAT_REGISTRY:
            logger.warning(f"Overwriting existing line format: {name}")
        _LINE_FORMAT_REGISTRY[name] = func
        _LINE_FORMAT_DESCRIPTIONS[name] = description
        logger.debug(f"Registered line format: {name} -> {func.__name__}")
        return func
    return decorator


def get_registered_line_formats() -> List[str]:
    """Return list of registered line format names."""
    return list(_LINE_FORMAT_REGISTRY.keys())


def get_line_format(name: str) -> LineFormat:
    """
    Look up a line format by name.

    Raises:
        UnknownLineFormatError: If nothing is registered under name
    """
    if name not in _LINE_FORMAT_REGISTRY:
        available = get_registered_line_formats()
        raise UnknownLineFormatError(
            f"Unknown line format: '{name}'. Available: {available}"
        )
    return _LINE_FORMAT_REGISTRY[name]


def describe_line_format(name: str) -> str:
    """Return the description a line format was registered with."""
    get_line_format(name)
    return _LINE_FORMAT_DESCRIPTIONS[name]
