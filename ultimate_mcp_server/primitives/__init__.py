# primitives/__init__.py
"""MCP tool primitives, one package per category."""

import importlib

# Import order is registration order, which is the order tools/list reports
CATEGORY_PACKAGES = ("text", "data_math", "web", "dates", "business", "developer", "prompts")


def load_all_tools() -> None:
    """Import every category package (this triggers tool registration at import time)."""
    for package in CATEGORY_PACKAGES:
        importlib.import_module(f".{package}", __name__)


__all__ = ["CATEGORY_PACKAGES", "load_all_tools"]
