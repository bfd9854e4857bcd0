"""Adapters — the bootstrapper's bindings to subprocesses and dotfiles.

Public re-exports for convenient access.
"""

from mise_bootstrap.adapters.base import Adapter, ExecutionContext
from mise_bootstrap.adapters.mock import MockAdapter
from mise_bootstrap.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "default_registry",
]
