"""Adapters — bindings for the external CLIs the installer drives.

Public re-exports for convenient access.
"""

from drupal_setup.adapters.base import Adapter, ExecutionContext
from drupal_setup.adapters.mock import MockAdapter
from drupal_setup.adapters.registry import AdapterRegistry, build_default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "build_default_registry",
]
