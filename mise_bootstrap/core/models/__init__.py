"""
Domain models — Pydantic types for the bootstrapper.

All models are re-exported here for convenient access:

    from mise_bootstrap.core.models import Action, Receipt, BootstrapConfig
"""

from mise_bootstrap.core.models.action import Action, Receipt
from mise_bootstrap.core.models.config import BootstrapConfig, BrewLocation, NamedTool
from mise_bootstrap.core.models.manifest import ToolManifest

__all__ = [
    # action.py
    "Action",
    # config.py
    "BootstrapConfig",
    "BrewLocation",
    "NamedTool",
    "Receipt",
    # manifest.py
    "ToolManifest",
]
