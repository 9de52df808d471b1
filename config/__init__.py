"""
Config module - Defaults and config-file loading for SchemaSweep.
"""

from .settings import DEFAULT_SETTINGS
from .loader import SweepConfig, load_config, resolve_project_root

__all__ = [
    'DEFAULT_SETTINGS',
    'SweepConfig',
    'load_config',
    'resolve_project_root',
]
