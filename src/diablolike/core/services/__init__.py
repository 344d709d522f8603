"""
Core service exports.

Provides configuration loading, input snapshots and event dispatch.
"""

from diablolike.core.services.config_manager import load_config
from diablolike.core.services.event_manager import EventManager
from diablolike.core.services.input_manager import InputManager, InputSnapshot

__all__ = [
    'load_config',
    'EventManager',
    'InputManager',
    'InputSnapshot',
]
