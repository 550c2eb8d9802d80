"""
Shared Core Module
==================

Event system, configuration and process cleanup hooks.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Process hooks
from .service_registry import register_cleanup_handler, run_cleanup_handlers

# Configuration
from .configuration import (
    ConfigManager,
    SystemConfig,
    get_config_manager,
    get_config,
    ValidationLevel,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Process hooks
    "register_cleanup_handler",
    "run_cleanup_handlers",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "get_config_manager",
    "get_config",
    "ValidationLevel",
]
