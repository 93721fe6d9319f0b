"""Mode manager, command/insert modes, and dispatch plumbing."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .mode_manager import ModeManager, create_default_manager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "InsertMode",
    "CommandMode",
    "ModeManager",
    "create_default_manager",
]
