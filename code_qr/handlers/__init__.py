"""Update handlers for code QR bot."""

from .start_handler import StartHandler
from .clear_handler import ClearHandler
from .code_handler import CodeHandler

# Table-driven dispatch (suckless pattern)
COMMAND_HANDLERS = {
    'start': StartHandler,
    'clear': ClearHandler,
}

__all__ = [
    'COMMAND_HANDLERS',
    'StartHandler',
    'ClearHandler',
    'CodeHandler',
]
