"""Interface layer - CLI command handlers.

- Pattern operations (handle_list_patterns, handle_show_pattern, handle_run_patterns)
- Configuration operations (handle_show_config)
"""

from .config_command_handlers import handle_show_config
from .pattern_command_handlers import (
    handle_list_patterns,
    handle_run_patterns,
    handle_show_pattern,
)

__all__ = [
    "handle_list_patterns",
    "handle_show_pattern",
    "handle_run_patterns",
    "handle_show_config",
]
