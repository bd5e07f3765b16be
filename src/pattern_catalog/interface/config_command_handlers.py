"""Configuration command handlers."""

import argparse
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from pattern_catalog.bootstrap import Application


def handle_show_config(args: argparse.Namespace, app: "Application") -> Dict[str, Any]:
    """Handle show configuration operations."""
    return {
        "config_file": app.config_manager.config_file,
        "config": app.config_manager.to_dict(),
    }
