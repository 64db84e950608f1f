# lexwatch/cli/commands: command modules for the lexwatch CLI.
#
# Each module in this package provides one or more CLI commands.

from .catalog_cmd import catalogs, explain
from .jobs import cancel, pending, send, watch

__all__ = [
    # catalog_cmd.py
    "catalogs",
    "explain",
    # jobs.py
    "cancel",
    "pending",
    "send",
    "watch",
]
