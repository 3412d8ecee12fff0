# githug Output Module
# Rich console output

from githug.output.console import Console, create_console, get_console

__all__ = [
    "Console",
    "create_console",
    "get_console",
]
