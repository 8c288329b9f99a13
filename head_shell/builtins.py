"""
Built-in command lookup.

Command implementations live in the commands/ directory. This module loads
them and exposes the registry.
"""

from .commands import load_all_commands

BUILTINS = load_all_commands()


def get_builtin(command: str):
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('head')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)
