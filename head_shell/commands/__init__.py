"""
Command registry.

Each command module registers its entry point with ``register_command``.
``load_all_commands`` imports every module in this package so that the
registry is populated before lookups.
"""

import importlib
import pkgutil
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

_HELPER_MODULES = {'base'}


def register_command(*names: str):
    """
    Register the decorated function under one or more command names.

    Example:
        @register_command('head')
        def cmd_head(process):
            return 0
    """
    def decorator(func: Callable) -> Callable:
        for name in names:
            BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import all command modules and return the populated registry."""
    for module_info in pkgutil.iter_modules(__path__):
        if module_info.name in _HELPER_MODULES:
            continue
        importlib.import_module(f"{__name__}.{module_info.name}")
    return BUILTINS


__all__ = ['BUILTINS', 'register_command', 'load_all_commands']
