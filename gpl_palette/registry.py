"""Command auto-discovery and registration.

Scans gpl_palette/commands/ for modules that define a `command` object
of type Command. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen binaries
(where iter_modules returns nothing, so the known module list is used).
"""

import importlib
import pkgutil

from gpl_palette.core.types import Command

_registry: dict[str, Command] = {}

# Fallback for frozen binaries
_COMMAND_MODULES = [
    'add',
    'default',
    'extract',
    'remove',
    'rename',
    'set_color',
    'show',
    'swatch',
]


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import gpl_palette.commands as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _COMMAND_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'gpl_palette.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def module_for(name: str) -> object:
    """Return the module that defines command `name` (for its docstring)."""
    return importlib.import_module(get(name).module)


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()
