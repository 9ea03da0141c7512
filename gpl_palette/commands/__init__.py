"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by gpl_palette.registry.discover().

The explicit imports below ensure frozen builds include these modules.
Without them, pkgutil.iter_modules cannot find the command files at runtime.
"""

# Hidden imports: keep this list in sync with command modules
import gpl_palette.commands.add as _add  # noqa: F401
import gpl_palette.commands.default as _default  # noqa: F401
import gpl_palette.commands.extract as _extract  # noqa: F401
import gpl_palette.commands.remove as _remove  # noqa: F401
import gpl_palette.commands.rename as _rename  # noqa: F401
import gpl_palette.commands.set_color as _set_color  # noqa: F401
import gpl_palette.commands.show as _show  # noqa: F401
import gpl_palette.commands.swatch as _swatch  # noqa: F401
