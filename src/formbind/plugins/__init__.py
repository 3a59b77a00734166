"""Extension layer: formatter plugins via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from formbind.plugins.hookspecs import hookimpl
from formbind.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
