"""MCP tools for SaveForMe file storage.

This package contains the MCP tool implementations:
- files: save_public_file, save_private_file, list_files, get_file_url

These tools are plain functions; every public function of a listed module
is registered with the MCP server by ``saveforme_mcp.utils.register_tools``.

Example usage:
    from saveforme_mcp.tools import files

    result = files.list_files(prefix="images/")
"""

from importlib import import_module
from types import ModuleType
from typing import Dict

_MODULE_PATHS = {
    "files": "saveforme_mcp.tools.files",
}

AVAILABLE_MODULES = list(_MODULE_PATHS.keys())
__all__ = AVAILABLE_MODULES.copy()

_LOADED_MODULES: Dict[str, ModuleType] = {}


def __getattr__(name: str) -> ModuleType:
    if name not in _MODULE_PATHS:
        raise AttributeError(f"module 'saveforme_mcp.tools' has no attribute '{name}'")
    if name not in _LOADED_MODULES:
        _LOADED_MODULES[name] = import_module(_MODULE_PATHS[name])
    return _LOADED_MODULES[name]


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + AVAILABLE_MODULES)
