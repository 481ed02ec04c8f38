"""CRUD package exports with lazy module loading.

Each module wraps the reads and single-row writes for one entity.
"""

from importlib import import_module

__all__ = ["user", "mentorship", "session", "availability"]


def __getattr__(name):
    if name in __all__:
        return import_module(f".{name}", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
