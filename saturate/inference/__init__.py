from .resolve import clashing_atoms, resolve_on, resolve, resolve_all

__all__ = [
    "clashing_atoms", "resolve_on", "resolve", "resolve_all",
]
