"""Loader registry."""

from __future__ import annotations

from depaware.loader.base import BaseLoader, iter_packages
from depaware.loader.go_list import GoListLoader
from depaware.loader.static import StaticLoader

_LOADERS: dict[str, type[BaseLoader]] = {
    "go": GoListLoader,
}


def get_loader(name: str = "go", **kwargs) -> BaseLoader:
    """Instantiate a registered loader by name."""
    loader_cls = _LOADERS.get(name)
    if loader_cls is None:
        raise ValueError(f"Unknown loader: {name}")
    return loader_cls(**kwargs)


__all__ = [
    "BaseLoader",
    "GoListLoader",
    "StaticLoader",
    "get_loader",
    "iter_packages",
]
