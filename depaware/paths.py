"""Identity rules for Go import paths: canonicalization, classification, ordering."""

from __future__ import annotations

UNSAFE_PACKAGE = "unsafe"
CGO_PACKAGE = "runtime/cgo"

_EXTENDED_STD = "golang.org/x/"

# Packages that are always treated as part of the runtime.
_ALWAYS_INTERNAL = frozenset({"runtime", CGO_PACKAGE, UNSAFE_PACKAGE})


def vendorless_path(path: str) -> str:
    """Strip any vendor prefix from ``path``.

    ``a/vendor/b/vendor/c`` becomes ``c`` and ``vendor/x`` becomes ``x``.
    """
    i = path.rfind("/vendor/")
    if i >= 0:
        return path[i + len("/vendor/"):]
    if path.startswith("vendor/"):
        return path[len("vendor/"):]
    return path


def is_std_package(path: str) -> bool:
    """True for standard library and golang.org/x packages."""
    return "." not in path or "golang.org/x" in path


def is_extended_std(path: str) -> bool:
    return _EXTENDED_STD in path


def is_internal_package(path: str) -> bool:
    return (
        path.startswith("internal/")
        or path.startswith("runtime/internal/")
        or path in _ALWAYS_INTERNAL
        or ("/internal/" in path and is_std_package(path))
    )


def sort_key(path: str) -> tuple[bool, bool, str]:
    """Std first, then golang.org/x, then everything else; ties lexicographic."""
    return ("." in path, not is_extended_std(path), path)
