"""Coverage of assembly namespaces by a list of file namespaces."""

from __future__ import annotations

from collections.abc import Iterable


def is_covered(namespace: str, file_namespaces: Iterable[str]) -> bool:
    """Check whether any file namespace equals ``namespace`` or is its parent.

    A file entry covers its whole subtree: 'A.B' covers 'A.B.C.D', but
    'A.B' does not cover 'A'.
    """
    for f in file_namespaces:
        if f == namespace:
            return True
        if namespace.startswith(f + "."):
            return True
    return False


def find_uncovered(
    leaf_namespaces: Iterable[str], file_namespaces: Iterable[str],
) -> list[str]:
    """Return the leaf namespaces no file namespace covers, sorted."""
    file_namespaces = list(file_namespaces)
    return sorted(
        ns for ns in leaf_namespaces
        if not is_covered(ns, file_namespaces)
    )
