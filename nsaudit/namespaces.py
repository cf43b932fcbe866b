"""Namespace set filtering: root restriction and leaf selection."""

from __future__ import annotations

from collections.abc import Iterable


def filter_under_root(
    namespaces: Iterable[str], root: str, excluded: Iterable[str] = (),
) -> list[str]:
    """Keep namespaces below ``root`` that match no excluded prefix.

    A namespace is below the root when it starts with ``root + "."``, so
    the root itself is dropped. An empty root places no restriction.
    Exclusions are plain prefixes with no dot boundary.
    """
    excluded = tuple(excluded)
    prefix = root + "." if root else ""

    kept = []
    for ns in namespaces:
        if not ns.startswith(prefix):
            continue
        if any(ns.startswith(ex) for ex in excluded):
            continue
        kept.append(ns)
    return kept


def leaf_namespaces(namespaces: Iterable[str]) -> list[str]:
    """Drop every namespace that is a dotted-prefix ancestor of another.

    ``{"A", "A.B", "A.B.C", "D"}`` becomes ``["A.B.C", "D"]``. Input order
    is preserved.
    """
    ns_list = list(namespaces)
    return [
        ns for ns in ns_list
        if not any(
            len(other) > len(ns) and other.startswith(ns + ".")
            for other in ns_list
        )
    ]
