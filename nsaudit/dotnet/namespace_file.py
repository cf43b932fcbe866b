"""Extract namespace references from a plain text file."""

from __future__ import annotations

import re

# namespace:'Some.Namespace'   or   namespace=Some.Namespace / namespace==Some.Namespace
# Both notations are alternatives of one pattern so a file may mix them.
_NAMESPACE_RE = re.compile(
    r"namespace(?::'([^']+)'|=+([A-Za-z_][A-Za-z0-9_.]*))"
)


def extract_namespaces(text: str) -> list[str]:
    """Return the sorted, de-duplicated namespaces referenced in ``text``."""
    found: set[str] = set()
    for match in _NAMESPACE_RE.finditer(text):
        quoted, bare = match.group(1), match.group(2)
        value = (quoted if quoted is not None else bare).strip()
        if value:
            found.add(value)
    return sorted(found)


def read_namespace_file(path: str) -> list[str]:
    """Read a UTF-8 text file and extract its namespace references."""
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        content = f.read()
    return extract_namespaces(content)
