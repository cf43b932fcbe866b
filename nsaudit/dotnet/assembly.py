"""Read declared namespaces from a compiled .NET assembly."""

from __future__ import annotations

import logging

import dnfile
import pefile

from nsaudit.config import AssemblyScan

logger = logging.getLogger(__name__)


class AssemblyLoadError(Exception):
    """The assembly could not be opened or has no readable metadata."""


def _heap_string(value: object) -> str | None:
    """Return the text of a metadata string heap entry.

    Older dnfile releases hand back plain ``str``; newer ones wrap heap
    entries in an object exposing ``.value`` (``None`` when the bytes
    could not be decoded).
    """
    if value is None or isinstance(value, str):
        return value
    if hasattr(value, "value"):
        text = value.value
        if text is None and getattr(value, "raw_data", None):
            raise ValueError(f"undecodable heap string {bytes(value.raw_data)!r}")
        return text
    return str(value)


def _type_rows(pe: dnfile.dnPE) -> list:
    """Return the TypeDef rows of a loaded assembly."""
    if pe.net is None:
        raise AssemblyLoadError("file has no CLR header (not a .NET assembly)")
    if pe.net.mdtables is None:
        raise AssemblyLoadError("metadata tables could not be read")

    table = pe.net.mdtables.TypeDef
    if table is None:
        return []
    return list(table.rows)


def read_namespaces(pe: dnfile.dnPE) -> AssemblyScan:
    """Collect the namespaces of every readable type in ``pe``.

    Rows whose namespace cannot be read are counted as skipped and the
    rest are used. Nested types have an empty namespace in metadata and
    inherit their enclosing type's, so they add nothing here.
    """
    scan = AssemblyScan()
    seen: set[str] = set()

    for index, row in enumerate(_type_rows(pe), start=1):
        try:
            namespace = _heap_string(row.TypeNamespace)
        except (AttributeError, IndexError, ValueError) as e:
            scan.skipped_types += 1
            logger.debug(f"Skipping TypeDef row {index}: {e}")
            continue

        scan.type_count += 1
        if namespace:
            seen.add(namespace)

    scan.namespaces = sorted(seen)
    return scan


def scan_assembly(assembly_path: str) -> AssemblyScan:
    """Load an assembly and return its namespaces.

    Never raises for a bad assembly: a file that cannot be loaded at all
    produces an empty scan with ``error`` set.
    """
    try:
        pe = dnfile.dnPE(assembly_path)
    except (pefile.PEFormatError, OSError) as e:
        logger.debug(f"Failed to open {assembly_path}: {e}")
        return AssemblyScan(error=str(e))

    try:
        scan = read_namespaces(pe)
    except AssemblyLoadError as e:
        logger.debug(f"Failed to read metadata from {assembly_path}: {e}")
        return AssemblyScan(error=str(e))
    finally:
        pe.close()

    logger.debug(
        f"Read {scan.type_count} types ({scan.skipped_types} skipped) "
        f"and {len(scan.namespaces)} namespaces from {assembly_path}"
    )
    return scan
