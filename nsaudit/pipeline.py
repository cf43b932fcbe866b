"""Sequential phase orchestrator with timing."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from nsaudit.config import AuditConfig, AuditResult
from nsaudit.coverage import find_uncovered
from nsaudit.dotnet.assembly import scan_assembly
from nsaudit.dotnet.namespace_file import read_namespace_file
from nsaudit.namespaces import filter_under_root, leaf_namespaces

logger = logging.getLogger(__name__)


_PHASE_LABELS = {
    "assembly": "Reading assembly metadata",
    "filter": "Filtering under root namespace",
    "leaves": "Selecting leaf namespaces",
    "file": "Scanning namespace file",
    "coverage": "Checking coverage",
}


def _run_assembly(config: AuditConfig, result: AuditResult) -> None:
    result.scan = scan_assembly(config.assembly_path)


def _run_filter(config: AuditConfig, result: AuditResult) -> None:
    result.filtered_namespaces = filter_under_root(
        result.all_namespaces, config.root_namespace, config.excluded_namespaces,
    )


def _run_leaves(config: AuditConfig, result: AuditResult) -> None:
    result.leaf_namespaces = leaf_namespaces(result.filtered_namespaces)


def _run_file(config: AuditConfig, result: AuditResult) -> None:
    result.file_namespaces = read_namespace_file(config.namespace_file)


def _run_coverage(config: AuditConfig, result: AuditResult) -> None:
    result.uncovered = find_uncovered(result.leaf_namespaces, result.file_namespaces)


def run_pipeline(
    config: AuditConfig,
    progress_callback=None,
) -> AuditResult:
    """Execute the five-phase audit and return the result.

    Args:
        config: Audit configuration.
        progress_callback: Optional callable(phase_name, label) invoked
            when each phase starts. Used by the CLI for Rich progress.
    """
    result = AuditResult(
        assembly_name=Path(config.assembly_path).name,
        root_namespace=config.root_namespace,
    )

    phases = [
        ("assembly", _run_assembly),
        ("filter", _run_filter),
        ("leaves", _run_leaves),
        ("file", _run_file),
        ("coverage", _run_coverage),
    ]

    for name, phase_fn in phases:
        if progress_callback:
            progress_callback(name, _PHASE_LABELS.get(name, name))
        start = time.monotonic()
        phase_fn(config, result)
        result.timings[name] = time.monotonic() - start
        logger.debug(f"Phase {name} finished in {result.timings[name] * 1000:.1f}ms")

    return result
