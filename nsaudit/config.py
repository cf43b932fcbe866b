"""Core data types and configuration for nsaudit runs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AuditConfig:
    assembly_path: str = ""
    namespace_file: str = ""
    root_namespace: str = ""
    excluded_namespaces: list[str] = field(default_factory=list)
    verbose: bool = False


@dataclass
class AssemblyScan:
    """Namespaces read from an assembly's TypeDef table."""
    namespaces: list[str] = field(default_factory=list)
    type_count: int = 0
    skipped_types: int = 0
    error: str | None = None

    @property
    def partial(self) -> bool:
        return self.skipped_types > 0


@dataclass
class AuditResult:
    assembly_name: str = ""
    root_namespace: str = ""
    scan: AssemblyScan = field(default_factory=AssemblyScan)
    filtered_namespaces: list[str] = field(default_factory=list)
    leaf_namespaces: list[str] = field(default_factory=list)
    file_namespaces: list[str] = field(default_factory=list)
    uncovered: list[str] = field(default_factory=list)
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def all_namespaces(self) -> list[str]:
        return self.scan.namespaces
