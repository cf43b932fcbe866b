"""nsaudit CLI - Report assembly namespaces missing from a namespace list."""

from __future__ import annotations

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from nsaudit.config import AuditConfig, AuditResult
from nsaudit.output import make_console, render_report
from nsaudit.pipeline import run_pipeline


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run_with_progress(config: AuditConfig) -> AuditResult:
    """Run the pipeline with a Rich spinner on stderr."""
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=Console(stderr=True),
        transient=True,
    ) as progress:
        task = progress.add_task("Initialising...", total=None)

        def on_phase(name, label):
            progress.update(task, description=label)

        return run_pipeline(config, progress_callback=on_phase)


@click.command()
@click.argument("assembly", type=click.Path())
@click.argument("namespace_file", type=click.Path())
@click.option("--root", "root_namespace", default="", help="Only audit namespaces under this root")
@click.option("--exclude", multiple=True, help="Namespace prefix to leave out (repeatable)")
@click.option("--verbose", is_flag=True, help="Debug logging and per-phase timing breakdown")
def cli(
    assembly: str,
    namespace_file: str,
    root_namespace: str,
    exclude: tuple[str, ...],
    verbose: bool,
) -> None:
    """Report namespaces of ASSEMBLY not covered by NAMESPACE_FILE.

    NAMESPACE_FILE is scanned for namespace:'A.B' and namespace==A.B
    tokens. A token covers its namespace and everything below it.
    """
    console = make_console()

    if not os.path.isfile(assembly):
        console.print(f"Assembly not found: {assembly}")
        sys.exit(1)
    if not os.path.isfile(namespace_file):
        console.print(f"File not found: {namespace_file}")
        sys.exit(1)

    _configure_logging(verbose)

    config = AuditConfig(
        assembly_path=assembly,
        namespace_file=namespace_file,
        root_namespace=root_namespace.strip(),
        excluded_namespaces=[ex.strip() for ex in exclude if ex.strip()],
        verbose=verbose,
    )

    if Console(stderr=True).is_terminal:
        result = _run_with_progress(config)
    else:
        result = run_pipeline(config)

    render_report(result, console, verbose=verbose)


if __name__ == "__main__":
    cli()
