"""Entry point: python -m dtogen

Reads the OpenAPI spec and writes DTO, service and URL constant classes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .codegen import STEPS, generate
from .config import DEFAULT_BASE_PACKAGE, DEFAULT_SPEC_PATH, GeneratorConfig
from .errors import GeneratorError
from .loader import load_document


@click.command()
@click.option(
    "--spec", "spec", default=str(DEFAULT_SPEC_PATH), show_default=True,
    envvar="DTOGEN_SPEC", help="OpenAPI spec file (JSON or YAML) or http(s) URL.",
)
@click.option(
    "-o", "--output", default=".", show_default=True, envvar="DTOGEN_OUTPUT",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project root; sources go under src/main/java.",
)
@click.option(
    "--base-package", default=DEFAULT_BASE_PACKAGE, show_default=True,
    envvar="DTOGEN_BASE_PACKAGE", help="Java package the generated classes live under.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log skipped methods and fallbacks.")
def main(spec: str, output: Path, base_package: str, verbose: bool) -> None:
    """Generate Java DTOs, services and URL constants from an OpenAPI spec."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = GeneratorConfig(output_dir=output, base_package=base_package)

    try:
        document = load_document(spec)
        report = generate(document, config)
    except GeneratorError as exc:
        raise click.ClickException(str(exc)) from exc

    summary = ", ".join(f"{report.count(category)} {category}" for category, _ in STEPS)
    click.echo(f"Generated {summary} in {output} ({len(report.created)} new files)")


if __name__ == "__main__":
    main()
