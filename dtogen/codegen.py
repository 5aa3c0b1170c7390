"""Render templates and write generated Java sources.

Artifact categories run in a fixed order: DTOs, base-path constants,
services, relative-URL constants. A failure aborts the run; files written
by earlier categories are left in place.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jinja2

from .config import GeneratorConfig
from .constants import build_base_path_table, build_relative_url_table
from .context_builder import build_services
from .document import ApiDocument
from .dto_builder import build_dto_models
from .errors import ArtifactGenerationError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"

DTO_TEMPLATE = "model.java.j2"
SERVICE_TEMPLATE = "service.java.j2"
BASE_PATH_URLS_TEMPLATE = "basepathurls.java.j2"
RELATIVE_URLS_TEMPLATE = "relativeurls.java.j2"

BASE_PATH_URLS_CLASS = "BasePathURLs"
RELATIVE_URLS_CLASS = "RelativeURLs"


def _lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


EMPTY_IDENTIFIER = "ROOT"

JAVA_KEYWORDS: frozenset[str] = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
    "var", "record", "yield", "_",
})


def _identifier(value: str) -> str:
    """Turn text into a legal Java identifier.

    Disallowed characters become underscores, a leading digit gets an
    underscore prefix, reserved words get an underscore suffix, and empty
    input becomes ``ROOT``.
    """
    name = re.sub(r"\W", "_", value)
    if not name:
        return EMPTY_IDENTIFIER
    if name[:1].isdigit():
        return f"_{name}"
    if name in JAVA_KEYWORDS:
        return f"{name}_"
    return name


def _java_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _javadoc(value: str) -> str:
    return " ".join(value.replace("*/", "*&#47;").split())


def _pascal(value: str) -> str:
    """SCREAMING_SNAKE text to PascalCase."""
    return "".join(p[:1].upper() + p[1:].lower() for p in value.split("_") if p)


def make_environment(template_dir: Path = TEMPLATE_DIR) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["lower_first"] = _lower_first
    env.filters["identifier"] = _identifier
    env.filters["pascal"] = _pascal
    env.filters["java_string"] = _java_string
    env.filters["javadoc"] = _javadoc
    return env


def render(env: jinja2.Environment, template_name: str, context: dict[str, Any]) -> str:
    return env.get_template(template_name).render(**context)


def write_artifact(path: Path, content: str) -> bool:
    """Write UTF-8 text, overwriting any existing file.

    Returns True when the file did not exist before.
    """
    created = not path.exists()
    if created:
        logger.info("Creating new %s", path)
    else:
        logger.info("Updating existing %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return created


@dataclass
class GenerationReport:
    """Files written by a run, per category."""

    written: dict[str, list[Path]] = field(default_factory=dict)
    created: list[Path] = field(default_factory=list)

    def record(self, category: str, path: Path, created: bool) -> None:
        self.written.setdefault(category, []).append(path)
        if created:
            self.created.append(path)

    def count(self, category: str) -> int:
        return len(self.written.get(category, []))


def _generate_dtos(
    document: ApiDocument,
    config: GeneratorConfig,
    env: jinja2.Environment,
    report: GenerationReport,
) -> None:
    for model in build_dto_models(document.schemas, config):
        path = config.package_dir(model.package_name) / f"{model.class_name}.java"
        content = render(env, DTO_TEMPLATE, model.model_dump())
        report.record("DTOs", path, write_artifact(path, content))


def _generate_base_path_urls(
    document: ApiDocument,
    config: GeneratorConfig,
    env: jinja2.Environment,
    report: GenerationReport,
) -> None:
    entries = build_base_path_table(document.servers)
    context = {
        "package_name": config.constants_package,
        "class_name": BASE_PATH_URLS_CLASS,
        "servers": [e.model_dump() for e in entries],
    }
    path = config.package_dir(config.constants_package) / f"{BASE_PATH_URLS_CLASS}.java"
    report.record("BasePathURLs", path, write_artifact(path, render(env, BASE_PATH_URLS_TEMPLATE, context)))


def _generate_services(
    document: ApiDocument,
    config: GeneratorConfig,
    env: jinja2.Environment,
    report: GenerationReport,
) -> None:
    for service in build_services(document):
        context = service.model_dump()
        context.update(
            package_name=config.service_package,
            constants_package=config.constants_package,
            relative_urls_class=RELATIVE_URLS_CLASS,
        )
        path = config.package_dir(config.service_package) / f"{service.class_name}.java"
        report.record("services", path, write_artifact(path, render(env, SERVICE_TEMPLATE, context)))


def _generate_relative_urls(
    document: ApiDocument,
    config: GeneratorConfig,
    env: jinja2.Environment,
    report: GenerationReport,
) -> None:
    entries = build_relative_url_table(document.paths)
    context = {
        "package_name": config.constants_package,
        "class_name": RELATIVE_URLS_CLASS,
        "paths": [e.model_dump() for e in entries],
    }
    path = config.package_dir(config.constants_package) / f"{RELATIVE_URLS_CLASS}.java"
    report.record("RelativeURLs", path, write_artifact(path, render(env, RELATIVE_URLS_TEMPLATE, context)))


_Step = Callable[[ApiDocument, GeneratorConfig, jinja2.Environment, GenerationReport], None]

STEPS: tuple[tuple[str, _Step], ...] = (
    ("DTOs", _generate_dtos),
    ("BasePathURLs", _generate_base_path_urls),
    ("services", _generate_services),
    ("RelativeURLs", _generate_relative_urls),
)


def generate(
    document: ApiDocument,
    config: GeneratorConfig,
    env: jinja2.Environment | None = None,
) -> GenerationReport:
    """Render and write every artifact category for the document."""
    env = env or make_environment()
    report = GenerationReport()
    for category, step in STEPS:
        logger.info("Generating %s", category)
        try:
            step(document, config, env, report)
        except Exception as exc:
            raise ArtifactGenerationError(category, exc) from exc
    return report
