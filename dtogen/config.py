"""Generation settings: Java package names and output locations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SPEC_PATH = Path("src/main/resources/java/swagger.yaml")
DEFAULT_BASE_PACKAGE = "com.example"

# Maven source root, relative to the output directory
JAVA_SOURCE_ROOT = Path("src/main/java")


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generation run."""

    output_dir: Path = field(default_factory=Path)
    base_package: str = DEFAULT_BASE_PACKAGE

    @property
    def request_dto_package(self) -> str:
        return f"{self.base_package}.dto.RequestDTO"

    @property
    def response_dto_package(self) -> str:
        return f"{self.base_package}.dto.ResponseDTO"

    @property
    def service_package(self) -> str:
        return f"{self.base_package}.service"

    @property
    def constants_package(self) -> str:
        return f"{self.base_package}.constants"

    def package_dir(self, package: str) -> Path:
        """Directory holding the sources of a Java package."""
        return self.output_dir / JAVA_SOURCE_ROOT / Path(*package.split("."))
