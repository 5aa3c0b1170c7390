"""Exceptions raised by the generator.

Recoverable conditions (malformed references, unresolved request bodies,
unsupported HTTP methods) are not errors; they degrade to fallbacks.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every fatal generator failure."""


class SpecLoadError(GeneratorError):
    """The API specification could not be read or validated."""


class ConfigurationError(GeneratorError):
    """The specification or settings cannot drive a generation run."""


class MissingServerError(ConfigurationError):
    """Operations were declared but the specification has no servers."""

    def __init__(self) -> None:
        super().__init__(
            "specification declares operations but no servers;"
            " add a 'servers' entry to derive host and base path"
        )


class ArtifactGenerationError(GeneratorError):
    """A category of generated files failed part-way through."""

    def __init__(self, category: str, cause: BaseException) -> None:
        self.category = category
        self.cause = cause
        super().__init__(f"failed while generating {category}: {cause}")
