"""
Documentation Scope Data Structures

Defines the value handed to the documentation-generation collaborator.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from docscope.contexts.scoping.project_data_structure import Artifact
from docscope.contexts.scoping.variants import Variant


@dataclass(frozen=True)
class Titles:
    """
    Title strings for the generated documentation.

    Attributes:
        doctitle: Title placed near the top of the overview summary page
        windowtitle: Title placed in the HTML title tag
    """

    doctitle: str
    windowtitle: str


@dataclass(frozen=True)
class DocumentationScope:
    """
    Resolved inputs for one documentation pass over one project.

    Attributes:
        variant: Variant the scope was resolved for
        source_roots: Source roots to document, in declared order
        build_output_dirs: Compiled class directories added to the classpath
        classpath_artifacts: Dependency artifacts on the classpath, sorted by identity
        output_directory: Where the documentation tool writes its output
        resource_directory: Extra documentation resources (package.html, images, ...)
        overview_file: Overview page source, or None when disabled
        titles: Document and window titles
        classifier: Classifier of the archive the output gets bundled into
    """

    variant: Variant
    source_roots: Tuple[str, ...]
    build_output_dirs: Tuple[str, ...]
    classpath_artifacts: Tuple[Artifact, ...]
    output_directory: Path
    resource_directory: Path
    overview_file: Optional[Path]
    titles: Titles
    classifier: str

    @property
    def has_sources(self) -> bool:
        return bool(self.source_roots)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dict of strings and lists (for YAML/JSON display).

        Returns:
            Dict with one key per scope field
        """
        return {
            "variant": self.variant.value,
            "source_roots": list(self.source_roots),
            "build_output_dirs": list(self.build_output_dirs),
            "classpath_artifacts": [str(a) for a in self.classpath_artifacts],
            "output_directory": str(self.output_directory),
            "resource_directory": str(self.resource_directory),
            "overview_file": str(self.overview_file) if self.overview_file else None,
            "doctitle": self.titles.doctitle,
            "windowtitle": self.titles.windowtitle,
            "classifier": self.classifier,
        }
