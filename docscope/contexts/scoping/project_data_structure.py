"""
Project Data Structures

Defines the read-only build metadata consumed by the scoping context:
resolved artifacts, the artifact resolution result, and the project itself.
Instances are built by an orchestrator (or the Intake context) and are never
mutated during scope resolution.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from docscope.contexts.scoping.defaults import (
    DEFAULT_ARTIFACT_TYPE,
    DEFAULT_BUILD_DIRECTORY,
    DEFAULT_PACKAGING,
    NON_CLASSPATH_TYPES,
    SCOPE_COMPILE,
)


def _freeze(instance, *names: str) -> None:
    """Coerce list-valued fields of a frozen dataclass to tuples."""
    for name in names:
        value = getattr(instance, name)
        if not isinstance(value, tuple):
            object.__setattr__(instance, name, tuple(value))


@dataclass(frozen=True)
class Artifact:
    """
    A resolved dependency artifact.

    Attributes:
        group_id: Group coordinate (e.g., "org.slf4j")
        artifact_id: Artifact coordinate (e.g., "slf4j-api")
        version: Resolved version
        classifier: Optional classifier (e.g., "tests", "sources")
        type: Artifact type, used to decide classpath membership (e.g., "jar", "pom")
        scope: Dependency scope the artifact was reached through
        added_to_classpath: Explicit classpath membership; None derives it from type
    """

    group_id: str
    artifact_id: str
    version: str
    classifier: Optional[str] = None
    type: str = DEFAULT_ARTIFACT_TYPE
    scope: str = SCOPE_COMPILE
    added_to_classpath: Optional[bool] = None

    @property
    def identity(self) -> Tuple[str, str, str, Optional[str], str]:
        """Coordinates that identify the artifact regardless of scope."""
        return (self.group_id, self.artifact_id, self.version, self.classifier, self.type)

    @property
    def sort_key(self) -> Tuple[str, str, str, bool, str, str]:
        # None classifiers sort before any named classifier
        return (
            self.group_id,
            self.artifact_id,
            self.version,
            self.classifier is not None,
            self.classifier or "",
            self.type,
        )

    @property
    def is_added_to_classpath(self) -> bool:
        if self.added_to_classpath is not None:
            return self.added_to_classpath
        return self.type.lower() not in NON_CLASSPATH_TYPES

    def __str__(self) -> str:
        coordinates = [self.group_id, self.artifact_id, self.version]
        if self.classifier:
            coordinates.append(self.classifier)
        return ":".join(coordinates)


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of upstream dependency resolution for one project.

    docscope only filters this result; it never resolves anything itself.

    Attributes:
        artifacts: Every artifact the resolver produced, in resolver order
        missing_artifacts: Artifacts the resolver could not fetch
        errors: Error messages reported by the resolver
        complete: False when the resolver stopped before finishing
    """

    artifacts: Tuple[Artifact, ...] = ()
    missing_artifacts: Tuple[Artifact, ...] = ()
    errors: Tuple[str, ...] = ()
    complete: bool = True

    def __post_init__(self):
        _freeze(self, "artifacts", "missing_artifacts", "errors")

    @property
    def is_failed(self) -> bool:
        return not self.complete or bool(self.missing_artifacts) or bool(self.errors)


@dataclass(frozen=True)
class Project:
    """
    A build module descriptor, already parsed by the orchestrator.

    Attributes:
        group_id: Group coordinate
        artifact_id: Artifact coordinate
        version: Project version
        name: Human-readable name (falls back to artifact_id)
        packaging: Packaging type; "pom" marks an aggregator module
        basedir: Module root directory, used to anchor conventional paths
        build_directory: Build output root (relative paths are anchored at basedir)
        main_source_roots: Declared main compile source roots, in declared order
        test_source_roots: Declared test compile source roots, in declared order
        main_output_directory: Main classes directory (blank = not configured)
        test_output_directory: Test classes directory (blank = not configured)
        execution_project: Module actually processed during a reactor/forked pass
    """

    artifact_id: str
    group_id: str = ""
    version: str = ""
    name: Optional[str] = None
    packaging: str = DEFAULT_PACKAGING
    basedir: Optional[Path] = None
    build_directory: str = DEFAULT_BUILD_DIRECTORY
    main_source_roots: Tuple[str, ...] = field(default_factory=tuple)
    test_source_roots: Tuple[str, ...] = field(default_factory=tuple)
    main_output_directory: Optional[str] = None
    test_output_directory: Optional[str] = None
    execution_project: Optional["Project"] = None

    def __post_init__(self):
        _freeze(self, "main_source_roots", "test_source_roots")
        if self.basedir is not None and not isinstance(self.basedir, Path):
            object.__setattr__(self, "basedir", Path(self.basedir))

    @property
    def display_name(self) -> str:
        return self.name or self.artifact_id
