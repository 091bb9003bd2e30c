"""
Scope Resolver

Pure functions mapping a project and a variant to the directories a
documentation pass needs: source roots, class output directories, the
documentation output directory, the resource directory and the overview page.

Source roots and packaging are answered by the *authoritative* project: the
execution project when one is set (reactor/forked passes), the nominal project
otherwise. Class output directories always come from the nominal project.
"""

from pathlib import Path
from typing import Optional, Tuple

from docscope.contexts.scoping.defaults import (
    AGGREGATOR_PACKAGING,
    DEFAULT_BUILD_DIRECTORY,
    DEFAULT_PACKAGING,
    OVERVIEW_FILENAME,
)
from docscope.contexts.scoping.exceptions import InvalidInputError
from docscope.contexts.scoping.logger import _log_debug
from docscope.contexts.scoping.project_data_structure import Project
from docscope.contexts.scoping.variants import Variant, get_variant_settings


def require_project(project: Optional[Project]) -> Project:
    if project is None:
        raise InvalidInputError(
            "A project is required to resolve a documentation scope", field="project"
        )
    return project


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def authoritative_project(project: Project) -> Project:
    """Return the execution project when one is set, else the project itself."""
    require_project(project)
    if project.execution_project is not None:
        return project.execution_project
    return project


def effective_packaging(project: Project) -> str:
    """
    Packaging of the authoritative project, lower-cased.

    Args:
        project: Nominal project (may carry an execution project)

    Returns:
        Normalized packaging string (e.g., "jar", "pom")
    """
    packaging = authoritative_project(project).packaging
    if _is_blank(packaging):
        return DEFAULT_PACKAGING
    # Plain lower() keeps the comparison locale-independent
    return packaging.strip().lower()


def is_aggregator(project: Project) -> bool:
    return effective_packaging(project) == AGGREGATOR_PACKAGING


def resolve_source_roots(project: Project, variant: Variant) -> Tuple[str, ...]:
    """
    Source roots to document for a variant.

    An aggregator module has no sources of its own, whatever it declares.
    Otherwise the variant's declared roots of the authoritative project are
    returned verbatim: order drives package discovery in the documentation tool.

    Args:
        project: Nominal project
        variant: MAIN or TEST

    Returns:
        Tuple of source root paths in declared order

    Raises:
        InvalidInputError: If project is None or variant is unknown
    """
    settings = get_variant_settings(variant)
    source_project = authoritative_project(project)

    if source_project is not project:
        _log_debug(
            f"Using execution project {source_project.artifact_id} for source roots "
            f"of {project.artifact_id}"
        )

    if is_aggregator(project):
        _log_debug(f"{project.artifact_id}: aggregator packaging, no source roots")
        return ()

    return tuple(settings.source_roots(source_project))


def resolve_build_output_dirs(project: Project, variant: Variant) -> Tuple[str, ...]:
    """
    Class output directories for classpath augmentation.

    Always read from the nominal project. MAIN yields the main output
    directory; TEST yields main then test. Blank entries are skipped.

    Args:
        project: Nominal project
        variant: MAIN or TEST

    Returns:
        Tuple of directory paths (possibly empty)
    """
    settings = get_variant_settings(variant)
    require_project(project)
    return tuple(d for d in settings.output_dirs(project) if not _is_blank(d))


def _anchor(project: Project, path: Path) -> Path:
    if project.basedir is not None and not path.is_absolute():
        return project.basedir / path
    return path


def resolve_build_directory(project: Project) -> Path:
    require_project(project)
    build_directory = project.build_directory
    if _is_blank(build_directory):
        build_directory = DEFAULT_BUILD_DIRECTORY
    return _anchor(project, Path(build_directory))


def resolve_output_directory(project: Project, variant: Variant) -> Path:
    """
    Documentation output directory: a variant-specific subdirectory of the
    build directory ("apidocs" for MAIN, "testapidocs" for TEST).
    """
    settings = get_variant_settings(variant)
    return resolve_build_directory(project) / settings.output_dir_name


def resolve_resource_directory(project: Project, variant: Variant) -> Path:
    """Conventional documentation resources directory (package.html, images...)."""
    settings = get_variant_settings(variant)
    require_project(project)
    return _anchor(project, Path(settings.resource_dir))


def resolve_overview(project: Project, variant: Variant) -> Optional[Path]:
    """
    Conventional overview page location.

    The file is not checked for existence; the documentation collaborator
    decides what to do with a missing overview.
    """
    return resolve_resource_directory(project, variant) / OVERVIEW_FILENAME
