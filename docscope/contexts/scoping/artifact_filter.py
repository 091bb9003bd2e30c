"""
Artifact Filter

Reduces an already-resolved artifact set to the documentation classpath of a
variant. MAIN keeps compile-visible scopes (compile, provided, system); TEST
additionally keeps test scope. Scope sets only ever widen from MAIN to TEST, so
the TEST classpath is always a superset of the MAIN classpath.
"""

from typing import Dict, Optional, Tuple

from docscope.contexts.scoping.defaults import MAIN_CLASSPATH_SCOPES
from docscope.contexts.scoping.exceptions import InvalidInputError
from docscope.contexts.scoping.logger import _log_debug
from docscope.contexts.scoping.project_data_structure import Artifact, ResolutionResult
from docscope.contexts.scoping.variants import Variant, get_variant_settings


def check_resolution(resolution: Optional[ResolutionResult]) -> ResolutionResult:
    """
    Reject absent or failed resolution results.

    Raises:
        InvalidInputError: If resolution is None, incomplete, or reports
            missing artifacts or errors
    """
    if resolution is None:
        raise InvalidInputError("An artifact resolution result is required", field="resolution")

    if resolution.is_failed:
        reason = "incomplete" if not resolution.complete else "failed"
        raise InvalidInputError(
            f"Artifact resolution {reason}; refusing to filter a partial classpath",
            field="resolution",
            missing=[str(a) for a in resolution.missing_artifacts],
            errors=resolution.errors,
        )

    return resolution


def filter_classpath_artifacts(
    resolution: ResolutionResult, variant: Variant
) -> Tuple[Artifact, ...]:
    """
    Select the classpath artifacts of a variant.

    Args:
        resolution: Upstream resolution result (must not be failed)
        variant: MAIN or TEST

    Returns:
        Artifacts deduplicated by identity, sorted by identity. Among duplicates
        the first occurrence visible to main sources wins, else the first one.

    Raises:
        InvalidInputError: If the resolution result is absent or failed
    """
    settings = get_variant_settings(variant)
    check_resolution(resolution)

    retained: Dict[tuple, Artifact] = {}
    for artifact in resolution.artifacts:
        if not artifact.is_added_to_classpath:
            continue
        scope = (artifact.scope or "").lower()
        if scope not in settings.classpath_scopes:
            continue
        current = retained.get(artifact.identity)
        # An occurrence also visible to main sources wins over a test-only one
        if current is None or (
            (current.scope or "").lower() not in MAIN_CLASSPATH_SCOPES and scope in MAIN_CLASSPATH_SCOPES
        ):
            retained[artifact.identity] = artifact

    _log_debug(
        f"Kept {len(retained)} of {len(resolution.artifacts)} artifacts "
        f"for {settings.variant.value} classpath"
    )

    return tuple(sorted(retained.values(), key=lambda a: a.sort_key))
