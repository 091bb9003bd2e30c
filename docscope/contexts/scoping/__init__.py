"""
Scoping Context

Responsibilities:
- Decides which source roots a documentation pass covers (aggregator exception,
  execution-project substitution)
- Selects class output directories and classpath artifacts per variant
- Derives output directory, resource directory, overview page and titles
- Applies build-configuration overrides to variant defaults

Owns: DocumentationScope resolution, variant policies
Never: Resolves artifacts, parses build descriptors, or runs the documentation tool
"""

from docscope.contexts.scoping.artifact_filter import filter_classpath_artifacts
from docscope.contexts.scoping.config_resolver import (
    ScopeOverrides,
    apply_overrides,
    load_scope_overrides,
)
from docscope.contexts.scoping.exceptions import (
    DocScopeError,
    InvalidConfigError,
    InvalidInputError,
    UnsupportedPackagingError,
)
from docscope.contexts.scoping.project_data_structure import (
    Artifact,
    Project,
    ResolutionResult,
)
from docscope.contexts.scoping.scope_data_structure import DocumentationScope, Titles
from docscope.contexts.scoping.scope_resolver import (
    effective_packaging,
    resolve_build_output_dirs,
    resolve_output_directory,
    resolve_overview,
    resolve_resource_directory,
    resolve_source_roots,
)
from docscope.contexts.scoping.variant_policy import (
    VARIANT_POLICIES,
    VariantPolicy,
    get_variant_policy,
)
from docscope.contexts.scoping.variants import Variant

__all__ = [
    # Entry point
    "VariantPolicy",
    "VARIANT_POLICIES",
    "get_variant_policy",
    "Variant",
    # Leaf resolvers
    "effective_packaging",
    "resolve_source_roots",
    "resolve_build_output_dirs",
    "resolve_output_directory",
    "resolve_resource_directory",
    "resolve_overview",
    "filter_classpath_artifacts",
    # Configuration overrides
    "ScopeOverrides",
    "apply_overrides",
    "load_scope_overrides",
    # Data structures
    "Artifact",
    "Project",
    "ResolutionResult",
    "DocumentationScope",
    "Titles",
    # Errors
    "DocScopeError",
    "InvalidInputError",
    "InvalidConfigError",
    "UnsupportedPackagingError",
]
