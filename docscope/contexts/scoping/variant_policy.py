"""
Variant Policy

The single entry point orchestrators call. A VariantPolicy binds a Variant to
its settings and composes the Scope Resolver and the Artifact Filter into a
DocumentationScope:

    policy = VARIANT_POLICIES[Variant.TEST]
    scope = policy.resolve(project, resolution)

Every call is pure and idempotent: identical inputs give equal scopes, and a
failure raises before any part of the scope is returned.
"""

from dataclasses import dataclass
from typing import Optional, Union

from docscope.contexts.scoping.artifact_filter import check_resolution, filter_classpath_artifacts
from docscope.contexts.scoping.config_resolver import ScopeOverrides, apply_overrides
from docscope.contexts.scoping.logger import log_resolution_result, log_resolution_start
from docscope.contexts.scoping.project_data_structure import Project, ResolutionResult
from docscope.contexts.scoping.scope_data_structure import DocumentationScope, Titles
from docscope.contexts.scoping.scope_resolver import (
    require_project,
    resolve_build_output_dirs,
    resolve_output_directory,
    resolve_overview,
    resolve_resource_directory,
    resolve_source_roots,
)
from docscope.contexts.scoping.variants import (
    Variant,
    VariantSettings,
    as_variant,
    get_variant_settings,
)


@dataclass(frozen=True)
class VariantPolicy:
    """
    Scope resolution for one variant.

    Attributes:
        variant: MAIN or TEST
    """

    variant: Variant

    @property
    def settings(self) -> VariantSettings:
        return get_variant_settings(self.variant)

    @property
    def classifier(self) -> str:
        return self.settings.classifier

    def default_titles(self, project: Project) -> Titles:
        """
        Default doctitle and windowtitle: "<name> <version> API" for MAIN,
        "<name> <version> Test API" for TEST.
        """
        parts = [project.display_name, project.version, self.settings.title_suffix]
        title = " ".join(p for p in parts if p)
        return Titles(doctitle=title, windowtitle=title)

    def resolve(
        self,
        project: Project,
        resolution: ResolutionResult,
        overrides: Optional[ScopeOverrides] = None,
    ) -> DocumentationScope:
        """
        Resolve the full documentation scope of a project.

        Args:
            project: Nominal project (with its execution project, if any)
            resolution: Upstream artifact resolution result
            overrides: Build-configuration values replacing variant defaults

        Returns:
            A fresh DocumentationScope

        Raises:
            InvalidInputError: If project or resolution is absent, or the
                resolution is failed or incomplete
        """
        require_project(project)
        check_resolution(resolution)

        log_resolution_start(project.display_name, self.variant.value)

        scope = DocumentationScope(
            variant=self.variant,
            source_roots=resolve_source_roots(project, self.variant),
            build_output_dirs=resolve_build_output_dirs(project, self.variant),
            classpath_artifacts=filter_classpath_artifacts(resolution, self.variant),
            output_directory=resolve_output_directory(project, self.variant),
            resource_directory=resolve_resource_directory(project, self.variant),
            overview_file=resolve_overview(project, self.variant),
            titles=self.default_titles(project),
            classifier=self.classifier,
        )
        scope = apply_overrides(scope, overrides, basedir=project.basedir)

        log_resolution_result(project.display_name, scope)
        return scope


VARIANT_POLICIES = {variant: VariantPolicy(variant) for variant in Variant}


def get_variant_policy(variant: Union[Variant, str]) -> VariantPolicy:
    """
    Look up the policy of a variant.

    Args:
        variant: Variant or its name, any case ("main", "TEST")

    Raises:
        InvalidInputError: If the name matches no variant
    """
    return VARIANT_POLICIES[as_variant(variant)]
