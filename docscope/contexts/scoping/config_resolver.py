"""
Build-configuration overrides for documentation scopes.

The orchestrator's build configuration may replace any variant default:
output directory, doctitle, windowtitle, overview page and resource directory.
Overrides are read from YAML with OmegaConf, either flat or split per variant
(a variant section overrides flat keys):

    doctitle: "Acme Platform"         # applies to both variants
    test:
      output_directory: build/docs/test
      overview: ""                     # empty string disables the overview

Examples:
    >>> overrides = load_scope_overrides(Path("docscope.yaml"), Variant.TEST)
    >>> scope = apply_overrides(scope, overrides)
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from docscope.contexts.scoping.exceptions import InvalidConfigError
from docscope.contexts.scoping.scope_data_structure import DocumentationScope, Titles
from docscope.contexts.scoping.variants import Variant, as_variant

load_dotenv()
DEFAULT_OVERRIDES_PATH = os.getenv("DOCSCOPE_OVERRIDES_PATH")


@dataclass(frozen=True)
class ScopeOverrides:
    """
    Values supplied by the build configuration. None means "keep the default".

    Attributes:
        output_directory: Documentation output directory
        doctitle: Overview page title
        windowtitle: HTML title tag
        overview: Overview page path; "" disables the overview
        resource_directory: Documentation resources directory
    """

    output_directory: Optional[str] = None
    doctitle: Optional[str] = None
    windowtitle: Optional[str] = None
    overview: Optional[str] = None
    resource_directory: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


OVERRIDE_KEYS = {f.name for f in fields(ScopeOverrides)}
VARIANT_KEYS = {v.value for v in Variant}


def overrides_from_dict(data: Dict[str, Any], variant: Variant, config_path=None) -> ScopeOverrides:
    """
    Build ScopeOverrides for one variant from a plain dict.

    Args:
        data: Flat override keys and/or "main"/"test" sections
        variant: Variant whose section applies
        config_path: Source file, for error messages

    Returns:
        ScopeOverrides for the variant

    Raises:
        InvalidConfigError: If a key is unknown or a section is not a mapping
    """
    variant = as_variant(variant)
    if data is None:
        return ScopeOverrides()
    if not isinstance(data, dict):
        raise InvalidConfigError("Overrides must be a mapping", config_path)

    unknown = set(data) - OVERRIDE_KEYS - VARIANT_KEYS
    if unknown:
        raise InvalidConfigError(
            f"Unknown override keys: {sorted(unknown)}. Valid keys: {sorted(OVERRIDE_KEYS)}",
            config_path,
        )

    merged = {k: v for k, v in data.items() if k in OVERRIDE_KEYS}

    section = data.get(variant.value) or {}
    if not isinstance(section, dict):
        raise InvalidConfigError(f"Section '{variant.value}' must be a mapping", config_path)

    unknown = set(section) - OVERRIDE_KEYS
    if unknown:
        raise InvalidConfigError(
            f"Unknown override keys in '{variant.value}': {sorted(unknown)}", config_path
        )
    merged.update(section)

    return ScopeOverrides(**{k: None if v is None else str(v) for k, v in merged.items()})


def load_scope_overrides(config_path: Path = None, variant: Variant = Variant.MAIN) -> ScopeOverrides:
    """
    Load overrides for one variant from a YAML file.

    Args:
        config_path: Optional path to overrides file (defaults to
            DOCSCOPE_OVERRIDES_PATH; no file at all means no overrides)
        variant: Variant whose section applies

    Returns:
        ScopeOverrides for the variant

    Raises:
        InvalidConfigError: If the file is missing or malformed
    """
    if config_path is None:
        if not DEFAULT_OVERRIDES_PATH:
            return ScopeOverrides()
        config_path = Path(DEFAULT_OVERRIDES_PATH)

    config_path = Path(config_path)
    if not config_path.exists():
        raise InvalidConfigError("Overrides file not found", config_path)

    data = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    return overrides_from_dict(data, variant, config_path)


def _anchored(path: str, basedir: Optional[Path]) -> Path:
    path = Path(path)
    if basedir is not None and not path.is_absolute():
        return Path(basedir) / path
    return path


def apply_overrides(
    scope: DocumentationScope,
    overrides: Optional[ScopeOverrides],
    basedir: Optional[Path] = None,
) -> DocumentationScope:
    """
    Return a copy of scope with every supplied override applied.

    Relative override paths (output directory, resource directory, overview)
    are anchored at basedir, like the defaults they replace.

    Args:
        scope: Scope built from variant defaults
        overrides: Values from the build configuration (None = no overrides)
        basedir: Project base directory (None = keep relative paths as given)

    Returns:
        New DocumentationScope; scope itself is left untouched
    """
    if overrides is None or overrides.is_empty:
        return scope

    changes: Dict[str, Any] = {}

    if overrides.output_directory is not None:
        changes["output_directory"] = _anchored(overrides.output_directory, basedir)

    if overrides.resource_directory is not None:
        changes["resource_directory"] = _anchored(overrides.resource_directory, basedir)

    if overrides.overview is not None:
        changes["overview_file"] = (
            _anchored(overrides.overview, basedir) if overrides.overview.strip() else None
        )

    if overrides.doctitle is not None or overrides.windowtitle is not None:
        changes["titles"] = Titles(
            doctitle=overrides.doctitle if overrides.doctitle is not None else scope.titles.doctitle,
            windowtitle=(
                overrides.windowtitle
                if overrides.windowtitle is not None
                else scope.titles.windowtitle
            ),
        )

    return replace(scope, **changes)
