"""
Variant strategy table.

A project carries two halves of configuration: main and test. Each Variant
selects one half through a VariantSettings entry holding field selectors and
variant-specific defaults, so the resolvers never branch on the variant
themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Optional, Tuple, Union

from docscope.contexts.scoping.defaults import MAIN_CLASSPATH_SCOPES, TEST_CLASSPATH_SCOPES
from docscope.contexts.scoping.exceptions import InvalidInputError


class Variant(str, Enum):
    MAIN = "main"
    TEST = "test"


@dataclass(frozen=True)
class VariantSettings:
    """
    Variant-specific field selectors and defaults.

    Attributes:
        variant: The variant these settings belong to
        source_roots: Selects the authoritative source roots from a project
        output_dirs: Selects the class directories, in classpath order
        classpath_scopes: Dependency scopes retained on the classpath
        output_dir_name: Subdirectory of the build directory receiving the docs
        resource_dir: Documentation resources directory, relative to basedir
        title_suffix: Appended to "<name> <version>" for default titles
        classifier: Classifier of the documentation archive
    """

    variant: Variant
    source_roots: Callable[..., Tuple[str, ...]]
    output_dirs: Callable[..., Tuple[Optional[str], ...]]
    classpath_scopes: FrozenSet[str]
    output_dir_name: str
    resource_dir: str
    title_suffix: str
    classifier: str


VARIANT_SETTINGS = {
    Variant.MAIN: VariantSettings(
        variant=Variant.MAIN,
        source_roots=lambda p: p.main_source_roots,
        output_dirs=lambda p: (p.main_output_directory,),
        classpath_scopes=MAIN_CLASSPATH_SCOPES,
        output_dir_name="apidocs",
        resource_dir="src/main/javadoc",
        title_suffix="API",
        classifier="javadoc",
    ),
    Variant.TEST: VariantSettings(
        variant=Variant.TEST,
        source_roots=lambda p: p.test_source_roots,
        # Main classes come first: test sources reference production code
        output_dirs=lambda p: (p.main_output_directory, p.test_output_directory),
        classpath_scopes=TEST_CLASSPATH_SCOPES,
        output_dir_name="testapidocs",
        resource_dir="src/test/javadoc",
        title_suffix="Test API",
        classifier="test-javadoc",
    ),
}


def as_variant(variant: Union[Variant, str]) -> Variant:
    """
    Normalize a Variant or its name ("main"/"TEST", any case) to a Variant.

    Raises:
        InvalidInputError: If the name matches no variant
    """
    if isinstance(variant, Variant):
        return variant
    try:
        return Variant(str(variant).strip().lower())
    except ValueError:
        valid = [v.value for v in Variant]
        raise InvalidInputError(
            f"Unknown variant '{variant}'. Valid variants: {valid}", field="variant"
        ) from None


def get_variant_settings(variant: Union[Variant, str]) -> VariantSettings:
    return VARIANT_SETTINGS[as_variant(variant)]
