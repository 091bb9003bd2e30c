"""Unit tests for build-configuration overrides."""

from pathlib import Path

import pytest

from docscope.contexts.scoping.config_resolver import (
    ScopeOverrides,
    apply_overrides,
    load_scope_overrides,
    overrides_from_dict,
)
from docscope.contexts.scoping.exceptions import InvalidConfigError
from docscope.contexts.scoping.scope_data_structure import DocumentationScope, Titles
from docscope.contexts.scoping.variants import Variant


@pytest.fixture
def scope():
    return DocumentationScope(
        variant=Variant.MAIN,
        source_roots=("src/main/java",),
        build_output_dirs=("target/classes",),
        classpath_artifacts=(),
        output_directory=Path("target/apidocs"),
        resource_directory=Path("src/main/javadoc"),
        overview_file=Path("src/main/javadoc/overview.html"),
        titles=Titles(doctitle="Acme 1.0 API", windowtitle="Acme 1.0 API"),
        classifier="javadoc",
    )


@pytest.mark.unit
def test_flat_overrides_apply_to_every_variant():
    """Test that top-level keys apply regardless of variant."""
    data = {"doctitle": "Acme"}

    assert overrides_from_dict(data, Variant.MAIN).doctitle == "Acme"
    assert overrides_from_dict(data, Variant.TEST).doctitle == "Acme"


@pytest.mark.unit
def test_variant_section_overrides_flat_keys():
    """Test that a variant section wins over flat keys."""
    data = {"doctitle": "Acme", "test": {"doctitle": "Acme Tests"}}

    assert overrides_from_dict(data, Variant.MAIN).doctitle == "Acme"
    assert overrides_from_dict(data, Variant.TEST).doctitle == "Acme Tests"


@pytest.mark.unit
def test_unknown_keys_raise():
    """Test that typos in override keys are reported."""
    with pytest.raises(InvalidConfigError, match="doctitel"):
        overrides_from_dict({"doctitel": "Acme"}, Variant.MAIN)

    with pytest.raises(InvalidConfigError):
        overrides_from_dict({"test": {"outputdir": "x"}}, Variant.TEST)


@pytest.mark.unit
def test_load_overrides_from_yaml(tmp_path):
    """Test loading overrides with OmegaConf interpolation."""
    config = tmp_path / "docscope.yaml"
    config.write_text(
        "docs_root: /srv/docs\n"
        "main:\n"
        "  output_directory: ${docs_root}/api\n"
        "test:\n"
        "  output_directory: ${docs_root}/test-api\n"
        "  overview: ''\n"
    )

    # docs_root is not an override key
    with pytest.raises(InvalidConfigError):
        load_scope_overrides(config, Variant.MAIN)

    config.write_text(
        "main:\n"
        "  output_directory: /srv/docs/api\n"
        "test:\n"
        "  output_directory: /srv/docs/test-api\n"
        "  overview: ''\n"
        "  windowtitle: ${test.output_directory}\n"
    )

    main = load_scope_overrides(config, Variant.MAIN)
    test = load_scope_overrides(config, "test")

    assert main == ScopeOverrides(output_directory="/srv/docs/api")
    assert test.output_directory == "/srv/docs/test-api"
    assert test.overview == ""
    assert test.windowtitle == "/srv/docs/test-api"


@pytest.mark.unit
def test_load_missing_file_raises(tmp_path):
    """Test that an explicit but missing overrides file is an error."""
    with pytest.raises(InvalidConfigError):
        load_scope_overrides(tmp_path / "absent.yaml", Variant.MAIN)


@pytest.mark.unit
def test_apply_no_overrides_returns_same_scope(scope):
    """Test that empty overrides leave the scope untouched."""
    assert apply_overrides(scope, None) is scope
    assert apply_overrides(scope, ScopeOverrides()) is scope


@pytest.mark.unit
def test_apply_overrides(scope):
    """Test that overrides produce a new scope with replaced values."""
    updated = apply_overrides(
        scope, ScopeOverrides(windowtitle="Acme Docs", overview="docs/overview.html")
    )

    assert updated is not scope
    assert updated.titles == Titles(doctitle="Acme 1.0 API", windowtitle="Acme Docs")
    assert updated.overview_file == Path("docs/overview.html")
    assert scope.overview_file == Path("src/main/javadoc/overview.html")


@pytest.mark.unit
def test_blank_overview_disables_overview(scope):
    """Test that an empty overview override removes the overview page."""
    assert apply_overrides(scope, ScopeOverrides(overview="")).overview_file is None


@pytest.mark.unit
def test_relative_override_paths_are_anchored_at_basedir(scope):
    """Test that relative override paths resolve against the project basedir."""
    updated = apply_overrides(
        scope,
        ScopeOverrides(
            output_directory="build/docs",
            resource_directory="docs/res",
            overview="docs/overview.html",
        ),
        basedir=Path("/work/acme"),
    )

    assert updated.output_directory == Path("/work/acme/build/docs")
    assert updated.resource_directory == Path("/work/acme/docs/res")
    assert updated.overview_file == Path("/work/acme/docs/overview.html")


@pytest.mark.unit
def test_absolute_override_paths_ignore_basedir(scope):
    """Test that absolute override paths are used as given."""
    updated = apply_overrides(
        scope, ScopeOverrides(output_directory="/srv/docs"), basedir=Path("/work/acme")
    )

    assert updated.output_directory == Path("/srv/docs")
