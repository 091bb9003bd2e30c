"""
Integration tests for the resolve_scope CLI - YAML in, scope out.
"""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from omegaconf import OmegaConf
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "resolve_scope.py"


def _load_cli():
    spec = importlib.util.spec_from_file_location("resolve_scope", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app


app = _load_cli()
runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # The CLI installs file sinks under tmp_path
    logger.remove()


@pytest.fixture
def inputs(tmp_path):
    project_file = tmp_path / "project.yaml"
    project_file.write_text(
        "artifact_id: acme-core\n"
        "name: Acme Core\n"
        "version: 1.2.0\n"
        "packaging: jar\n"
        "basedir: /work/acme-core\n"
        "test_source_roots: [src/test/java]\n"
        "main_output_directory: target/classes\n"
        "test_output_directory: target/test-classes\n"
    )
    resolution_file = tmp_path / "resolution.yaml"
    resolution_file.write_text(
        "artifacts:\n"
        "  - com.acme:acme-api:1.0\n"
        "  - {coordinates: 'junit:junit:4.13.2', scope: test}\n"
    )
    return project_file, resolution_file


def _scope_from_stdout(result) -> dict:
    return OmegaConf.to_container(OmegaConf.create(result.stdout))


@pytest.mark.integration
def test_resolve_test_variant(inputs, tmp_path):
    """Test resolving the TEST scope of a jar project."""
    project_file, resolution_file = inputs

    result = runner.invoke(
        app,
        [
            "resolve",
            str(project_file),
            str(resolution_file),
            "--variant",
            "test",
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 0, result.output
    scope = _scope_from_stdout(result)
    assert scope["source_roots"] == ["src/test/java"]
    assert scope["build_output_dirs"] == ["target/classes", "target/test-classes"]
    assert scope["classpath_artifacts"] == ["com.acme:acme-api:1.0", "junit:junit:4.13.2"]
    assert scope["classifier"] == "test-javadoc"
    assert (tmp_path / "logs" / "scope.log").exists()
    assert "[scope]" in result.stderr


@pytest.mark.integration
def test_resolve_with_overrides(inputs, tmp_path):
    """Test that an overrides file replaces defaults."""
    project_file, resolution_file = inputs
    overrides_file = tmp_path / "overrides.yaml"
    overrides_file.write_text("main:\n  doctitle: Acme Platform\n")

    result = runner.invoke(
        app,
        [
            "resolve",
            str(project_file),
            str(resolution_file),
            "--overrides",
            str(overrides_file),
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 0, result.output
    scope = _scope_from_stdout(result)
    assert scope["doctitle"] == "Acme Platform"
    assert scope["windowtitle"] == "Acme Core 1.2.0 API"
    assert scope["classpath_artifacts"] == ["com.acme:acme-api:1.0"]


@pytest.mark.integration
def test_failed_resolution_exits_with_error(inputs, tmp_path):
    """Test that a failed resolution aborts with exit code 1."""
    project_file, _ = inputs
    failed_file = tmp_path / "failed.yaml"
    failed_file.write_text("complete: false\nerrors: [connection refused]\n")

    result = runner.invoke(
        app,
        ["resolve", str(project_file), str(failed_file), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 1
    assert "ERROR:" in result.output
    assert "connection refused" in result.output
    assert result.stdout == ""
    logger.remove()  # flush and close the file sink
    log_text = (tmp_path / "logs" / "scope.log").read_text()
    assert "[scope] Resolution aborted for project.yaml" in log_text


@pytest.mark.integration
def test_unknown_variant_exits_with_error(inputs, tmp_path):
    """Test that an unknown variant name aborts with exit code 1."""
    project_file, resolution_file = inputs

    result = runner.invoke(
        app,
        [
            "resolve",
            str(project_file),
            str(resolution_file),
            "--variant",
            "site",
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 1
    assert "Unknown variant" in result.output


@pytest.mark.integration
def test_variants_command():
    """Test listing variant policy defaults."""
    result = runner.invoke(app, ["variants"])

    assert result.exit_code == 0
    assert "testapidocs" in result.output
    assert "test-javadoc" in result.output


@pytest.mark.integration
def test_stdout_is_pure_yaml(inputs, tmp_path):
    """Test that stdout carries only the scope document, even with --verbose."""
    project_file, resolution_file = inputs

    result = runner.invoke(
        app,
        [
            "resolve",
            str(project_file),
            str(resolution_file),
            "--verbose",
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("variant: main")
    assert "\x1b[" not in result.stdout
    assert "[scope]" not in result.stdout
    assert "Python:" not in result.stdout
    assert set(_scope_from_stdout(result)) == {
        "variant",
        "source_roots",
        "build_output_dirs",
        "classpath_artifacts",
        "output_directory",
        "resource_directory",
        "overview_file",
        "doctitle",
        "windowtitle",
        "classifier",
    }
    assert "[scope] Resolving main documentation scope" in result.stderr


@pytest.mark.integration
def test_unquoted_version_exits_with_error(inputs, tmp_path):
    """Test that `version: 1.10` is reported instead of resolving as 1.1."""
    _, resolution_file = inputs
    project_file = tmp_path / "decimal.yaml"
    project_file.write_text("artifact_id: acme-core\nversion: 1.10\n")

    result = runner.invoke(
        app,
        ["resolve", str(project_file), str(resolution_file), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 1
    assert "quoted" in result.stderr
    assert result.stdout == ""


@pytest.mark.integration
def test_numeric_project_name(inputs, tmp_path):
    """Test that a numeric project name resolves to a string title."""
    _, resolution_file = inputs
    project_file = tmp_path / "game.yaml"
    project_file.write_text("artifact_id: game\nname: 2048\nversion: '1.0'\n")

    result = runner.invoke(
        app,
        ["resolve", str(project_file), str(resolution_file), "--log-dir", str(tmp_path / "logs")],
    )

    assert result.exit_code == 0, result.output
    assert _scope_from_stdout(result)["doctitle"] == "2048 1.0 API"
