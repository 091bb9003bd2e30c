"""
Project and resolution loading for the Intake context.

Builds scoping-context objects from YAML descriptions of already-parsed build
data (not native build descriptors). Example project file:

    artifact_id: acme-core
    group_id: com.acme
    version: "1.2.0"
    packaging: jar
    test_source_roots: [src/test/java]
    main_output_directory: target/classes
    test_output_directory: target/test-classes
    execution_project:
      artifact_id: acme-core
      packaging: jar

Example resolution file:

    artifacts:
      - com.acme:acme-api:1.0                          # compile scope
      - {coordinates: "junit:junit:4.13.2", scope: test}
      - {group_id: org.slf4j, artifact_id: slf4j-api, version: "2.0.9", scope: provided}
    missing_artifacts: []
    errors: []
    complete: true
"""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict

from omegaconf import OmegaConf

from docscope.contexts.scoping.exceptions import InvalidConfigError
from docscope.contexts.scoping.project_data_structure import Artifact, Project, ResolutionResult

PROJECT_KEYS = {f.name for f in fields(Project)}
ARTIFACT_KEYS = {f.name for f in fields(Artifact)}
RESOLUTION_KEYS = {f.name for f in fields(ResolutionResult)}
TEXT_PROJECT_KEYS = (
    "group_id",
    "artifact_id",
    "name",
    "packaging",
    "build_directory",
    "main_output_directory",
    "test_output_directory",
)


def _load_yaml(path: Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise InvalidConfigError("File not found", path)
    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if not isinstance(data, dict):
        raise InvalidConfigError("Top level must be a mapping", path)
    return data


def _check_keys(data: Dict[str, Any], allowed: set, what: str, config_path=None) -> None:
    unknown = set(data) - allowed
    if unknown:
        raise InvalidConfigError(f"Unknown {what} keys: {sorted(unknown)}", config_path)


def _string_list(value, key: str, config_path=None) -> tuple:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidConfigError(f"'{key}' must be a list", config_path)
    return tuple(str(v) for v in value)


def _text(value, key: str, config_path=None):
    """Coerce a scalar YAML value to str (YAML reads `name: 2048` as an int)."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigError(f"'{key}' must be a string, got {value!r}", config_path)
    return str(value)


def _version(value, key: str = "version", config_path=None):
    # An unquoted 1.10 has already been read as the float 1.1
    if value is None or isinstance(value, str):
        return value
    raise InvalidConfigError(
        f"'{key}' must be a quoted string, got {value!r} (write {key}: \"{value}\")",
        config_path,
    )


def parse_coordinates(coordinates: str, **extra) -> Artifact:
    """
    Parse "group:artifact:version[:classifier]" into an Artifact.

    Args:
        coordinates: Colon-separated coordinates
        **extra: Additional Artifact fields (scope, type, ...)

    Raises:
        InvalidConfigError: If fewer than three or more than four parts
    """
    parts = coordinates.strip().split(":")
    if len(parts) not in (3, 4) or not all(parts):
        raise InvalidConfigError(
            f"Invalid artifact coordinates '{coordinates}' "
            "(expected group:artifact:version[:classifier])"
        )
    group_id, artifact_id, version = parts[:3]
    classifier = extra.pop("classifier", None)
    if len(parts) == 4:
        classifier = parts[3]
    return Artifact(group_id, artifact_id, version, classifier=classifier, **extra)


def artifact_from_entry(entry, config_path=None) -> Artifact:
    """Build an Artifact from a coordinate string or a mapping."""
    if isinstance(entry, str):
        return parse_coordinates(entry)

    if not isinstance(entry, dict):
        raise InvalidConfigError(f"Invalid artifact entry: {entry!r}", config_path)

    entry = dict(entry)
    coordinates = entry.pop("coordinates", None)
    _check_keys(entry, ARTIFACT_KEYS, "artifact", config_path)

    if coordinates is not None:
        return parse_coordinates(coordinates, **entry)

    missing = [k for k in ("group_id", "artifact_id", "version") if not entry.get(k)]
    if missing:
        raise InvalidConfigError(f"Artifact entry missing {missing}: {entry}", config_path)
    entry["version"] = _version(entry["version"], config_path=config_path)
    for key in ("group_id", "artifact_id", "classifier", "type", "scope"):
        entry[key] = _text(entry.get(key), key, config_path)
    entry = {k: v for k, v in entry.items() if v is not None or k == "classifier"}
    return Artifact(**entry)


def project_from_dict(data: Dict[str, Any], config_path=None) -> Project:
    """
    Build a Project (and its execution project, recursively) from a dict.

    Args:
        data: Project fields, see module docstring
        config_path: Source file, for error messages

    Returns:
        Project instance

    Raises:
        InvalidConfigError: If artifact_id is missing or a key is unknown
    """
    if not isinstance(data, dict):
        raise InvalidConfigError("Project description must be a mapping", config_path)
    _check_keys(data, PROJECT_KEYS, "project", config_path)

    if not data.get("artifact_id"):
        raise InvalidConfigError("Project description requires 'artifact_id'", config_path)

    kwargs = dict(data)
    for key in ("main_source_roots", "test_source_roots"):
        kwargs[key] = _string_list(data.get(key), key, config_path)

    if "version" in kwargs:
        kwargs["version"] = _version(kwargs["version"], config_path=config_path)

    for key in TEXT_PROJECT_KEYS:
        if key in kwargs:
            kwargs[key] = _text(kwargs[key], key, config_path)

    if kwargs.get("basedir") is not None:
        kwargs["basedir"] = Path(kwargs["basedir"])

    if data.get("execution_project") is not None:
        kwargs["execution_project"] = project_from_dict(data["execution_project"], config_path)

    return Project(**kwargs)


def resolution_from_dict(data: Dict[str, Any], config_path=None) -> ResolutionResult:
    """
    Build a ResolutionResult from a dict.

    Args:
        data: artifacts, missing_artifacts, errors, complete
        config_path: Source file, for error messages

    Raises:
        InvalidConfigError: If a key or artifact entry is invalid
    """
    if not isinstance(data, dict):
        raise InvalidConfigError("Resolution result must be a mapping", config_path)
    _check_keys(data, RESOLUTION_KEYS, "resolution", config_path)

    return ResolutionResult(
        artifacts=tuple(artifact_from_entry(a, config_path) for a in data.get("artifacts") or []),
        missing_artifacts=tuple(
            artifact_from_entry(a, config_path) for a in data.get("missing_artifacts") or []
        ),
        errors=_string_list(data.get("errors"), "errors", config_path),
        complete=bool(data.get("complete", True)),
    )


def load_project(path: Path) -> Project:
    """Load a Project from a YAML file."""
    return project_from_dict(_load_yaml(path), config_path=path)


def load_resolution(path: Path) -> ResolutionResult:
    """Load a ResolutionResult from a YAML file."""
    return resolution_from_dict(_load_yaml(path), config_path=path)
