"""
Intake Context

Responsibilities:
- Loads project descriptions and artifact resolution results from YAML
- Validates their shape before handing them to the Scoping context

Owns: YAML to Project/ResolutionResult conversion
Never: Makes scoping decisions or resolves artifacts
"""

from docscope.contexts.intake.project_loader import (
    load_project,
    load_resolution,
    parse_coordinates,
    project_from_dict,
    resolution_from_dict,
)

__all__ = [
    "load_project",
    "load_resolution",
    "parse_coordinates",
    "project_from_dict",
    "resolution_from_dict",
]
