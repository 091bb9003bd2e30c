"""
Scoping context logger.

Provides logging interface for scoping context with automatic [scope] prefix.
All scoping modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

from docscope.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[scope]"


def setup_scoping_logger(
    log_dir: Path,
    variant: str,
    verbose: bool = False,
    console_sink: Optional[TextIO] = None,
) -> Path:
    """
    Setup logger for scoping context.

    Args:
        log_dir: Directory for this scoping session
        variant: Variant name recorded in the provenance header
        verbose: Echo resolver decisions (DEBUG) to the console too
        console_sink: Console stream (default: sys.stdout)

    Returns:
        Path to log file

    Example:
        from docscope.contexts.scoping.logger import setup_scoping_logger, _log_info

        log_file = setup_scoping_logger(log_dir, variant="test")
        _log_info("Resolving...")
    """
    return _setup_logger(
        context_name="scope",
        log_dir=log_dir,
        extra_provenance={"Variant": variant},
        console_level="DEBUG" if verbose else "INFO",
        console_sink=console_sink,
    )


# Wrapper functions with automatic [scope] prefix


def _log_info(message: str) -> None:
    """Log info message with [scope] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [scope] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [scope] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [scope] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [scope] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scoping-specific logging helpers


def log_resolution_start(project_name: str, variant: str) -> None:
    """Log start of a scope resolution."""
    _log_info(f"Resolving {variant} documentation scope for {project_name}")


def log_resolution_result(project_name: str, scope) -> None:
    """
    Log a resolved scope.

    Args:
        project_name: Project identifier
        scope: DocumentationScope from VariantPolicy.resolve()
    """
    if not scope.has_sources:
        _log_warning(f"{project_name}: no source roots to document")

    _log_success(
        f"{project_name}: {len(scope.source_roots)} source roots, "
        f"{len(scope.build_output_dirs)} output dirs, "
        f"{len(scope.classpath_artifacts)} classpath artifacts"
    )
    _log_debug(f"  Output: {scope.output_directory}")
    _log_debug(f"  Classifier: {scope.classifier}")
