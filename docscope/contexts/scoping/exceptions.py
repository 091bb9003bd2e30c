"""Custom exceptions for the scoping context."""

from typing import Optional, Sequence


class DocScopeError(Exception):
    """Base class for every error raised by docscope."""

    pass


class InvalidInputError(DocScopeError, ValueError):
    """
    Exception raised when a scope computation receives unusable input.

    Raised for an absent project, an absent resolution result, or a resolution
    result that upstream marked as failed or incomplete. No partial scope is
    produced when this is raised.

    Attributes:
        message: Error description
        field: Name of the offending input (e.g., 'project', 'resolution')
        missing: Identities of artifacts the upstream resolver could not fetch
        errors: Error messages reported by the upstream resolver
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        missing: Sequence[str] = (),
        errors: Sequence[str] = (),
    ):
        self.message = message
        self.field = field
        self.missing = tuple(missing)
        self.errors = tuple(errors)

        parts = [message]

        if missing:
            # Long reactor builds can miss hundreds of artifacts
            shown = list(self.missing[:5])
            more = f" (+{len(self.missing) - 5} more)" if len(self.missing) > 5 else ""
            parts.append(f"Missing artifacts: {', '.join(shown)}{more}")

        for error in self.errors:
            parts.append(f"Resolver error: {error}")

        super().__init__("\n".join(parts))


class UnsupportedPackagingError(DocScopeError):
    """
    Exception reserved for packaging values that need special handling.

    Only the aggregator packaging is special-cased today and every other
    packaging is treated uniformly, so nothing raises this yet.
    """

    def __init__(self, packaging: str):
        self.packaging = packaging
        super().__init__(f"Unsupported packaging: '{packaging}'")


class InvalidConfigError(DocScopeError, ValueError):
    """
    Exception raised when an override file or project description is malformed.

    Attributes:
        message: Error description
        config_path: Path of the offending file, if loaded from disk
    """

    def __init__(self, message: str, config_path=None):
        self.message = message
        self.config_path = config_path

        if config_path is not None:
            message = f"{message}\nConfig file: {config_path}"

        super().__init__(message)
