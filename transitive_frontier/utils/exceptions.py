"""
Exceptions raised by transitive-frontier.

Every error the tool reports derives from FrontierError so the
service layer can turn it into a clean exit code.
"""

from typing import List, Optional, Sequence


class FrontierError(Exception):
    """Base error for frontier analysis."""
    pass


class AmbiguousTargetError(FrontierError):
    """
    Raised when a package-id substring does not match exactly one package.

    ``matches`` holds every candidate id so callers can show them before
    aborting. It is empty when nothing matched.
    """

    def __init__(self, substring: str, matches: Optional[Sequence[str]] = None):
        self.substring = substring
        self.matches: List[str] = list(matches or [])

        if self.matches:
            message = (
                f"package-id substring should match exactly one package id, "
                f"'{substring}' matched {len(self.matches)}"
            )
        else:
            message = f"package-id substring '{substring}' did not match any package id"
        super().__init__(message)


class PackageNotFoundError(FrontierError):
    """Package id is not part of the graph."""

    def __init__(self, package_id: str):
        self.package_id = package_id
        super().__init__(f"Package not found in graph: {package_id}")


class GraphLoadError(FrontierError):
    """Running or parsing `cargo metadata` failed."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        stderr: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message
        self.command = list(command) if command else None
        self.stderr = stderr
        self.original_exception = original_exception

        error_parts = [message]

        if command:
            error_parts.append(f"Command: {' '.join(command)}")

        if stderr:
            error_parts.append(f"Stderr: {stderr.strip()}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class ConfigurationError(FrontierError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[Sequence[str]] = None):
        self.errors = list(errors or [])
        if self.errors:
            message = f"{message}: " + "; ".join(self.errors)
        super().__init__(message)


class UnsupportedFormatError(FrontierError):
    """Requested output format has no renderer."""

    def __init__(self, fmt: str, supported: Sequence[str] = ()):
        self.format = fmt
        self.supported = list(supported)
        message = f"Unsupported output format: {fmt}"
        if self.supported:
            message += f" (must be one of {', '.join(self.supported)})"
        super().__init__(message)
