"""
HAL Metadata Exception Classes

Typed exceptions raised while building and querying the metadata map.
"""

from typing import Any


class HalMetadataError(Exception):
    """Base exception for all hal-metadata errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class InvalidConfigError(HalMetadataError):
    """Raised when metadata configuration is malformed or incomplete."""

    def __init__(
        self,
        message: str,
        entry_index: int | None = None,
        field_name: str | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if entry_index is not None:
            context["entry_index"] = entry_index
        if field_name:
            context["field_name"] = field_name
        super().__init__(message, "INVALID_CONFIG", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the configuration error."""
        if "field_name" in self.context:
            field = self.context["field_name"]
            return f"Ensure the '{field}' element is present and valid"
        return "Check the metadata map configuration for malformed entries"


class NotFoundError(HalMetadataError):
    """Raised when a class or service is not registered."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        context = {}
        if identifier:
            context["identifier"] = identifier
        super().__init__(message, "NOT_FOUND", context)


class ConfigLoadError(HalMetadataError):
    """
    Raised by the I/O layer when a configuration document cannot be read.

    Examples
    --------
    * File does not exist / bad extension
    * YAML or JSON syntax error
    * Top-level object is not a mapping
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        context = {}
        if path:
            context["path"] = path
        super().__init__(message, "CONFIG_LOAD_ERROR", context)
