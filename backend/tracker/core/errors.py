"""
Error taxonomy shared by the repositories and the API layer.

Every failure the core can surface carries a stable `code` so callers can
tell a rejected input from a name clash from a broken database without
parsing messages. The core never references HTTP; the API layer maps each
class to a status code.

Participant decode failures are deliberately NOT part of this taxonomy —
see tracker.services.participants.
"""

from __future__ import annotations


class TrackerError(Exception):
    """Base class for every condition the core reports to its callers."""

    code = "tracker_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TrackerError):
    """A required field is missing or blank. Raised before any storage call."""

    code = "validation_error"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Missing required field(s): {', '.join(fields)}")
        self.fields = fields


class DuplicateName(TrackerError):
    """A lookup-set insert clashed with an existing name."""

    code = "duplicate_name"

    def __init__(self, label: str, name: str) -> None:
        super().__init__(f"{label.capitalize()} '{name}' already exists")
        self.label = label
        self.name = name


class StorageError(TrackerError):
    """Any other persistence failure. The driver message is preserved."""

    code = "storage_error"

    @classmethod
    def from_exception(cls, exc: Exception) -> StorageError:
        # DBAPIError wraps the driver exception in .orig
        original = getattr(exc, "orig", None) or exc
        return cls(str(original))


class SchemaInitError(TrackerError):
    """Startup could not bring the schema to the current revision."""

    code = "schema_init_error"
