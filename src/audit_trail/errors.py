"""Exception types raised by the audit trail core."""


class AuditTrailError(Exception):
    """Base class for audit trail failures."""


class ValidationError(AuditTrailError, ValueError):
    """Content submitted for saving is missing, not a string, or not encodable."""


class StorageError(AuditTrailError):
    """Persisted history could not be read or written."""
