"""Base exception for event-fields."""

from typing import Any, Dict


class EventFieldsError(Exception):
    """Base exception for all event-fields errors.

    Keyword details name the offending input (entry, path, key, ...). ``None``
    details are dropped so optional context never shows up as ``x=None``.
    """

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, str] = {k: str(v) for k, v in details.items() if v is not None}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} ({', '.join(f'{k}={v}' for k, v in self.details.items())})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-able form used by ``infer --format json`` on failure."""
        return {"error": type(self).__name__, "message": self.message, "details": dict(self.details)}
