# Error types raised at the contract parse boundary.

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


class ContractValidationError(ValueError):
    """Raised when a payload cannot be parsed into one of the known API shapes."""

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.kind = kind
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError, *, kind: str | None = None
    ) -> ContractValidationError:
        errors = [
            {"loc": list(item["loc"]), "type": item["type"], "msg": item["msg"]}
            for item in exc.errors()
        ]
        details = "; ".join(
            f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
            for item in errors
        )
        label = kind or "payload"
        return cls(f"Invalid {label} payload: {details}", kind=kind, errors=errors)
