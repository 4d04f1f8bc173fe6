from typing import Any


class AbiValidationError(Exception):
    """Pasted ABI text could not be turned into entries. ``kind`` is "syntax" or "schema"."""

    kind: str = "validation"
    message: str = "Invalid ABI"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "detail": self.detail}


class AbiSyntaxError(AbiValidationError):
    kind = "syntax"
    message = "Invalid JSON format"


class AbiSchemaError(AbiValidationError):
    kind = "schema"
    message = "Invalid ABI format"

    def __init__(self, detail: str, issues: list[dict[str, str]] | None = None):
        super().__init__(detail)
        self.issues = issues or []

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["issues"] = self.issues
        return data


class ArgumentError(Exception):
    """One or more call arguments were missing or could not be converted"""

    def __init__(self, message: str, errors: dict[str, str] | None = None, missing: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}
        self.missing = missing or []


class UnsupportedChainError(Exception):
    def __init__(self, chain_id: int):
        super().__init__(f"Chain ID {chain_id} is not supported")
        self.chain_id = chain_id


class ContractCallError(Exception):
    pass
