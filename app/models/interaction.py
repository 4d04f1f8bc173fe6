import re
from typing import Any

from pydantic import BaseModel, computed_field, field_validator

from app.models.abi import AbiEntry

ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")

class ParseRequest(BaseModel):
    # pasted text, or an already decoded JSON value
    abi: Any

class ArgumentsRequest(BaseModel):
    entry: AbiEntry
    values: dict[str, str] = {}

class CallRequest(BaseModel):
    chain_id: int
    address: str
    entry: AbiEntry
    values: dict[str, str] = {}

    @field_validator("address")
    @classmethod
    def valid_address(cls, value):
        if not ADDRESS_PATTERN.fullmatch(value):
            raise ValueError("Invalid Ethereum address format")
        return value

class FormattedArgument(BaseModel):
    name: str
    type: str
    value: Any = None
    error: str | None = None

class FormattedArguments(BaseModel):
    arguments: list[FormattedArgument] = []
    errors: dict[str, str] = {}
    missing: list[str] = []

    @computed_field
    @property
    def args(self) -> list[Any]:
        return [argument.value for argument in self.arguments]

    @computed_field
    @property
    def ok(self) -> bool:
        return not self.errors and not self.missing
