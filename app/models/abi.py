from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.enums.abi import AbiEntryKind, StateMutability

# Solidity type names are opaque here, they only have to be present
TypeName = Annotated[StrictStr, Field(min_length=1)]


def format_loc(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path or "$"


def _reject_null(value: Any) -> Any:
    # optional fields may be left out, but an explicit null is not a value
    if value is None:
        raise ValueError("field may be omitted but must not be null")
    return value


def _build_components(model: type[BaseModel], value: Any) -> Any:
    """Validate a components tree bottom-up, one node at a time.

    Every node is handed to model_validate with its children already built,
    so nesting depth never turns into recursion depth.
    """
    _reject_null(value)
    if not isinstance(value, list):
        return value

    nodes = []
    pending = [(child, (index,)) for index, child in enumerate(value)]
    while pending:
        node, loc = pending.pop()
        if not isinstance(node, dict):
            continue
        nodes.append((node, loc))
        children = node.get("components")
        if isinstance(children, list):
            pending.extend((child, loc + ("components", index)) for index, child in enumerate(children))

    # parents are collected before their children
    built = {}
    for node, loc in reversed(nodes):
        data = dict(node)
        if isinstance(data.get("components"), list):
            data["components"] = [built.get(id(child), child) for child in data["components"]]
        try:
            built[id(node)] = model.model_validate(data)
        except ValidationError as e:
            reason = "; ".join(
                f"{format_loc(loc + tuple(error['loc']))}: {error['msg']}" for error in e.errors()
            )
            raise PydanticCustomError("component", "{reason}", {"reason": reason})

    return [built.get(id(child), child) for child in value]


class AbiInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: StrictStr
    type: TypeName
    indexed: StrictBool | None = None
    components: list["AbiInput"] | None = None

    @field_validator("indexed", mode="before")
    @classmethod
    def optional_not_null(cls, value):
        return _reject_null(value)

    @field_validator("components", mode="before")
    @classmethod
    def build_components(cls, value):
        return _build_components(AbiInput, value)


class AbiOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: StrictStr | None = None
    type: TypeName
    components: list["AbiOutput"] | None = None

    @field_validator("name", mode="before")
    @classmethod
    def optional_not_null(cls, value):
        return _reject_null(value)

    @field_validator("components", mode="before")
    @classmethod
    def build_components(cls, value):
        return _build_components(AbiOutput, value)


class AbiEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: AbiEntryKind
    name: StrictStr | None = None
    inputs: list[AbiInput] = []
    outputs: list[AbiOutput] = []
    stateMutability: StateMutability | None = None
    anonymous: StrictBool | None = None

    @field_validator("name", "inputs", "outputs", "stateMutability", "anonymous", mode="before")
    @classmethod
    def optional_not_null(cls, value):
        return _reject_null(value)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


Parameter = AbiInput | AbiOutput

Abi = list[AbiEntry]

AbiAdapter = TypeAdapter(Abi)
