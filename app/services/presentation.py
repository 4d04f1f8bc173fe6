from typing import Any

from app.enums.abi import AbiEntryKind, StateMutability
from app.models.abi import Abi, AbiEntry, Parameter


def format_type(parameter: Parameter) -> str:
    """Render a parameter type, expanding tuple components recursively,
    e.g. ``tuple(address, uint256)``"""
    if not parameter.components:
        return parameter.type
    components = ", ".join(format_type(component) for component in parameter.components)
    return f"{parameter.type}({components})"


def group_by_kind(entries: Abi) -> dict[AbiEntryKind, list[AbiEntry]]:
    """Partition entries by kind. Keys follow first-occurrence order."""
    groups: dict[AbiEntryKind, list[AbiEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.type, []).append(entry)
    return groups


def entry_title(entry: AbiEntry) -> str:
    return entry.name or entry.type.value


def state_mutability_color(state_mutability: str | None) -> str:
    return StateMutability.get_color(state_mutability)


def state_mutability_label(state_mutability: str | None) -> str:
    return StateMutability.get_label(state_mutability)


def entry_kind_color(kind: str | None) -> str:
    return AbiEntryKind.get_color(kind)


def entry_kind_label(kind: str | None) -> str:
    return AbiEntryKind.get_label(kind)


def describe_entry(entry: AbiEntry) -> dict[str, Any]:
    view: dict[str, Any] = {
        "title": entry_title(entry),
        "kind": entry.type.value,
        "kind_color": entry_kind_color(entry.type),
        "kind_label": entry_kind_label(entry.type),
    }
    # absent mutability is unknown, so no badge is produced for it
    if entry.stateMutability is not None:
        view["state_mutability"] = entry.stateMutability.value
        view["state_mutability_color"] = state_mutability_color(entry.stateMutability)
        view["state_mutability_label"] = state_mutability_label(entry.stateMutability)
    view["inputs"] = [
        {"name": param.name, "type": format_type(param), "indexed": bool(param.indexed)}
        for param in entry.inputs
    ]
    view["outputs"] = [
        {"name": param.name or "", "type": format_type(param)}
        for param in entry.outputs
    ]
    return view


def summarize(entries: Abi) -> dict[str, Any]:
    groups = group_by_kind(entries)
    return {
        "total": len(entries),
        "kinds": [{"kind": kind.value, "count": len(group)} for kind, group in groups.items()],
        "groups": {
            kind.value: [describe_entry(entry) for entry in group]
            for kind, group in groups.items()
        },
    }
