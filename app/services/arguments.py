import json

from loguru import logger

from app.models.abi import AbiEntry, AbiInput
from app.models.interaction import FormattedArgument, FormattedArguments

INTEGER_TYPES = ["uint256", "int256"]
TEXT_TYPES = ["address", "string"]


class ArgumentService:
    @staticmethod
    def format_arguments(entry: AbiEntry, values: dict[str, str]) -> FormattedArguments:
        """Convert user-entered text into typed call arguments"""
        result = FormattedArguments()
        for param in entry.inputs:
            raw = values.get(param.name)
            argument = FormattedArgument(name=param.name, type=param.type)

            if not raw:
                result.missing.append(param.name)
            else:
                try:
                    argument.value = ArgumentService.format_input(param, raw)
                except ValueError as e:
                    logger.warning(f"Could not format {param.name} ({param.type}): {e}")
                    argument.error = str(e)
                    result.errors[param.name] = argument.error

            result.arguments.append(argument)
        return result

    @staticmethod
    def format_input(param: AbiInput, value: str):
        if "[]" in param.type:
            return ArgumentService._parse_array(value)
        if param.type in TEXT_TYPES or param.type.startswith("bytes"):
            return value
        if param.type in INTEGER_TYPES:
            return ArgumentService._parse_integer(value)
        if param.type == "bool":
            return value.lower() == "true"
        return value

    @staticmethod
    def _parse_integer(value: str) -> int:
        text = value.strip()
        # int() would also accept digit separators
        if not text or "_" in text or not text.isascii():
            raise ValueError(f"Cannot convert {value!r} to an integer")
        try:
            if text[:2].lower() == "0x":
                return int(text[2:], 16)
            return int(text, 10)
        except ValueError:
            raise ValueError(f"Cannot convert {value!r} to an integer") from None

    @staticmethod
    def _parse_array(value: str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON array: {e.msg}") from e
        if not isinstance(parsed, list):
            raise ValueError("Expected a JSON array literal")
        return parsed
