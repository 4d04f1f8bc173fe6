import json
from typing import Any

from loguru import logger
from pydantic import ValidationError

from app.exceptions import AbiSchemaError, AbiSyntaxError
from app.models.abi import Abi, AbiAdapter, format_loc

# json.loads recurses once per nesting level
MAX_NESTING_DEPTH = 512

SAMPLE_ABI = """[
  {
    "type": "function",
    "name": "balanceOf",
    "inputs": [
      {
        "name": "owner",
        "type": "address"
      }
    ],
    "outputs": [
      {
        "name": "",
        "type": "uint256"
      }
    ],
    "stateMutability": "view"
  },
  {
    "type": "function",
    "name": "transfer",
    "inputs": [
      {
        "name": "to",
        "type": "address"
      },
      {
        "name": "amount",
        "type": "uint256"
      }
    ],
    "outputs": [
      {
        "name": "",
        "type": "bool"
      }
    ],
    "stateMutability": "nonpayable"
  },
  {
    "type": "event",
    "name": "Transfer",
    "inputs": [
      {
        "name": "from",
        "type": "address",
        "indexed": true
      },
      {
        "name": "to",
        "type": "address",
        "indexed": true
      },
      {
        "name": "value",
        "type": "uint256",
        "indexed": false
      }
    ]
  }
]"""


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"{constant} is not valid JSON")


def _nesting_depth(raw: str, limit: int) -> int:
    depth = deepest = 0
    in_string = escaped = False
    for char in raw:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "[{":
            depth += 1
            if depth > deepest:
                deepest = depth
                if deepest > limit:
                    break
        elif char in "]}":
            depth -= 1
    return deepest


class AbiService:
    @staticmethod
    def validate(raw: str) -> Abi:
        """Parse pasted ABI text, all-or-nothing"""
        if not raw or not raw.strip():
            logger.warning("ABI rejected: empty input")
            raise AbiSyntaxError("Please enter an ABI")

        if _nesting_depth(raw, MAX_NESTING_DEPTH) > MAX_NESTING_DEPTH:
            logger.warning(f"ABI rejected: nested deeper than {MAX_NESTING_DEPTH} levels")
            raise AbiSyntaxError("ABI is nested too deeply")

        try:
            value = json.loads(raw, parse_constant=_reject_constant)
        except RecursionError as e:
            logger.warning("ABI rejected: nested too deeply to decode")
            raise AbiSyntaxError("ABI is nested too deeply") from e
        except json.JSONDecodeError as e:
            logger.warning(f"ABI rejected: invalid JSON ({e.msg} at line {e.lineno} column {e.colno})")
            raise AbiSyntaxError(f"{e.msg}: line {e.lineno} column {e.colno}") from e
        except ValueError as e:
            logger.warning(f"ABI rejected: invalid JSON ({e})")
            raise AbiSyntaxError(str(e)) from e

        return AbiService.validate_value(value)

    @staticmethod
    def validate_value(value: Any) -> Abi:
        if not isinstance(value, list):
            logger.warning(f"ABI rejected: top level is {type(value).__name__}, not an array")
            raise AbiSchemaError(
                "ABI must be a JSON array of entries",
                [{"loc": "$", "message": "Input should be a valid array"}],
            )

        try:
            entries = AbiAdapter.validate_python(value)
        except ValidationError as e:
            issues = [
                {"loc": format_loc(error["loc"]), "message": error["msg"]}
                for error in e.errors()
            ]
            detail = "; ".join(f"{issue['loc']}: {issue['message']}" for issue in issues)
            logger.warning(f"ABI rejected: {len(issues)} schema issue(s), first at {issues[0]['loc']}")
            raise AbiSchemaError(detail, issues) from e

        logger.debug(f"ABI validated with {len(entries)} entries")
        return entries
