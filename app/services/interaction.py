from typing import Any

from loguru import logger

from app.enums.abi import AbiEntryKind, StateMutability
from app.exceptions import ArgumentError, ContractCallError, UnsupportedChainError
from app.models.interaction import CallRequest
from app.services.arguments import ArgumentService
from app.services.provider import ContractCallProvider


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


class InteractionService:
    @staticmethod
    def execute(provider: ContractCallProvider, request: CallRequest) -> dict[str, Any]:
        entry = request.entry
        if entry.type != AbiEntryKind.FUNCTION or not entry.name:
            raise ArgumentError(f"Only named functions can be called, got {entry.type.value}")

        formatted = ArgumentService.format_arguments(entry, request.values)
        if formatted.missing:
            raise ArgumentError(
                f"Missing required inputs: {', '.join(formatted.missing)}",
                formatted.errors,
                formatted.missing,
            )
        if formatted.errors:
            raise ArgumentError(
                f"Invalid inputs: {', '.join(formatted.errors)}",
                formatted.errors,
            )

        try:
            if StateMutability.is_read_only(entry.stateMutability):
                result = provider.read_call(request.chain_id, request.address, entry, formatted.args)
                return {"mode": "read", "function": entry.name, "result": _to_jsonable(result)}

            tx_hash = provider.submit_call(request.chain_id, request.address, entry, formatted.args)
            return {"mode": "write", "function": entry.name, "transaction": tx_hash}
        except (UnsupportedChainError, ContractCallError):
            raise
        except Exception as e:
            logger.exception(f"Error executing {entry.name} on {request.address}")
            raise ContractCallError(f"Error executing function {entry.name}: {str(e)}") from e
