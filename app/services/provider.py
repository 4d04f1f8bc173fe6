from typing import Any, Protocol

from loguru import logger
from web3 import Web3

from app.config.settings import Settings, get_settings
from app.enums.chain import Chain
from app.exceptions import ContractCallError, UnsupportedChainError
from app.models.abi import AbiEntry


class ContractCallProvider(Protocol):
    """Capability that performs contract calls on behalf of the API"""

    def read_call(self, chain_id: int, address: str, entry: AbiEntry, args: list[Any]) -> Any:
        ...

    def submit_call(self, chain_id: int, address: str, entry: AbiEntry, args: list[Any]) -> str:
        ...


class Web3Provider:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def get_web3(self, chain_id: int):
        if not Chain.is_supported(chain_id):
            raise UnsupportedChainError(chain_id)

        web3_url = self.settings.web3_url(chain_id)
        if not web3_url:
            raise ContractCallError(f"No web3 URL configured for chain ID {chain_id}")

        return Web3(Web3.HTTPProvider(web3_url))

    def get_contract(self, w3: Web3, address: str, entry: AbiEntry):
        return w3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=[entry.to_dict()]
        )

    def read_call(self, chain_id: int, address: str, entry: AbiEntry, args: list[Any]) -> Any:
        w3 = self.get_web3(chain_id)
        contract = self.get_contract(w3, address, entry)
        logger.info(f"Reading {entry.name} on {address} ({Chain.get_network_name(chain_id)})")
        return contract.functions[entry.name](*args).call()

    def submit_call(self, chain_id: int, address: str, entry: AbiEntry, args: list[Any]) -> str:
        operator_private_key = self.settings.operator_private_key
        if not operator_private_key:
            raise ContractCallError("OPERATOR_PRIVATE_KEY not set")

        w3 = self.get_web3(chain_id)
        contract = self.get_contract(w3, address, entry)
        account = w3.eth.account.from_key(operator_private_key)
        logger.info(f"Submitting {entry.name} to {address} ({Chain.get_network_name(chain_id)}) from {account.address}")

        tx = contract.functions[entry.name](*args).build_transaction({
            "from": account.address,
            "nonce": w3.eth.get_transaction_count(account.address),
            "gas": Chain.get_gas_limit(chain_id),
            "gasPrice": w3.eth.gas_price
        })

        signed_tx = w3.eth.account.sign_transaction(tx, operator_private_key)
        tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)

        tx_receipt = w3.eth.wait_for_transaction_receipt(tx_hash)
        return Web3.to_hex(tx_receipt.transactionHash)
