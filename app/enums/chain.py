from enum import IntEnum

class Chain(IntEnum):
    EthereumMainnet = 1
    GnosisMainnet = 100
    MantleMainnet = 5000
    MantleSepolia = 5003
    AvalancheMainnet = 43114
    EthereumSepolia = 11155111
    
    @staticmethod
    def is_supported(chain_id: int) -> bool:
        return chain_id in [chain.value for chain in Chain]
    
    @staticmethod
    def get_network_name(chain_id: int) -> str:
        names = {
            Chain.EthereumMainnet: "Ethereum Mainnet",
            Chain.GnosisMainnet: "Gnosis Chain",
            Chain.MantleMainnet: "Mantle Mainnet",
            Chain.MantleSepolia: "Mantle Sepolia",
            Chain.AvalancheMainnet: "Avalanche Mainnet",
            Chain.EthereumSepolia: "Ethereum Sepolia",
        }
        return names.get(chain_id, "Unknown Network")

    @staticmethod
    def get_gas_limit(chain_id: int) -> int:
        # Mantle charges L1 data fees in gas units
        if chain_id in [Chain.MantleMainnet, Chain.MantleSepolia]:
            return 300000000
        return 2000000
