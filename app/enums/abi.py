from enum import Enum

class AbiEntryKind(str, Enum):
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    EVENT = "event"
    ERROR = "error"
    FALLBACK = "fallback"
    RECEIVE = "receive"

    @staticmethod
    def get_color(kind: str | None) -> str:
        colors = {
            AbiEntryKind.FUNCTION: "text-blue-400",
            AbiEntryKind.CONSTRUCTOR: "text-purple-400",
            AbiEntryKind.EVENT: "text-green-400",
            AbiEntryKind.ERROR: "text-red-400",
        }
        return colors.get(kind, "text-gray-400")

    @staticmethod
    def get_label(kind: str | None) -> str:
        labels = {
            AbiEntryKind.FUNCTION: "Contract function",
            AbiEntryKind.CONSTRUCTOR: "Contract constructor",
            AbiEntryKind.EVENT: "Contract event",
            AbiEntryKind.ERROR: "Contract error",
        }
        if kind in labels:
            return labels[kind]
        value = kind.value if isinstance(kind, AbiEntryKind) else kind
        return f"Contract {value}"


class StateMutability(str, Enum):
    PURE = "pure"
    VIEW = "view"
    NONPAYABLE = "nonpayable"
    PAYABLE = "payable"

    @staticmethod
    def is_read_only(state_mutability: str | None) -> bool:
        return state_mutability in [StateMutability.VIEW, StateMutability.PURE]

    @staticmethod
    def get_color(state_mutability: str | None) -> str:
        colors = {
            StateMutability.PURE: "text-green-400",
            StateMutability.VIEW: "text-blue-400",
            StateMutability.NONPAYABLE: "text-yellow-400",
            StateMutability.PAYABLE: "text-red-400",
        }
        return colors.get(state_mutability, "text-gray-400")

    @staticmethod
    def get_label(state_mutability: str | None) -> str:
        labels = {
            StateMutability.PURE: "Pure function - does not read or modify state",
            StateMutability.VIEW: "View function - reads state but does not modify",
            StateMutability.NONPAYABLE: "Non-payable function - modifies state but cannot receive Ether",
            StateMutability.PAYABLE: "Payable function - can receive Ether",
        }
        return labels.get(state_mutability, "Unknown state mutability")
