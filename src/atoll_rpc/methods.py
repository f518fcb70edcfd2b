from enum import Enum

from .errors import UnsupportedRpcMethodError


class RpcMethod(Enum):
    """Supported Solana RPC calls; the value is the wire name."""

    GET_ACCOUNT_INFO = "getAccountInfo"
    GET_BALANCE = "getBalance"
    GET_BLOCK = "getBlock"
    GET_BLOCK_HEIGHT = "getBlockHeight"

    @property
    def wire_name(self) -> str:
        return self.value

    @classmethod
    def from_wire_name(cls, name: str) -> "RpcMethod":
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedRpcMethodError(method=name) from None
