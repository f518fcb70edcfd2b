"""Immutable builder for a single JSON-RPC call."""

import json
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple, Type

from .config import ClientConfig
from .dispatcher import Transport, dispatch
from .methods import RpcMethod
from .models import MAX_RPC_ID, HttpResponse
from .options import Cluster, Commitment, Encoding


@dataclass(frozen=True)
class RpcRequest:
    """A pending call. Every ``with_*`` returns a new request and leaves this one untouched.

    Extras are kept in insertion order and are not deduplicated; when the
    ``params`` object is built a repeated key keeps its last value.
    """

    jsonrpc: str = "2.0"
    id: int = 1
    method: RpcMethod = RpcMethod.GET_ACCOUNT_INFO
    value: Optional[Any] = None
    cluster: Cluster = Cluster.DEVNET
    extras: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        if not 0 <= self.id <= MAX_RPC_ID:
            raise ValueError(f"request id must be between 0 and {MAX_RPC_ID}, got {self.id}")

    @classmethod
    def new(cls) -> "RpcRequest":
        return cls()

    def with_protocol_version(self, jsonrpc: str) -> "RpcRequest":
        return replace(self, jsonrpc=jsonrpc)

    def with_identifier(self, request_id: int) -> "RpcRequest":
        return replace(self, id=request_id)

    def with_method(self, method: RpcMethod) -> "RpcRequest":
        return replace(self, method=method)

    def with_value(self, value: Any) -> "RpcRequest":
        return replace(self, value=value)

    def with_cluster(self, cluster: Cluster) -> "RpcRequest":
        return replace(self, cluster=cluster)

    def with_extra(self, key: str, value: Any) -> "RpcRequest":
        return replace(self, extras=self.extras + ((key, value),))

    def with_commitment(self, commitment: Commitment) -> "RpcRequest":
        if not commitment.is_valid:
            raise ValueError("refusing to send an invalid commitment level")
        return self.with_extra("commitment", commitment.value)

    def with_encoding(self, encoding: Encoding) -> "RpcRequest":
        if not encoding.is_valid:
            raise ValueError("refusing to send an unsupported encoding")
        return self.with_extra("encoding", encoding.value)

    def params(self) -> List[Any]:
        if not self.extras:
            return [self.value]
        extra_parameters: Dict[str, Any] = {}
        for key, value in self.extras:
            extra_parameters[key] = value
        return [self.value, extra_parameters]

    def seal(self) -> Dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "id": self.id,
            "method": self.method.wire_name,
            "params": self.params(),
        }

    def to_json(self) -> str:
        return json.dumps(self.seal(), separators=(",", ":"))

    async def request(
        self,
        result_type: Optional[Type[Any]] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ) -> HttpResponse:
        return await dispatch(self, result_type=result_type, config=config, transport=transport)
