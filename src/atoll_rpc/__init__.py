from .config import ClientConfig, load_config
from .dispatcher import dispatch
from .errors import AtollError, HttpError, HttpErrorKind, JsonDecodeError, UnsupportedRpcMethodError
from .methods import RpcMethod
from .models import (
    LAMPORTS_PER_SOL,
    AccountInfo,
    Block,
    Context,
    HttpResponse,
    InvalidJson,
    JsonError,
    RequestOutcome,
    Reward,
    RewardType,
    RpcJsonError,
    RpcResponse,
    RpcResult,
    Success,
)
from .options import Cluster, Commitment, Encoding
from .outcome import decode_outcome
from .request import RpcRequest

__all__ = [
    "AccountInfo",
    "AtollError",
    "Block",
    "ClientConfig",
    "Cluster",
    "Commitment",
    "Context",
    "Encoding",
    "HttpError",
    "HttpErrorKind",
    "HttpResponse",
    "InvalidJson",
    "JsonDecodeError",
    "JsonError",
    "LAMPORTS_PER_SOL",
    "RequestOutcome",
    "Reward",
    "RewardType",
    "RpcJsonError",
    "RpcMethod",
    "RpcRequest",
    "RpcResponse",
    "RpcResult",
    "Success",
    "UnsupportedRpcMethodError",
    "decode_outcome",
    "dispatch",
    "load_config",
]
