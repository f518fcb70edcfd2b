from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")
U = TypeVar("U")

LAMPORTS_PER_SOL = 1_000_000_000
MAX_RPC_ID = 255


class WireModel(BaseModel):
    """Base for camelCase JSON payloads. Unknown fields are ignored, known ones are never coerced."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        strict=True,
    )


class RpcResponse(WireModel, Generic[T]):
    jsonrpc: str
    id: int = Field(ge=0, le=MAX_RPC_ID)
    result: T


class JsonError(WireModel):
    code: int
    message: str
    data: Optional[Any] = None


class RpcJsonError(WireModel):
    """Protocol error envelope. ``id`` is null when the node could not parse the request."""

    jsonrpc: str
    id: Optional[int] = Field(default=None, ge=0, le=MAX_RPC_ID)
    error: JsonError


class Context(WireModel):
    api_version: Optional[str] = None
    slot: int


class RpcResult(WireModel, Generic[U]):
    context: Context
    value: Optional[U] = None


class AccountInfo(WireModel):
    data: Union[Tuple[str, str], Dict[str, Any], str]
    executable: bool
    lamports: int
    owner: str
    rent_epoch: int
    space: Optional[int] = None

    @property
    def sol(self) -> float:
        return self.lamports / LAMPORTS_PER_SOL


class RewardType(str, Enum):
    FEE = "Fee"
    RENT = "Rent"
    STAKING = "Staking"
    VOTING = "Voting"


class Reward(WireModel):
    public_key: str = Field(alias="pubkey")
    lamports: int
    post_balance: int
    reward_type: Optional[RewardType] = None
    commission: Optional[int] = None


class Block(WireModel):
    block_height: Optional[int] = None
    block_time: Optional[int] = None
    blockhash: str
    parent_slot: int
    previous_blockhash: str
    rewards: List[Reward] = Field(default_factory=list)
    transactions: List[Dict[str, Any]] = Field(default_factory=list)


@dataclass(frozen=True)
class Success(Generic[T]):
    response: RpcResponse[T]

    @property
    def result(self) -> T:
        return self.response.result


@dataclass(frozen=True)
class InvalidJson:
    """The node answered with a JSON-RPC error object."""

    error: RpcJsonError

    @property
    def code(self) -> int:
        return self.error.error.code

    @property
    def message(self) -> str:
        return self.error.error.message


RequestOutcome = Union[Success[T], InvalidJson]


@dataclass(frozen=True)
class HttpResponse(Generic[T]):
    status_code: int
    headers: Dict[str, str]
    reason_phrase: str
    body: RequestOutcome[T]

    @property
    def is_success(self) -> bool:
        return isinstance(self.body, Success)
