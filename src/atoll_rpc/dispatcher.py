import asyncio
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol, Type

from .config import ClientConfig
from .errors import UnsupportedRpcMethodError
from .http_client import HttpClient, RawResponse
from .methods import RpcMethod
from .models import AccountInfo, Block, HttpResponse, RpcResult
from .outcome import decode_outcome

if TYPE_CHECKING:
    from .request import RpcRequest

log = logging.getLogger(__name__)


class Transport(Protocol):
    def send(self, url: str, body: str) -> RawResponse:
        ...


DEFAULT_RESULT_TYPES: Dict[RpcMethod, Any] = {
    RpcMethod.GET_ACCOUNT_INFO: RpcResult[AccountInfo],
    RpcMethod.GET_BALANCE: RpcResult[int],
    RpcMethod.GET_BLOCK: Optional[Block],
    RpcMethod.GET_BLOCK_HEIGHT: int,
}


def result_type_for(method: RpcMethod) -> Any:
    try:
        return DEFAULT_RESULT_TYPES[method]
    except KeyError:
        raise UnsupportedRpcMethodError(method=method.wire_name) from None


async def dispatch(
    request: "RpcRequest",
    result_type: Optional[Type[Any]] = None,
    config: Optional[ClientConfig] = None,
    transport: Optional[Transport] = None,
) -> HttpResponse:
    """Send one request and decode the reply. Every failure is raised as an AtollError."""
    config = config or ClientConfig()
    if result_type is None:
        result_type = result_type_for(request.method)
    if transport is None:
        transport = HttpClient(timeout=config.timeout, user_agent=config.user_agent)

    url = config.url_for(request.cluster)
    body = request.to_json()
    log.debug("dispatching %s (id=%s) to %s", request.method.wire_name, request.id, url)

    raw = await asyncio.to_thread(transport.send, url, body)
    outcome = decode_outcome(raw.text(), result_type)
    return HttpResponse(
        status_code=raw.status_code,
        headers=raw.headers,
        reason_phrase=raw.reason_phrase,
        body=outcome,
    )
