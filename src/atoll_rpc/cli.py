import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .config import ClientConfig, load_config
from .errors import AtollError
from .methods import RpcMethod
from .models import HttpResponse, Success
from .options import Cluster
from .request import RpcRequest

log = logging.getLogger(__name__)

EXIT_RPC_ERROR = 1
EXIT_CLIENT_ERROR = 2


def _parse_json_or_str(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _parse_extra(raw: str) -> Tuple[str, Any]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"extra must look like key=value, got {raw!r}")
    return key, _parse_json_or_str(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send one Solana JSON-RPC call")
    parser.add_argument("method", help="Wire name, e.g. getBalance")
    parser.add_argument("value", nargs="?", default=None, help="Primary parameter (JSON or plain string)")
    parser.add_argument("--cluster", choices=[c.value for c in Cluster], default=None)
    parser.add_argument("--extra", action="append", type=_parse_extra, default=[], metavar="KEY=VALUE")
    parser.add_argument("--id", type=int, default=1, dest="request_id")
    parser.add_argument("--config", type=Path, default=None, help="YAML client configuration")
    parser.add_argument("--verbose", action="store_true")
    return parser


def build_request(args: argparse.Namespace, config: ClientConfig) -> RpcRequest:
    cluster = Cluster(args.cluster) if args.cluster else config.default_cluster
    request = (
        RpcRequest.new()
        .with_method(RpcMethod.from_wire_name(args.method))
        .with_cluster(cluster)
        .with_identifier(args.request_id)
    )
    if args.value is not None:
        request = request.with_value(_parse_json_or_str(args.value))
    for key, value in args.extra:
        request = request.with_extra(key, value)
    return request


def render(response: HttpResponse) -> str:
    if isinstance(response.body, Success):
        payload = response.body.response.model_dump(mode="json", by_alias=True)
    else:
        payload = response.body.error.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else ClientConfig()
        request = build_request(args, config)
        response = asyncio.run(request.request(config=config))
    except (AtollError, ValueError) as exc:
        log.error("%s", exc)
        return EXIT_CLIENT_ERROR

    print(render(response))
    return 0 if response.is_success else EXIT_RPC_ERROR


if __name__ == "__main__":
    sys.exit(main())
