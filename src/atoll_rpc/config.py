from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .options import DEFAULT_CLUSTER_URLS, Cluster

DEFAULT_TIMEOUT = 60.0
DEFAULT_USER_AGENT = "atoll-rpc/0.1"


def _default_cluster_urls() -> Dict[Cluster, str]:
    return dict(DEFAULT_CLUSTER_URLS)


@dataclass(frozen=True)
class ClientConfig:
    """Endpoint, timeout and user agent for dispatch.

    ``default_cluster`` is only read by the command line front end. Library
    calls always target ``RpcRequest.cluster``, which defaults to DEVNET.
    """

    cluster_urls: Mapping[Cluster, str] = field(default_factory=_default_cluster_urls)
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    default_cluster: Cluster = Cluster.DEVNET

    def url_for(self, cluster: Cluster) -> str:
        try:
            return self.cluster_urls[cluster]
        except KeyError:
            return DEFAULT_CLUSTER_URLS[cluster]


def _parse_cluster(name: str) -> Cluster:
    try:
        return Cluster(str(name).lower())
    except ValueError:
        known = ", ".join(c.value for c in Cluster)
        raise ValueError(f"unknown cluster {name!r}, expected one of: {known}") from None


def config_from_dict(raw: Mapping[str, Any]) -> ClientConfig:
    urls = _default_cluster_urls()
    for name, url in (raw.get("cluster_urls") or {}).items():
        urls[_parse_cluster(name)] = str(url).rstrip("/")

    kwargs: Dict[str, Any] = {"cluster_urls": urls}
    if raw.get("timeout") is not None:
        timeout = float(raw["timeout"])
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        kwargs["timeout"] = timeout
    if raw.get("user_agent"):
        kwargs["user_agent"] = str(raw["user_agent"])
    if raw.get("default_cluster"):
        kwargs["default_cluster"] = _parse_cluster(raw["default_cluster"])
    return ClientConfig(**kwargs)


def load_config(config_path: Union[str, Path]) -> ClientConfig:
    with Path(config_path).open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")
    return config_from_dict(raw)
