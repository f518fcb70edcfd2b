"""Cluster, commitment and encoding selectors."""

from enum import Enum


class Cluster(Enum):
    """Solana deployment targets."""

    LOCALNET = "localnet"
    DEVNET = "devnet"
    TESTNET = "testnet"
    MAINNET_BETA = "mainnet-beta"

    @classmethod
    def default(cls) -> "Cluster":
        return cls.DEVNET

    @property
    def url(self) -> str:
        return DEFAULT_CLUSTER_URLS[self]


DEFAULT_CLUSTER_URLS = {
    Cluster.LOCALNET: "http://127.0.0.1:8899",
    Cluster.DEVNET: "https://api.devnet.solana.com",
    Cluster.TESTNET: "https://api.testnet.solana.com",
    Cluster.MAINNET_BETA: "https://api.mainnet-beta.solana.com",
}


class Commitment(Enum):
    """How settled a block must be before the node answers from it."""

    PROCESSED = "processed"
    CONFIRMED = "confirmed"
    FINALIZED = "finalized"
    INVALID_COMMITMENT = "invalid_commitment"

    @classmethod
    def default(cls) -> "Commitment":
        return cls.FINALIZED

    @classmethod
    def parse(cls, value: str) -> "Commitment":
        """Case-insensitive lookup. Unknown strings give INVALID_COMMITMENT, callers must check."""
        lowered = value.lower()
        for member in (cls.PROCESSED, cls.CONFIRMED, cls.FINALIZED):
            if member.value == lowered:
                return member
        return cls.INVALID_COMMITMENT

    @property
    def is_valid(self) -> bool:
        return self is not Commitment.INVALID_COMMITMENT


class Encoding(Enum):
    BASE58 = "base58"
    BASE64 = "base64"
    UNSUPPORTED_ENCODING = "unsupported_encoding"

    @classmethod
    def parse(cls, value: str) -> "Encoding":
        lowered = value.lower()
        for member in (cls.BASE58, cls.BASE64):
            if member.value == lowered:
                return member
        return cls.UNSUPPORTED_ENCODING

    @property
    def is_valid(self) -> bool:
        return self is not Encoding.UNSUPPORTED_ENCODING
