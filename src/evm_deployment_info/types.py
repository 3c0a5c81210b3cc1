"""Data types and dataclasses for evm-deployment-info."""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class NetworkEntry:
    """A deployment target declared in the hardhat config."""

    name: str  # Case-sensitive, e.g. "polygonAmoy"
    chain_id: int


@dataclass(frozen=True)
class DeploymentRecord:
    """The on-disk deployment record of one chain."""

    chain_id: int
    address: Optional[str] = None  # First address found in the record


@dataclass
class ReconciliationResult:
    """Config networks cross-referenced against the deployment store."""

    found: List[Tuple[str, str]] = field(default_factory=list)  # (name, address)
    missing: List[str] = field(default_factory=list)  # Config network, no address
    orphaned: List[int] = field(default_factory=list)  # Store chain id, no config network

    # Config mapping the result was computed from (name -> chain id)
    networks: Dict[str, int] = field(default_factory=dict)


@dataclass
class AggregationGroup(Generic[V]):
    """Networks sharing an ecosystem prefix, e.g. "polygon" -> Mainnet, Amoy."""

    prefix: str
    entries: List[Tuple[str, V]] = field(default_factory=list)  # (suffix, value)

