"""
evm-deployment-info: reconcile hardhat deployments on disk against hardhat config networks
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("evm-deployment-info")
except PackageNotFoundError:
    __version__ = "0.0.0"

from .aggregate import aggregate, split_network_name, title_case
from .exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    DeploymentInfoError,
    SinkWriteError,
    StoreError,
    StoreParseError,
    StoreReadError,
    UpdateCheckError,
)
from .parsers import extract_networks, load_networks, read_deployed_address
from .reconcile import reconcile
from .render import OutputFormat, render_audit, render_listing, write_output
from .store import DeploymentStore
from .types import (
    AggregationGroup,
    DeploymentRecord,
    NetworkEntry,
    ReconciliationResult,
)

__all__ = [
    "extract_networks",
    "load_networks",
    "read_deployed_address",
    "DeploymentStore",
    "reconcile",
    "aggregate",
    "split_network_name",
    "title_case",
    "OutputFormat",
    "render_listing",
    "render_audit",
    "write_output",
    "NetworkEntry",
    "DeploymentRecord",
    "ReconciliationResult",
    "AggregationGroup",
    "DeploymentInfoError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigReadError",
    "StoreError",
    "StoreReadError",
    "StoreParseError",
    "SinkWriteError",
    "UpdateCheckError",
]
