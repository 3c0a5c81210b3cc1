"""Reconciliation of config networks against on-disk deployments."""

import logging
from typing import Dict, List, Tuple

from .constants import EXCLUDED_NETWORK
from .exceptions import StoreError
from .store import DeploymentStore
from .types import NetworkEntry, ReconciliationResult

logger = logging.getLogger(__name__)


def _classify_networks(
    networks: Dict[str, int], store: DeploymentStore
) -> Tuple[List[Tuple[str, str]], List[str]]:
    """
    Resolve each config network against the store.

    Args:
        networks: Config mapping of network name -> chain id
        store: Deployment store to resolve against

    Returns:
        Tuple of (found, missing) in config order where:
        - found: (name, address) for networks with a resolvable address
        - missing: names of networks without one
    """
    found: List[Tuple[str, str]] = []
    missing: List[str] = []

    for name, chain_id in networks.items():
        if name == EXCLUDED_NETWORK:
            continue

        try:
            address = store.address(chain_id)
        except StoreError as e:
            # One unreadable record must not abort the whole listing
            logger.warning("Treating network '%s' as missing: %s", name, e)
            address = None

        if address is None:
            missing.append(name)
        else:
            found.append((name, address))

    return found, missing


def find_orphaned(networks: Dict[str, int], store: DeploymentStore) -> List[int]:
    """
    Find store chain ids that no config network refers to.

    Args:
        networks: Config mapping of network name -> chain id
        store: Deployment store to enumerate

    Returns:
        Orphaned chain ids, ascending

    Raises:
        StoreReadError: If the store directory cannot be listed
    """
    configured = set(networks.values())
    return [chain_id for chain_id in store.chain_ids() if chain_id not in configured]


def reconcile(networks: Dict[str, int], store: DeploymentStore) -> ReconciliationResult:
    """
    Cross-reference config networks with deployment records by chain id.

    The "hardhat" network is skipped. Record errors for a single network are
    logged and that network is reported as missing.

    Args:
        networks: Config mapping of network name -> chain id
        store: Deployment store to resolve against

    Returns:
        ReconciliationResult with found and missing sorted by name and
        orphaned sorted ascending

    Raises:
        StoreReadError: If the store directory cannot be listed
    """
    found, missing = _classify_networks(networks, store)
    orphaned = find_orphaned(networks, store)

    logger.info(
        "Reconciled %d networks: %d found, %d missing, %d orphaned",
        len(found) + len(missing),
        len(found),
        len(missing),
        len(orphaned),
    )

    return ReconciliationResult(
        found=sorted(found),
        missing=sorted(missing),
        orphaned=orphaned,
        networks=dict(networks),
    )


def audit_entries(result: ReconciliationResult) -> List[NetworkEntry]:
    """
    List config networks without a deployment, with their chain ids.

    Args:
        result: Reconciliation result to project

    Returns:
        One NetworkEntry per missing network, in name order
    """
    return [
        NetworkEntry(name=name, chain_id=result.networks[name])
        for name in result.missing
    ]
