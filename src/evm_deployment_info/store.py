"""On-disk deployment store for evm-deployment-info."""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from .constants import CHAIN_DIR_PREFIX
from .exceptions import StoreReadError
from .parsers import read_deployed_address
from .paths import chain_dir_name, get_record_path
from .types import DeploymentRecord

logger = logging.getLogger(__name__)

_CHAIN_DIR = re.compile(rf"{re.escape(CHAIN_DIR_PREFIX)}(\d+)")


class DeploymentStore:
    """Deployment records of a hardhat ignition project, one directory per chain."""

    def __init__(self, deployments_dir: Union[Path, str]):
        """
        Initialize the deployment store.

        Args:
            deployments_dir: Directory holding chain-<id> subdirectories.
                             It need not exist; a missing store is empty.
        """
        self.deployments_dir = Path(deployments_dir)

    def chain_dir(self, chain_id: int) -> Path:
        """Directory holding the record of a chain."""
        return self.deployments_dir / chain_dir_name(chain_id)

    def has_chain(self, chain_id: int) -> bool:
        """
        Check if the store has a directory for a chain.

        Args:
            chain_id: Chain id to check

        Returns:
            True if chain-<id> exists, False otherwise
        """
        return self.chain_dir(chain_id).is_dir()

    def address(self, chain_id: int) -> Optional[str]:
        """
        Get the deployed address for a chain.

        Args:
            chain_id: Chain id to look up

        Returns:
            First address in the chain's record, or None if the chain has
            no directory, no record, or an empty record

        Raises:
            StoreReadError: If the record cannot be read
            StoreParseError: If the record is malformed
        """
        if not self.has_chain(chain_id):
            return None
        return read_deployed_address(get_record_path(self.deployments_dir, chain_id))

    def record(self, chain_id: int) -> DeploymentRecord:
        """Get the deployment record of a chain (address may be None)."""
        return DeploymentRecord(chain_id=chain_id, address=self.address(chain_id))

    def _chain_entries(self) -> List[Path]:
        if not self.deployments_dir.is_dir():
            return []
        try:
            return [entry for entry in self.deployments_dir.iterdir() if entry.is_dir()]
        except OSError as e:
            raise StoreReadError(self.deployments_dir, e) from e

    def chain_ids(self) -> List[int]:
        """
        Get all chain ids with a directory in the store.

        Directories not named chain-<digits> are ignored.

        Returns:
            Chain ids sorted ascending; empty if the store directory is missing

        Raises:
            StoreReadError: If the store directory cannot be listed
        """
        chain_ids = []
        for entry in self._chain_entries():
            match = _CHAIN_DIR.fullmatch(entry.name)
            if match is None:
                logger.debug("Ignoring non-chain directory %s", entry)
                continue
            chain_ids.append(int(match.group(1)))
        return sorted(chain_ids)

    def count(self) -> int:
        """Number of deployment directories in the store."""
        return len(self._chain_entries())
