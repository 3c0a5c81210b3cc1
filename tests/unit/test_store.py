"""Unit tests for the on-disk deployment store."""

from pathlib import Path

import pytest

from evm_deployment_info.exceptions import StoreParseError
from evm_deployment_info.store import DeploymentStore
from evm_deployment_info.types import DeploymentRecord


class TestDeploymentStoreLookup:
    """Test per-chain lookups."""

    def test_address_for_deployed_chain(self, sample_store: DeploymentStore):
        """Test that the first address of a chain record is returned."""
        assert sample_store.address(137) == "0x1111111111111111111111111111111111111111"

    def test_address_for_chain_without_directory(self, sample_store: DeploymentStore):
        """Test that a chain without a directory has no address."""
        assert sample_store.has_chain(80002) is False
        assert sample_store.address(80002) is None

    def test_address_for_chain_with_empty_record(self, sample_store: DeploymentStore):
        """Test that a chain directory with an empty record has no address."""
        assert sample_store.has_chain(11155111) is True
        assert sample_store.address(11155111) is None

    def test_address_for_chain_directory_without_record(self, temp_store: DeploymentStore):
        """Test that an empty chain directory has no address."""
        temp_store.chain_dir(5).mkdir(parents=True)
        assert temp_store.address(5) is None

    def test_record(self, sample_store: DeploymentStore):
        """Test that record() wraps the address in a DeploymentRecord."""
        assert sample_store.record(10) == DeploymentRecord(
            chain_id=10, address="0x4444444444444444444444444444444444444444"
        )
        assert sample_store.record(80002) == DeploymentRecord(chain_id=80002, address=None)

    def test_malformed_record_raises(self, temp_store: DeploymentStore, write_record):
        """Test that a malformed record propagates StoreParseError."""
        write_record(1, raw="not json")

        with pytest.raises(StoreParseError):
            temp_store.address(1)


class TestDeploymentStoreEnumeration:
    """Test chain enumeration and counting."""

    def test_chain_ids_sorted_ascending(self, sample_store: DeploymentStore):
        """Test that chain ids are listed numerically, not lexicographically."""
        assert sample_store.chain_ids() == [1, 10, 137, 421614, 11155111]

    def test_ignores_non_chain_directories(self, temp_store: DeploymentStore, write_record):
        """Test that directories not named chain-<digits> are skipped."""
        write_record(137, {"A#Token": "0x1"})
        (temp_store.deployments_dir / "chain-abc").mkdir()
        (temp_store.deployments_dir / "localhost").mkdir()
        (temp_store.deployments_dir / "chain-1.json").write_text("{}")

        assert temp_store.chain_ids() == [137]

    def test_missing_store_directory_is_empty(self, tmp_path: Path):
        """Test that a missing store has no chains."""
        store = DeploymentStore(tmp_path / "does_not_exist")

        assert store.chain_ids() == []
        assert store.count() == 0

    def test_count_counts_deployment_directories(self, sample_store: DeploymentStore):
        """Test that count() counts every deployment directory."""
        assert sample_store.count() == 5
