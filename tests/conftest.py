"""Shared pytest fixtures for evm-deployment-info tests."""

import json
import shutil
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from evm_deployment_info.store import DeploymentStore


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_project(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample hardhat project into a temporary directory."""
    project_dir = tmp_path / "sample_project"
    shutil.copytree(fixtures_dir / "sample_project", project_dir)
    return project_dir


@pytest.fixture
def sample_store(sample_project: Path) -> DeploymentStore:
    """Deployment store of the sample project."""
    return DeploymentStore(sample_project / "ignition" / "deployments")


@pytest.fixture
def write_record(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing a deployed_addresses.json record into a temporary store.

    Usage: write_record(137, {"Module#Token": "0x1"}) or
    write_record(137, raw='{ invalid json')
    """
    deployments_dir = tmp_path / "ignition" / "deployments"

    def _write(chain_id: int, addresses: Optional[Dict[str, str]] = None, raw: Optional[str] = None) -> Path:
        chain_dir = deployments_dir / f"chain-{chain_id}"
        chain_dir.mkdir(parents=True, exist_ok=True)
        record_path = chain_dir / "deployed_addresses.json"
        record_path.write_text(raw if raw is not None else json.dumps(addresses or {}))
        return record_path

    return _write


@pytest.fixture
def temp_store(tmp_path: Path) -> DeploymentStore:
    """Empty deployment store in a temporary directory (records added via write_record)."""
    return DeploymentStore(tmp_path / "ignition" / "deployments")
