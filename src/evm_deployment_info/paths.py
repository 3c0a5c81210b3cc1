"""Path management utilities for evm-deployment-info."""

from pathlib import Path
from typing import Optional, Union

from .constants import CHAIN_DIR_PREFIX, CONFIG_FILENAME, DEPLOYMENTS_DIR, RECORD_FILENAME
from .exceptions import ConfigNotFoundError


def get_config_path(
    root: Union[Path, str], config_filename: Optional[str] = None
) -> Path:
    """
    Get the hardhat config path of a project.

    Args:
        root: Project root directory
        config_filename: Config file name (defaults to hardhat.config.ts)

    Returns:
        Absolute path to the config file
    """
    return Path(root).absolute() / (config_filename or CONFIG_FILENAME)


def get_deployments_dir(
    root: Union[Path, str], deployments_dir: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the deployment store directory of a project.

    Args:
        root: Project root directory
        deployments_dir: Store directory, relative to root unless absolute
                         (defaults to ignition/deployments)

    Returns:
        Absolute path to the deployment store directory
    """
    return Path(root).absolute() / (deployments_dir or DEPLOYMENTS_DIR)


def chain_dir_name(chain_id: int) -> str:
    """Directory name holding the deployment record of a chain, e.g. chain-137."""
    return f"{CHAIN_DIR_PREFIX}{chain_id}"


def get_record_path(deployments_dir: Path, chain_id: int) -> Path:
    """Path of the address record for a chain inside the store directory."""
    return deployments_dir / chain_dir_name(chain_id) / RECORD_FILENAME


def validate_hardhat_project(
    root: Union[Path, str], config_filename: Optional[str] = None
) -> Path:
    """
    Check that root is a hardhat project.

    Args:
        root: Project root directory
        config_filename: Config file name (defaults to hardhat.config.ts)

    Returns:
        Path to the config file

    Raises:
        ConfigNotFoundError: If the config file does not exist
    """
    config_path = get_config_path(root, config_filename)
    if not config_path.is_file():
        raise ConfigNotFoundError(config_path)
    return config_path
