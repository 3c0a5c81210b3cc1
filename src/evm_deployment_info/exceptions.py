"""Custom exception classes for evm-deployment-info."""

from pathlib import Path
from typing import Union


class DeploymentInfoError(Exception):
    """Base exception for all evm-deployment-info errors."""

    pass


class ConfigNotFoundError(DeploymentInfoError, FileNotFoundError):
    """Raised when the hardhat config file does not exist."""

    def __init__(self, path: Union[Path, str]):
        self.path = Path(path)
        super().__init__(f"No {self.path.name} found at {self.path}")

    def __str__(self) -> str:
        return self.args[0]


class ConfigReadError(DeploymentInfoError, OSError):
    """Raised when the hardhat config file exists but cannot be read or decoded."""

    def __init__(self, path: Union[Path, str], cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to read config {self.path}: {cause}")

    def __str__(self) -> str:
        return self.args[0]


class ConfigParseError(DeploymentInfoError, ValueError):
    """Raised when a network's chainId cannot be parsed as an unsigned integer."""

    def __init__(self, network: str, raw_value: str):
        self.network = network
        self.raw_value = raw_value
        super().__init__(
            f"Invalid chainId {raw_value!r} for network '{network}' in config"
        )


class StoreError(DeploymentInfoError):
    """Base exception for deployment store failures."""

    summary = "Deployment store error at"

    def __init__(self, path: Union[Path, str], cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.summary} {self.path}: {cause}")

    def __str__(self) -> str:
        return self.args[0]


class StoreReadError(StoreError, OSError):
    """Raised when a deployment record or the store directory cannot be read."""

    summary = "Failed to read deployment store"


class StoreParseError(StoreError, ValueError):
    """Raised when a deployment record exists but its structure is unreadable."""

    summary = "Malformed deployment record"


class SinkWriteError(DeploymentInfoError, OSError):
    """Raised when rendered output cannot be written to its destination file."""

    def __init__(self, path: Union[Path, str], cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write output to {self.path}: {cause}")

    def __str__(self) -> str:
        return self.args[0]


class UpdateCheckError(DeploymentInfoError, RuntimeError):
    """Raised when the latest release cannot be determined."""

    def __init__(self, cause: Union[BaseException, str]):
        self.cause = cause
        super().__init__(f"Update check failed: {cause}")
