"""Release update checks for evm-deployment-info."""

import logging
import os
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import requests

from .constants import (
    API_URL_ENV,
    GITHUB_API_URL,
    GITHUB_REPOSITORY,
    PACKAGE_NAME,
    REPOSITORY_ENV,
    UPDATE_CHECK_TIMEOUT,
)
from .exceptions import UpdateCheckError
from .versions import is_newer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateSettings:
    """Where to look for releases and which version is running."""

    current_version: str
    repository: str = GITHUB_REPOSITORY  # owner/name on GitHub
    api_url: str = GITHUB_API_URL
    timeout: float = UPDATE_CHECK_TIMEOUT

    @classmethod
    def from_env(cls, current_version: Optional[str] = None) -> "UpdateSettings":
        """
        Build settings from the environment.

        Args:
            current_version: Running version (defaults to the installed
                             package version, or "0.0.0" if not installed)

        Returns:
            UpdateSettings with $EVM_DEPLOYMENT_INFO_REPO and
            $EVM_DEPLOYMENT_INFO_API_URL applied when set
        """
        if current_version is None:
            try:
                current_version = version(PACKAGE_NAME)
            except PackageNotFoundError:
                current_version = "0.0.0"

        return cls(
            current_version=current_version,
            repository=os.environ.get(REPOSITORY_ENV, GITHUB_REPOSITORY),
            api_url=os.environ.get(API_URL_ENV, GITHUB_API_URL).rstrip("/"),
        )

    @property
    def latest_release_url(self) -> str:
        return f"{self.api_url}/repos/{self.repository}/releases/latest"


@dataclass(frozen=True)
class UpdateStatus:
    """Result of an update check."""

    current: str
    latest: str
    update_available: bool


def fetch_latest_release_tag(settings: UpdateSettings) -> str:
    """
    Get the tag name of the latest GitHub release.

    Makes exactly one HTTP request; failures are not retried.

    Args:
        settings: Release source settings

    Returns:
        Latest release tag, e.g. "v0.3.0"

    Raises:
        UpdateCheckError: On network errors, non-200 responses, or
                          responses without a tag_name
    """
    try:
        response = requests.get(
            settings.latest_release_url,
            headers={"Accept": "application/vnd.github+json"},
            timeout=settings.timeout,
        )
    except requests.RequestException as e:
        raise UpdateCheckError(f"Network error: {e}") from e

    # Check for HTTP errors
    if response.status_code != 200:
        raise UpdateCheckError(f"Release lookup failed with status {response.status_code}")

    try:
        tag = response.json()["tag_name"]
    except (ValueError, KeyError, TypeError) as e:
        raise UpdateCheckError(f"Unexpected release response: {e}") from e

    if not isinstance(tag, str) or not tag:
        raise UpdateCheckError(f"Unexpected release tag: {tag!r}")

    return tag


def check_for_update(settings: UpdateSettings) -> UpdateStatus:
    """
    Compare the running version with the latest release.

    Args:
        settings: Release source settings

    Returns:
        UpdateStatus describing both versions

    Raises:
        UpdateCheckError: If the latest release cannot be determined
    """
    latest = fetch_latest_release_tag(settings)
    logger.debug("Latest release of %s is %s", settings.repository, latest)
    return UpdateStatus(
        current=settings.current_version,
        latest=latest,
        update_available=is_newer(latest, settings.current_version),
    )


def upgrade_command() -> str:
    """Shell command that installs the latest release."""
    return f"pip install --upgrade {PACKAGE_NAME}"
