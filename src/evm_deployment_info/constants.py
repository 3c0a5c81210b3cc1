"""Configuration constants for evm-deployment-info."""

# Hardhat project layout
CONFIG_FILENAME = "hardhat.config.ts"
DEPLOYMENTS_DIR = "ignition/deployments"  # Relative to project root
CHAIN_DIR_PREFIX = "chain-"  # e.g. chain-137
RECORD_FILENAME = "deployed_addresses.json"

# The in-process development network never has on-disk deployments
EXCLUDED_NETWORK = "hardhat"

# Suffix assigned to network names without a camel-case boundary;
# always sorted first inside an ecosystem group
MAINNET_SUFFIX = "Mainnet"

# Largest chain id accepted from config (unsigned 64-bit)
MAX_CHAIN_ID = 2**64 - 1

# Release source for update checks
PACKAGE_NAME = "evm-deployment-info"
GITHUB_REPOSITORY = "henrymbaldwin/evm-deployment-info-cli"
GITHUB_API_URL = "https://api.github.com"
UPDATE_CHECK_TIMEOUT = 10  # seconds

# Environment variables overriding the update-check defaults
REPOSITORY_ENV = "EVM_DEPLOYMENT_INFO_REPO"
API_URL_ENV = "EVM_DEPLOYMENT_INFO_API_URL"
