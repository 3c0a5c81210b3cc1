"""Unit tests for custom exception classes."""

from pathlib import Path

import pytest

from evm_deployment_info.exceptions import (
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


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_config_not_found_as_file_not_found_error(self):
        """Test that ConfigNotFoundError can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            raise ConfigNotFoundError("hardhat.config.ts")

    def test_catch_config_parse_error_as_value_error(self):
        with pytest.raises(ValueError):
            raise ConfigParseError("polygon", "abc")

    def test_catch_config_read_error_as_os_error(self):
        with pytest.raises(OSError):
            raise ConfigReadError("hardhat.config.ts", PermissionError("denied"))

    def test_catch_store_read_error_as_os_error(self):
        with pytest.raises(OSError):
            raise StoreReadError("chain-1", PermissionError("denied"))

    def test_catch_store_parse_error_as_value_error(self):
        with pytest.raises(ValueError):
            raise StoreParseError("chain-1", ValueError("bad json"))

    def test_catch_store_errors_as_store_error(self):
        """Test that both store failures share the StoreError base."""
        for exc in (StoreReadError("a", OSError("x")), StoreParseError("a", ValueError("y"))):
            with pytest.raises(StoreError):
                raise exc

    def test_catch_sink_write_error_as_os_error(self):
        with pytest.raises(OSError):
            raise SinkWriteError("out.csv", IsADirectoryError("is a directory"))

    def test_catch_update_check_error_as_runtime_error(self):
        with pytest.raises(RuntimeError):
            raise UpdateCheckError("timeout")

    def test_catch_all_as_deployment_info_error(self):
        """Test that all custom exceptions can be caught as DeploymentInfoError."""
        exceptions = [
            ConfigNotFoundError("hardhat.config.ts"),
            ConfigParseError("polygon", "abc"),
            ConfigReadError("hardhat.config.ts", OSError("w")),
            StoreReadError("chain-1", OSError("x")),
            StoreParseError("chain-1", ValueError("y")),
            SinkWriteError("out.csv", OSError("z")),
            UpdateCheckError("timeout"),
        ]

        for exc in exceptions:
            with pytest.raises(DeploymentInfoError):
                raise exc


class TestExceptionAttributes:
    """Test the context carried by each exception."""

    def test_config_not_found(self):
        exc = ConfigNotFoundError(Path("/project/hardhat.config.ts"))

        assert exc.path == Path("/project/hardhat.config.ts")
        assert str(exc) == "No hardhat.config.ts found at /project/hardhat.config.ts"

    def test_config_parse_error(self):
        exc = ConfigParseError("polygon", "0x89")

        assert exc.network == "polygon"
        assert exc.raw_value == "0x89"
        assert "polygon" in str(exc)
        assert "0x89" in str(exc)

    def test_config_read_error(self):
        cause = PermissionError("denied")
        exc = ConfigReadError("/project/hardhat.config.ts", cause)

        assert exc.path == Path("/project/hardhat.config.ts")
        assert exc.cause is cause
        assert str(exc) == "Failed to read config /project/hardhat.config.ts: denied"

    def test_store_read_error(self):
        cause = PermissionError("denied")
        exc = StoreReadError("/store/chain-1", cause)

        assert exc.path == Path("/store/chain-1")
        assert exc.cause is cause
        assert str(exc) == "Failed to read deployment store /store/chain-1: denied"

    def test_store_parse_error(self):
        exc = StoreParseError("/store/chain-1/deployed_addresses.json", ValueError("bad"))
        assert str(exc) == "Malformed deployment record /store/chain-1/deployed_addresses.json: bad"

    def test_sink_write_error(self):
        cause = OSError("disk full")
        exc = SinkWriteError("out.csv", cause)

        assert exc.cause is cause
        assert str(exc) == "Failed to write output to out.csv: disk full"

    def test_update_check_error(self):
        exc = UpdateCheckError("timeout")

        assert exc.cause == "timeout"
        assert str(exc) == "Update check failed: timeout"
