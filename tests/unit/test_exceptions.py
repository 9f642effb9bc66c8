"""Unit tests for custom exception classes."""

import pytest

from sol_deployments.exceptions import (
    ChainIdError,
    DeclarationsNotFoundError,
    DeploymentError,
    DuplicateContractNameError,
    InvalidResultError,
    MalformedDeclarationError,
    MalformedLockFileError,
    RpcError,
    UnknownEnvironmentError,
    UnplannedResultError,
)

ALL_EXCEPTIONS = [
    DeploymentError,
    UnknownEnvironmentError,
    DuplicateContractNameError,
    MalformedLockFileError,
    DeclarationsNotFoundError,
    MalformedDeclarationError,
    UnplannedResultError,
    InvalidResultError,
    ChainIdError,
    RpcError,
]


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_declarations_not_found_as_file_not_found_error(self):
        """Test that DeclarationsNotFoundError can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            raise DeclarationsNotFoundError("test")

    @pytest.mark.parametrize(
        "exc_class",
        [
            UnknownEnvironmentError,
            DuplicateContractNameError,
            MalformedLockFileError,
            MalformedDeclarationError,
            UnplannedResultError,
            InvalidResultError,
            ChainIdError,
        ],
    )
    def test_catch_as_value_error(self, exc_class):
        """Test that configuration and data errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise exc_class("test")

    def test_catch_rpc_error_as_runtime_error(self):
        """Test that RpcError can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            raise RpcError("test")

    def test_catch_all_as_deployment_error(self):
        """Test that all custom exceptions can be caught as DeploymentError."""
        for exc_class in ALL_EXCEPTIONS:
            with pytest.raises(DeploymentError):
                raise exc_class("test")


class TestExceptionCreation:
    """Test creating exceptions with various message types."""

    def test_exceptions_accept_string_messages(self):
        """Test that all exceptions accept string messages."""
        for exc_class in ALL_EXCEPTIONS:
            exc = exc_class("test message")
            assert str(exc) == "test message"
