"""Custom exception classes for sol-deployments library."""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class UnknownEnvironmentError(DeploymentError, ValueError):
    """Raised when requested environment is not configured."""

    pass


class DuplicateContractNameError(DeploymentError, ValueError):
    """Raised when a declaration set names the same contract twice."""

    pass


class MalformedLockFileError(DeploymentError, ValueError):
    """Raised when a lock file cannot be parsed or does not match the lock schema."""

    pass


class DeclarationsNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a declarations file is not found."""

    pass


class MalformedDeclarationError(DeploymentError, ValueError):
    """Raised when a contract declaration has an unusable shape."""

    pass


class UnplannedResultError(DeploymentError, ValueError):
    """Raised when commit receives a result for a contract the plan does not deploy."""

    pass


class InvalidResultError(DeploymentError, ValueError):
    """Raised when commit receives a deployment result without a usable address."""

    pass


class ChainIdError(DeploymentError, ValueError):
    """Raised when an environment's chain id cannot be determined."""

    pass


class RpcError(DeploymentError, RuntimeError):
    """Raised when an RPC endpoint cannot be reached or answers with a non-200 status."""

    pass
