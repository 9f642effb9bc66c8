"""
sol-deployments: toolchain configuration and idempotent contract deployment plans
"""

from importlib.metadata import PackageNotFoundError, version

from .config import ToolchainConfig, load_config
from .exceptions import (
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
from .fingerprint import fingerprint_args
from .resolver import DeploymentManifestResolver
from .types import (
    ContractDeclaration,
    DeploymentAction,
    DeploymentPlan,
    DeploymentResult,
    Environment,
    LockEntry,
    PlanStep,
)

try:
    __version__ = version("sol-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentManifestResolver",
    "ToolchainConfig",
    "load_config",
    "fingerprint_args",
    "ContractDeclaration",
    "DeploymentAction",
    "DeploymentPlan",
    "DeploymentResult",
    "Environment",
    "LockEntry",
    "PlanStep",
    "DeploymentError",
    "UnknownEnvironmentError",
    "DuplicateContractNameError",
    "MalformedLockFileError",
    "MalformedDeclarationError",
    "DeclarationsNotFoundError",
    "UnplannedResultError",
    "InvalidResultError",
    "ChainIdError",
    "RpcError",
]
