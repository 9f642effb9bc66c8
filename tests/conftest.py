"""Shared pytest fixtures for sol-deployments tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from sol_deployments.config import build_environments
from sol_deployments.fingerprint import fingerprint_args
from sol_deployments.resolver import DeploymentManifestResolver
from sol_deployments.types import Environment

MILLER_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
TOKEN_ADDRESS = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def declarations_file(fixtures_dir: Path) -> Path:
    """Return path to sample declarations JSON file."""
    return fixtures_dir / "declarations.json"


@pytest.fixture
def settings() -> Dict[str, Any]:
    """Resolved settings as read from a populated .env."""
    return {
        "PRIVATE_KEY": "0x" + "ab" * 32,
        "MAINNET_RPC": "https://rpc.example.org",
        "ETHERSCAN_API_KEY": "ETHERSCAN123",
    }


@pytest.fixture
def environments(settings: Dict[str, Any]) -> Dict[str, Environment]:
    """Default environments built from sample settings."""
    return build_environments(settings)


@pytest.fixture
def resolver(environments: Dict[str, Environment], tmp_path: Path) -> DeploymentManifestResolver:
    """Resolver whose relative lock files land in a temporary project root."""
    return DeploymentManifestResolver(environments, project_root=tmp_path)


@pytest.fixture
def sample_lock_json() -> Dict[str, Any]:
    """Lock data matching the declarations fixture's Miller and Token on chain 31337."""
    return {
        "Miller": {
            "address": MILLER_ADDRESS,
            "argsFingerprint": fingerprint_args([]),
            "chainId": 31337,
        },
        "Token": {
            "address": TOKEN_ADDRESS,
            "argsFingerprint": fingerprint_args(["Miller Token", "MLR", 18]),
            "chainId": 31337,
        },
    }


@pytest.fixture
def temp_lock_file(tmp_path: Path, sample_lock_json: Dict[str, Any]) -> Path:
    """Create the localhost lock file in the temporary project root."""
    lock_path = tmp_path / "local.deployment-lock.json"
    with open(lock_path, "w") as f:
        json.dump(sample_lock_json, f, indent=2)
    return lock_path
