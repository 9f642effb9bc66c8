"""Toolchain configuration assembled from .env settings."""

import copy
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from .constants import (
    APPEND_CBOR,
    DEFAULT_CONTRACTS,
    DEFAULT_RPC,
    ENVIRONMENT_CONFIG,
    ETHERSCAN_API_KEY_ENV,
    MAINNET_RPC_ENV,
    PRIVATE_KEY_ENV,
    SOLC_VERSION,
    SOURCES_DIR,
    TESTS_DIR,
    ZERO_HASH,
)
from .paths import get_env_file_path
from .types import Environment

logger = logging.getLogger(__name__)

SETTING_KEYS = (PRIVATE_KEY_ENV, MAINNET_RPC_ENV, ETHERSCAN_API_KEY_ENV)

REDACTED = "<redacted>"


@dataclass
class ToolchainConfig:
    """Compiler, path, network, and verification settings for the toolchain."""

    environments: Dict[str, Environment]
    solc_version: str = SOLC_VERSION
    append_cbor: bool = APPEND_CBOR
    sources_dir: str = SOURCES_DIR
    tests_dir: str = TESTS_DIR
    etherscan_api_keys: Dict[str, Optional[str]] = field(default_factory=dict)

    def to_dict(self, redact: bool = True) -> Dict[str, Any]:
        """
        Render the config in the shape the contract toolchain expects.

        Args:
            redact: Replace account keys and API keys with a placeholder

        Returns:
            JSON-serializable config dictionary
        """
        networks: Dict[str, Any] = {}
        for name, env in self.environments.items():
            network: Dict[str, Any] = {}
            if env.rpc_url is not None:
                network["url"] = env.rpc_url
            if env.accounts:
                network["accounts"] = [REDACTED if redact else a for a in env.accounts]

            deployment: Dict[str, Any] = {"config": env.contracts}
            if env.lock_file is not None:
                deployment["lockFile"] = env.lock_file
            if env.verify:
                deployment["verify"] = True
            if env.plugins:
                deployment["plugins"] = list(env.plugins)
            network["deployment"] = deployment

            networks[name] = network

        api_keys = {
            name: (REDACTED if redact and key else key)
            for name, key in self.etherscan_api_keys.items()
        }

        return {
            "solidity": {
                "compilers": [{"version": self.solc_version}],
                "metadata": {"appendCBOR": self.append_cbor},
            },
            "paths": {"sources": self.sources_dir, "tests": self.tests_dir},
            "networks": networks,
            "etherscan": {"apiKey": api_keys},
        }


def read_settings(
    env_file: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    project_root: Optional[Union[Path, str]] = None,
) -> Dict[str, Optional[str]]:
    """
    Read toolchain settings from a .env file and the process environment.

    Process environment values override the .env file. Empty values count
    as unset.

    Args:
        env_file: Path to .env file (defaults to {project_root}/.env)
        environ: Environment mapping (defaults to os.environ)
        project_root: Project directory (defaults to ./)

    Returns:
        Dictionary with PRIVATE_KEY, MAINNET_RPC, ETHERSCAN_API_KEY (None if unset)
    """
    env_path = Path(env_file) if env_file is not None else get_env_file_path(project_root)
    if environ is None:
        environ = os.environ

    if env_path.exists():
        file_values = dotenv_values(env_path)
    else:
        # Not fatal: CI and local runs can rely on the process environment
        logger.warning(f"No .env file found at {env_path}")
        file_values = {}

    settings: Dict[str, Optional[str]] = {}
    for key in SETTING_KEYS:
        settings[key] = environ.get(key) or file_values.get(key) or None

    return settings


def build_environments(
    settings: Mapping[str, Optional[str]],
    contracts: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Environment]:
    """
    Assemble every configured environment from resolved settings.

    Args:
        settings: Resolved settings, as returned by read_settings()
        contracts: Declaration set shared by all environments
                   (defaults to DEFAULT_CONTRACTS)

    Returns:
        Dictionary mapping environment name -> Environment
    """
    if contracts is None:
        contracts = DEFAULT_CONTRACTS

    environments: Dict[str, Environment] = {}
    for name, env_config in ENVIRONMENT_CONFIG.items():
        rpc_url = env_config.get("rpc_url")
        if "rpc_url_env" in env_config:
            rpc_url = settings.get(env_config["rpc_url_env"]) or DEFAULT_RPC

        accounts = []
        if env_config.get("deployer"):
            accounts = [settings.get(PRIVATE_KEY_ENV) or ZERO_HASH]

        environments[name] = Environment(
            name=name,
            chain_id=env_config["chain_id"],
            rpc_url=rpc_url,
            accounts=accounts,
            lock_file=env_config["lock_file"],
            verify=env_config["verify"],
            plugins=list(env_config["plugins"]),
            contracts=copy.deepcopy(dict(contracts)),
        )

    return environments


def load_config(
    env_file: Optional[Union[Path, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    project_root: Optional[Union[Path, str]] = None,
) -> ToolchainConfig:
    """
    Load the full toolchain configuration.

    Args:
        env_file: Path to .env file (defaults to {project_root}/.env)
        environ: Environment mapping (defaults to os.environ)
        project_root: Project directory (defaults to ./)

    Returns:
        ToolchainConfig
    """
    settings = read_settings(env_file, environ, project_root)

    if settings[PRIVATE_KEY_ENV] is None:
        logger.warning(f"{PRIVATE_KEY_ENV} not set, mainnet deployer falls back to the zero key")

    return ToolchainConfig(
        environments=build_environments(settings),
        etherscan_api_keys={"mainnet": settings[ETHERSCAN_API_KEY_ENV]},
    )
