"""Chain id discovery for sol-deployments library."""

import logging

import requests

from .exceptions import ChainIdError, RpcError
from .types import Environment

logger = logging.getLogger(__name__)


def get_chain_id(rpc_url: str) -> int:
    """
    Fetch the chain id of a network via JSON-RPC.

    Args:
        rpc_url: RPC endpoint URL

    Returns:
        Chain id reported by the node

    Raises:
        ChainIdError: If RPC returns an error or an unparseable result
        RpcError: If network error occurs or the request fails
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=30,
        )
    except requests.RequestException as e:
        raise RpcError(f"Network error during RPC call: {e}") from e

    # Check for HTTP errors
    if response.status_code != 200:
        raise RpcError(f"RPC request failed with status {response.status_code}")

    try:
        result = response.json()
    except ValueError as e:
        raise ChainIdError(f"RPC response from {rpc_url} is not JSON: {e}") from e

    # Check for RPC errors
    if "error" in result:
        raise ChainIdError(f"RPC error: {result['error']}")

    # Chain id comes back hex-encoded, e.g. "0x1"
    try:
        return int(result["result"], 16)
    except (KeyError, TypeError, ValueError) as e:
        raise ChainIdError(f"Unexpected eth_chainId response from {rpc_url}: {result!r}") from e


def resolve_chain_id(environment: Environment) -> int:
    """
    Get an environment's chain id, asking its RPC endpoint only if unconfigured.

    Args:
        environment: Deployment environment

    Returns:
        Chain id

    Raises:
        ChainIdError: If chain id is unconfigured and there is no RPC URL to ask
    """
    if environment.chain_id is not None:
        return environment.chain_id

    if not environment.rpc_url:
        raise ChainIdError(
            f"Environment '{environment.name}' has neither a chain id nor an RPC URL"
        )

    chain_id = get_chain_id(environment.rpc_url)
    logger.info(f"Discovered chain id {chain_id} for environment '{environment.name}'")
    return chain_id
