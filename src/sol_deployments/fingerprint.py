"""Constructor argument fingerprinting for sol-deployments library."""

import hashlib
import json
from typing import Any, Dict, List, Union

from .exceptions import MalformedDeclarationError


def _encode_value(value: Any) -> Any:
    # Raw bytes are fingerprinted the way they are passed on-chain
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    raise TypeError(f"Unsupported argument type: {type(value).__name__}")


def canonical_args(args: Union[List[Any], Dict[str, Any]]) -> str:
    """
    Encode constructor arguments as canonical JSON.

    Mapping keys are sorted at every depth, so named arguments are
    order-independent. List order is kept, so positional arguments are
    order-dependent.

    Args:
        args: Positional list or named mapping of constructor arguments

    Returns:
        Compact JSON string

    Raises:
        MalformedDeclarationError: If an argument is not JSON-representable
    """
    try:
        return json.dumps(
            args,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_value,
        )
    except (TypeError, ValueError) as e:
        raise MalformedDeclarationError(f"Cannot fingerprint arguments: {e}") from e


def fingerprint_args(args: Union[List[Any], Dict[str, Any]]) -> str:
    """
    Compute a stable fingerprint of constructor arguments.

    Args:
        args: Positional list or named mapping of constructor arguments

    Returns:
        0x-prefixed SHA-256 hex digest of the canonical encoding

    Raises:
        MalformedDeclarationError: If arguments have no canonical UTF-8 encoding
    """
    try:
        encoded = canonical_args(args).encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates survive JSON parsing but have no UTF-8 form
        raise MalformedDeclarationError(f"Cannot fingerprint arguments: {e}") from e
    digest = hashlib.sha256(encoded).hexdigest()
    return f"0x{digest}"
