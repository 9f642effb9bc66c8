"""Deployment lock file management for sol-deployments library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping

from .constants import LOCK_ADDRESS_KEY, LOCK_CHAIN_ID_KEY, LOCK_FINGERPRINT_KEY
from .exceptions import MalformedLockFileError
from .types import LockEntry

logger = logging.getLogger(__name__)


def _parse_lock_entry(name: str, raw: Any, lock_path: Path) -> LockEntry:
    if not isinstance(raw, dict):
        raise MalformedLockFileError(
            f"Lock entry for '{name}' in {lock_path} must be an object"
        )

    address = raw.get(LOCK_ADDRESS_KEY)
    fingerprint = raw.get(LOCK_FINGERPRINT_KEY)
    chain_id = raw.get(LOCK_CHAIN_ID_KEY)

    if not isinstance(address, str) or not address:
        raise MalformedLockFileError(
            f"Lock entry for '{name}' in {lock_path} has no valid '{LOCK_ADDRESS_KEY}'"
        )
    if not isinstance(fingerprint, str) or not fingerprint:
        raise MalformedLockFileError(
            f"Lock entry for '{name}' in {lock_path} has no valid '{LOCK_FINGERPRINT_KEY}'"
        )
    # bool is an int subclass, but never a chain id
    if not isinstance(chain_id, int) or isinstance(chain_id, bool):
        raise MalformedLockFileError(
            f"Lock entry for '{name}' in {lock_path} has no valid '{LOCK_CHAIN_ID_KEY}'"
        )

    return LockEntry(address=address, args_fingerprint=fingerprint, chain_id=chain_id)


def load_lock_file(lock_path: Path) -> Dict[str, LockEntry]:
    """
    Load lock entries from disk.

    Args:
        lock_path: Path to lock JSON file

    Returns:
        Dictionary mapping contract name -> LockEntry
        Empty dict if file doesn't exist (nothing deployed yet)

    Raises:
        MalformedLockFileError: If file is not valid JSON or violates the lock schema
                                or exists but cannot be read
    """
    try:
        with open(lock_path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug(f"No lock file at {lock_path}, starting empty")
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedLockFileError(f"Lock file {lock_path} is not valid JSON: {e}") from e
    except OSError as e:
        raise MalformedLockFileError(f"Lock file {lock_path} cannot be read: {e}") from e

    if not isinstance(data, dict):
        raise MalformedLockFileError(f"Lock file {lock_path} must contain a JSON object")

    entries = {name: _parse_lock_entry(name, raw, lock_path) for name, raw in data.items()}
    logger.debug(f"Loaded {len(entries)} lock entries from {lock_path}")
    return entries


def dump_lock_entries(entries: Mapping[str, LockEntry]) -> Dict[str, Dict[str, Any]]:
    """Convert lock entries to the on-disk JSON shape."""
    return {
        name: {
            LOCK_ADDRESS_KEY: entry.address,
            LOCK_FINGERPRINT_KEY: entry.args_fingerprint,
            LOCK_CHAIN_ID_KEY: entry.chain_id,
        }
        for name, entry in entries.items()
    }


def save_lock_file(entries: Mapping[str, LockEntry], lock_path: Path) -> None:
    """
    Save lock entries to disk.

    Args:
        entries: Mapping of contract name -> LockEntry
        lock_path: Path to lock JSON file

    Creates parent directories if they don't exist.
    """
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    with open(lock_path, "w") as f:
        json.dump(dump_lock_entries(entries), f, indent=2)
        f.write("\n")
    logger.info(f"Wrote {len(entries)} lock entries to {lock_path}")
