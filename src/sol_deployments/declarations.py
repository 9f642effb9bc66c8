"""Contract declaration parsers for sol-deployments library."""

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .exceptions import (
    DeclarationsNotFoundError,
    DuplicateContractNameError,
    MalformedDeclarationError,
)
from .types import ContractDeclaration

DeclarationsInput = Union[
    Mapping[str, Any],
    Iterable[ContractDeclaration],
    Iterable[Tuple[str, Any]],
    Path,
    str,
]


class _DeclarationObject(dict):
    """JSON object that remembers keys it saw more than once."""

    def __init__(self, pairs: List[Tuple[str, Any]]):
        super().__init__(pairs)
        counts = Counter(key for key, _ in pairs)
        self.duplicates = [key for key, count in counts.items() if count > 1]


def load_declarations(file_path: Union[Path, str]) -> List[ContractDeclaration]:
    """
    Parse a JSON declarations file.

    The file maps contract names to declarations, e.g.
    ``{"Miller": {}, "Token": {"args": ["Name", "SYM"]}}``.
    Duplicate top-level keys are rejected rather than silently collapsed.

    Args:
        file_path: Path to declarations JSON file

    Returns:
        List of ContractDeclaration in file order

    Raises:
        DeclarationsNotFoundError: If file doesn't exist
        DuplicateContractNameError: If a contract name appears twice
        MalformedDeclarationError: If file is not a JSON object of declarations
    """
    path = Path(file_path)
    try:
        with open(path) as f:
            data = json.load(f, object_pairs_hook=_DeclarationObject)
    except FileNotFoundError as e:
        raise DeclarationsNotFoundError(f"Declarations file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise MalformedDeclarationError(f"Invalid JSON in declarations file {path}: {e}") from e

    if not isinstance(data, _DeclarationObject):
        raise MalformedDeclarationError(
            f"Declarations file {path} must contain a JSON object"
        )

    if data.duplicates:
        raise DuplicateContractNameError(
            f"Duplicate contract name(s) in {path}: {', '.join(data.duplicates)}"
        )

    return [parse_declaration(name, raw) for name, raw in data.items()]


def parse_declaration(name: str, raw: Optional[Mapping[str, Any]]) -> ContractDeclaration:
    """
    Build a ContractDeclaration from its raw mapping form.

    Args:
        name: Contract name
        raw: Declaration mapping (``args`` plus any forwarded keys), or None

    Returns:
        ContractDeclaration with ``args`` defaulting to an empty positional list

    Raises:
        MalformedDeclarationError: If name or args have an unusable type
    """
    if not isinstance(name, str) or not name:
        raise MalformedDeclarationError(f"Contract name must be a non-empty string, got {name!r}")

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise MalformedDeclarationError(
            f"Declaration for '{name}' must be a mapping, got {type(raw).__name__}"
        )

    args = raw.get("args", [])
    if isinstance(args, tuple):
        args = list(args)
    if not isinstance(args, (list, Mapping)):
        raise MalformedDeclarationError(
            f"Arguments for '{name}' must be a list or mapping, got {type(args).__name__}"
        )
    if isinstance(args, Mapping):
        args = dict(args)

    options: Dict[str, Any] = {k: v for k, v in raw.items() if k != "args"}

    return ContractDeclaration(name=name, args=args, options=options)


def normalize_declarations(declarations: DeclarationsInput) -> List[ContractDeclaration]:
    """
    Convert any accepted declaration input into an ordered list.

    Accepts a mapping of name -> declaration, a sequence of
    ContractDeclaration or (name, declaration) pairs, or a path to a
    JSON declarations file.

    Args:
        declarations: Declaration input

    Returns:
        List of ContractDeclaration in declaration order

    Raises:
        DuplicateContractNameError: If a contract name appears twice
        MalformedDeclarationError: If an entry has an unusable shape
    """
    if isinstance(declarations, (str, Path)):
        return load_declarations(declarations)

    if isinstance(declarations, Mapping):
        result = [parse_declaration(name, raw) for name, raw in declarations.items()]
    else:
        result = []
        for item in declarations:
            if isinstance(item, ContractDeclaration):
                result.append(item)
            elif isinstance(item, (tuple, list)) and len(item) == 2:
                result.append(parse_declaration(item[0], item[1]))
            else:
                raise MalformedDeclarationError(f"Unrecognized declaration entry: {item!r}")

    check_unique_names(result)
    return result


def check_unique_names(declarations: List[ContractDeclaration]) -> None:
    """
    Ensure every contract name appears once.

    Raises:
        DuplicateContractNameError: Naming every repeated contract
    """
    counts = Counter(d.name for d in declarations)
    duplicates = [name for name, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateContractNameError(
            f"Duplicate contract name(s) in declarations: {', '.join(duplicates)}"
        )
