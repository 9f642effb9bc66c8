"""Path management utilities for sol-deployments library."""

from pathlib import Path
from typing import Optional, Union


def get_default_project_root() -> Path:
    """
    Get default project root (current working directory).

    Returns:
        Path to ./
    """
    return Path.cwd()


def get_env_file_path(project_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the .env file path for a project.

    Args:
        project_root: Custom project directory (defaults to ./)

    Returns:
        Absolute path to {project_root}/.env
    """
    if project_root is None:
        project_root = get_default_project_root()
    return Path(project_root).absolute() / ".env"


def get_lock_file_path(
    lock_file: Optional[Union[Path, str]],
    project_root: Optional[Union[Path, str]] = None,
) -> Optional[Path]:
    """
    Resolve a lock file path.

    Args:
        lock_file: Lock file path, relative paths resolve against project_root
        project_root: Custom project directory (defaults to ./)

    Returns:
        Absolute lock file path, or None if lock_file is None
    """
    if lock_file is None:
        return None

    lock_path = Path(lock_file)
    if lock_path.is_absolute():
        return lock_path

    if project_root is None:
        project_root = get_default_project_root()

    return Path(project_root).absolute() / lock_path
