"""Main API for sol-deployments library."""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .chains import resolve_chain_id
from .config import ToolchainConfig, load_config
from .declarations import DeclarationsInput, normalize_declarations
from .exceptions import InvalidResultError, UnknownEnvironmentError, UnplannedResultError
from .fingerprint import fingerprint_args
from .lockfile import load_lock_file, save_lock_file
from .paths import get_lock_file_path
from .types import (
    DeploymentAction,
    DeploymentPlan,
    DeploymentResult,
    Environment,
    LockEntry,
    PlanStep,
)

logger = logging.getLogger(__name__)


def decide_action(entry: Optional[LockEntry], fingerprint: str, chain_id: int) -> DeploymentAction:
    """
    Decide what to do with one declared contract.

    A lock entry is reused only if both its argument fingerprint and its
    chain id match the current declaration and network.

    Args:
        entry: Lock entry recorded for the contract, if any
        fingerprint: Fingerprint of the currently declared arguments
        chain_id: Chain id of the target network

    Returns:
        DEPLOY if never deployed, SKIP if the entry matches, REDEPLOY otherwise
    """
    if entry is None:
        return DeploymentAction.DEPLOY
    if entry.args_fingerprint == fingerprint and entry.chain_id == chain_id:
        return DeploymentAction.SKIP
    return DeploymentAction.REDEPLOY


class DeploymentManifestResolver:
    """Resolves declared contracts into deployment plans against lock files."""

    def __init__(
        self,
        environments: Mapping[str, Environment],
        project_root: Optional[Union[Path, str]] = None,
    ):
        """
        Initialize the resolver.

        Args:
            environments: Mapping of environment name -> Environment
            project_root: Directory relative lock file paths resolve against
                          (defaults to current working directory)
        """
        self._environments = dict(environments)
        self._project_root = project_root

    @classmethod
    def from_config(
        cls,
        config: Optional[ToolchainConfig] = None,
        project_root: Optional[Union[Path, str]] = None,
    ) -> "DeploymentManifestResolver":
        """
        Build a resolver over a toolchain config's environments.

        Args:
            config: Toolchain config (defaults to load_config())
            project_root: Directory relative lock file paths resolve against
        """
        if config is None:
            config = load_config()
        return cls(config.environments, project_root=project_root)

    def has_environment(self, environment: str) -> bool:
        """
        Check if an environment is configured.

        Args:
            environment: Environment name to check

        Returns:
            True if environment is configured, False otherwise
        """
        return environment in self._environments

    def environment_names(self) -> List[str]:
        """List configured environment names in configuration order."""
        return list(self._environments.keys())

    def environment(self, environment: str) -> Environment:
        """
        Get a configured environment.

        Raises:
            UnknownEnvironmentError: If environment not configured
        """
        if not self.has_environment(environment):
            raise UnknownEnvironmentError(
                f"Environment '{environment}' is not configured "
                f"(known: {', '.join(self.environment_names())})"
            )
        return self._environments[environment]

    def lock_file_path(
        self, environment: str, lock_file: Optional[Union[Path, str]] = None
    ) -> Optional[Path]:
        """
        Get the lock file path used for an environment.

        Args:
            environment: Environment name
            lock_file: Explicit lock file, overrides the environment's own

        Returns:
            Absolute lock file path, or None if the environment keeps no lock

        Raises:
            UnknownEnvironmentError: If environment not configured
        """
        env = self.environment(environment)
        if lock_file is None:
            lock_file = env.lock_file
        return get_lock_file_path(lock_file, self._project_root)

    def resolve(
        self,
        environment: str,
        declarations: Optional[DeclarationsInput] = None,
        lock_file: Optional[Union[Path, str]] = None,
    ) -> DeploymentPlan:
        """
        Produce a deployment plan for an environment.

        Reads the lock file once. Writes nothing.

        Args:
            environment: Environment name (e.g., "mainnet")
            declarations: Contracts to deploy, in deployment order
                          (defaults to the environment's configured contracts)
            lock_file: Lock file path (defaults to the environment's lock file)

        Returns:
            DeploymentPlan preserving declaration order

        Raises:
            UnknownEnvironmentError: If environment not configured
            DuplicateContractNameError: If declarations repeat a contract name
            MalformedLockFileError: If lock file is unparseable or off-schema
        """
        # Configuration errors abort before any I/O
        env = self.environment(environment)
        if declarations is None:
            declarations = env.contracts
        contracts = normalize_declarations(declarations)
        fingerprints = [fingerprint_args(c.args) for c in contracts]

        chain_id = resolve_chain_id(env)

        lock_path = self.lock_file_path(environment, lock_file)
        lock_entries = load_lock_file(lock_path) if lock_path is not None else {}

        steps: List[PlanStep] = []
        for contract, fingerprint in zip(contracts, fingerprints):
            previous = lock_entries.get(contract.name)
            action = decide_action(previous, fingerprint, chain_id)
            steps.append(
                PlanStep(
                    name=contract.name,
                    action=action,
                    declaration=contract,
                    fingerprint=fingerprint,
                    previous=previous,
                )
            )
            logger.debug(f"{environment}: {contract.name} -> {action.value}")

        plan = DeploymentPlan(
            environment=environment,
            chain_id=chain_id,
            steps=steps,
            lock_file=lock_path,
            lock_entries=lock_entries,
            verify=env.verify,
            plugins=list(env.plugins),
        )

        logger.info(
            f"Resolved {len(steps)} contract(s) for '{environment}': "
            f"{len(plan.names(DeploymentAction.DEPLOY))} deploy, "
            f"{len(plan.names(DeploymentAction.REDEPLOY))} redeploy, "
            f"{len(plan.names(DeploymentAction.SKIP))} skip"
        )
        return plan

    def commit(
        self,
        plan: DeploymentPlan,
        results: Mapping[str, Union[DeploymentResult, str]],
        lock_file: Optional[Union[Path, str]] = None,
    ) -> Dict[str, LockEntry]:
        """
        Record successful deployments in the lock file.

        Only contracts present in ``results`` are written; a pending step
        without a result (a failed deployment) leaves its entry untouched.
        Entries for skipped contracts and for contracts no longer declared
        are kept.
        When ``lock_file`` differs from the plan's lock file, results are
        merged into the entries already in ``lock_file``.

        Args:
            plan: Plan returned by resolve()
            results: Mapping of contract name -> DeploymentResult or address
            lock_file: Lock file path (defaults to the plan's lock file)

        Returns:
            Updated lock entries (written to disk when a lock file is set)

        Raises:
            UnplannedResultError: If a result names a contract the plan does not deploy
            InvalidResultError: If a result has no non-empty string address
            MalformedLockFileError: If an explicit lock_file other than the plan's is malformed
        """
        pending = {step.name: step for step in plan.pending()}

        unplanned = [name for name in results if name not in pending]
        if unplanned:
            raise UnplannedResultError(
                f"Results for contract(s) not planned for deployment in "
                f"'{plan.environment}': {', '.join(unplanned)}"
            )

        addresses: Dict[str, str] = {}
        for name, result in results.items():
            address = result.address if isinstance(result, DeploymentResult) else result
            if not isinstance(address, str) or not address:
                raise InvalidResultError(
                    f"Result for '{name}' in '{plan.environment}' has no valid address: {address!r}"
                )
            addresses[name] = address

        lock_path = (
            get_lock_file_path(lock_file, self._project_root)
            if lock_file is not None
            else plan.lock_file
        )

        # The plan snapshot only describes plan.lock_file
        if lock_path is not None and lock_path != plan.lock_file:
            entries = load_lock_file(lock_path)
        else:
            entries = dict(plan.lock_entries)

        for name, step in pending.items():
            if name not in addresses:
                logger.warning(f"No result for {name} in '{plan.environment}', lock entry left as is")
                continue

            address = addresses[name]
            entries[name] = LockEntry(
                address=address,
                args_fingerprint=step.fingerprint,
                chain_id=plan.chain_id,
            )

        if lock_path is not None:
            save_lock_file(entries, lock_path)
        else:
            logger.debug(f"Environment '{plan.environment}' keeps no lock file, nothing written")

        return entries
