"""Data types and dataclasses for sol-deployments library."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class DeploymentAction(Enum):
    """
    Per-contract decision in a deployment plan.

    Value strings define de/serialization law.
    """

    DEPLOY = "deploy"
    SKIP = "skip"
    REDEPLOY = "redeploy"


@dataclass
class ContractDeclaration:
    """A contract to deploy and the arguments it is constructed with."""

    name: str
    args: Union[List[Any], Dict[str, Any]] = field(default_factory=list)
    # Any other declaration keys, forwarded to the executor untouched
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Environment:
    """A named deployment target with its network and credential configuration."""

    name: str  # e.g., "mainnet"
    chain_id: Optional[int] = None  # None means discover via rpc_url
    rpc_url: Optional[str] = None  # None for the in-process chain
    accounts: List[str] = field(default_factory=list)
    lock_file: Optional[str] = None
    verify: bool = False
    plugins: List[str] = field(default_factory=list)
    contracts: Dict[str, Dict[str, Any]] = field(default_factory=dict)


@dataclass
class LockEntry:
    """A previously deployed contract as recorded in a lock file."""

    address: str
    args_fingerprint: str
    chain_id: int


@dataclass
class DeploymentResult:
    """Successful on-chain deployment reported back by the executor."""

    address: str
    transaction_hash: Optional[str] = None
    block: Optional[int] = None


@dataclass
class PlanStep:
    """One contract's entry in a deployment plan."""

    name: str
    action: DeploymentAction
    declaration: ContractDeclaration
    fingerprint: str
    previous: Optional[LockEntry] = None


@dataclass
class DeploymentPlan:
    """Ordered deploy/skip/redeploy decisions for one environment."""

    environment: str
    chain_id: int
    steps: List[PlanStep]
    lock_file: Optional[Path] = None
    # Lock entries as loaded at resolve time, merged into on commit
    lock_entries: Dict[str, LockEntry] = field(default_factory=dict)
    verify: bool = False
    plugins: List[str] = field(default_factory=list)

    def names(self, action: Optional[DeploymentAction] = None) -> List[str]:
        """
        List contract names in plan order.

        Args:
            action: Only include steps with this action (defaults to all)

        Returns:
            List of contract names
        """
        return [s.name for s in self.steps if action is None or s.action == action]

    def pending(self) -> List[PlanStep]:
        """Steps the executor must perform (Deploy or Redeploy)."""
        return [s for s in self.steps if s.action != DeploymentAction.SKIP]

    def to_dict(self) -> Dict[str, Any]:
        """Render the plan as JSON-serializable data for an external executor."""
        return {
            "environment": self.environment,
            "chainId": self.chain_id,
            "verify": self.verify,
            "plugins": list(self.plugins),
            "steps": [
                {
                    "name": s.name,
                    "action": s.action.value,
                    "args": s.declaration.args,
                    "options": s.declaration.options,
                    "argsFingerprint": s.fingerprint,
                    "address": s.previous.address if s.previous else None,
                }
                for s in self.steps
            ],
        }
