"""
Command line entry point for sol-deployments.

Usage:
    sol-deployments plan mainnet [--declarations FILE] [--lock-file FILE] [--json]
    sol-deployments record mainnet Miller=0xabc... [--lock-file FILE]
    sol-deployments config [--show-secrets]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .config import load_config
from .exceptions import DeploymentError
from .resolver import DeploymentManifestResolver
from .types import DeploymentPlan, DeploymentResult


def parse_result(pair: str) -> Tuple[str, DeploymentResult]:
    """Parse a NAME=ADDRESS pair into a deployment result."""
    name, sep, address = pair.partition("=")
    if not sep or not name or not address:
        raise argparse.ArgumentTypeError(f"Expected NAME=ADDRESS, got '{pair}'")
    return name, DeploymentResult(address=address)


def format_plan(plan: DeploymentPlan) -> str:
    lines = [f"Environment: {plan.environment} (chain {plan.chain_id})"]
    lines.append(f"Lock file: {plan.lock_file or '-'}")
    for step in plan.steps:
        suffix = f" (was {step.previous.address})" if step.previous else ""
        lines.append(f"  {step.action.value:<9} {step.name}{suffix}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sol-deployments",
        description="Plan and record idempotent contract deployments",
    )
    parser.add_argument("--env-file", help="Path to .env file (default: .env in the project root)")
    parser.add_argument(
        "--project-root", help="Directory .env and lock files resolve against (default: cwd)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    plan_parser = subparsers.add_parser("plan", help="Show the deployment plan for an environment")
    plan_parser.add_argument("environment", help="Environment name (e.g., mainnet)")
    plan_parser.add_argument("--declarations", help="JSON declarations file")
    plan_parser.add_argument("--lock-file", help="Override the environment's lock file")
    plan_parser.add_argument("--json", action="store_true", help="Print plan as JSON")

    record_parser = subparsers.add_parser(
        "record", help="Record successful deployments in the lock file"
    )
    record_parser.add_argument("environment", help="Environment name (e.g., mainnet)")
    record_parser.add_argument("results", nargs="+", type=parse_result, metavar="NAME=ADDRESS")
    record_parser.add_argument("--declarations", help="JSON declarations file")
    record_parser.add_argument("--lock-file", help="Override the environment's lock file")

    config_parser = subparsers.add_parser("config", help="Print the toolchain config as JSON")
    config_parser.add_argument(
        "--show-secrets", action="store_true", help="Do not redact keys"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        config = load_config(args.env_file, project_root=args.project_root)

        if args.command == "config":
            print(json.dumps(config.to_dict(redact=not args.show_secrets), indent=2))
            return 0

        resolver = DeploymentManifestResolver.from_config(config, project_root=args.project_root)
        plan = resolver.resolve(args.environment, args.declarations, args.lock_file)

        if args.command == "plan":
            if args.json:
                print(json.dumps(plan.to_dict(), indent=2))
            else:
                print(format_plan(plan))
            return 0

        # record
        results = dict(args.results)
        entries = resolver.commit(plan, results, args.lock_file)
        print(f"Recorded {len(results)} deployment(s), lock now holds {len(entries)} entries")
        return 0

    except DeploymentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
