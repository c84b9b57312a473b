"""
Command line entry point for MCNS lookups.

Supports:
  - Code -> name lookup        (mcns name 11 -11 511)
  - Name -> code lookup        (mcns code B+ d*0)
  - Table listing              (mcns list --match lambda)
  - Table integrity check      (mcns check)
"""

import argparse
import dataclasses
import logging
import sys
from typing import Optional

import yaml

from mcns.domain.config import LOG_LEVELS, RegistryConfig
from mcns.domain.errors import RegistryDataError
from mcns.lookup import build_registry
from mcns.services.registry import ParticleRegistry


def setup_logging(level: str = "WARNING"):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def load_config(config_path: str) -> dict:
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def parse_args(argv: Optional[list[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="mcns",
        description="Convert MCNS particle codes into names and vice versa",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mcns name 11 -11 511        # e-, e+, B0
  mcns code B+ d*0            # 521, 423
  mcns list --match lambda_b
  mcns --config config.yaml check
        """
    )

    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--data", type=str, default=None,
        help="Path to an alternative particle table (JSON)"
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=list(LOG_LEVELS),
        help="Logging level (default: from config, else WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    name_parser = subparsers.add_parser("name", help="Look up names for codes")
    name_parser.add_argument("codes", nargs="+", help="MCNS codes")
    name_parser.add_argument(
        "--strict", action="store_true",
        help="Fail on unknown codes instead of echoing them back"
    )

    code_parser = subparsers.add_parser("code", help="Look up codes for names")
    code_parser.add_argument("names", nargs="+", help="Particle names (case-insensitive)")
    code_parser.add_argument(
        "--strict", action="store_true",
        help="Fail on unknown names instead of printing 0"
    )

    list_parser = subparsers.add_parser("list", help="Print the table")
    list_parser.add_argument(
        "--match", type=str, default=None,
        help="Only rows whose name contains this text (case-insensitive)"
    )

    subparsers.add_parser("check", help="Validate the table and report name collisions")

    return parser.parse_args(argv)


def build_config(args) -> RegistryConfig:
    """Merge the YAML configuration with command line overrides."""
    config_dict = load_config(args.config) if args.config else {}
    config = RegistryConfig.from_dict(config_dict)

    overrides = {}
    if args.data:
        overrides["data_path"] = args.data
    if args.log_level:
        overrides["log_level"] = args.log_level
    return dataclasses.replace(config, **overrides) if overrides else config


def run_name(registry: ParticleRegistry, codes: list[str], strict: bool) -> int:
    status = 0
    for code in codes:
        name = registry.find_name(code)
        if name is None and strict:
            print(f"Unknown particle code: {code}", file=sys.stderr)
            status = 1
            continue
        print(name if name is not None else registry.name(code))
    return status


def run_code(registry: ParticleRegistry, names: list[str], strict: bool) -> int:
    status = 0
    for name in names:
        code = registry.find_code(name)
        if code is None and strict:
            print(f"Unknown particle name: {name}", file=sys.stderr)
            status = 1
            continue
        print(code if code is not None else registry.code(name))
    return status


def run_list(registry: ParticleRegistry, match: Optional[str]) -> int:
    entries = registry.search(match) if match else registry.entries
    for entry in entries:
        print(f"{entry.code}\t{entry.name}")
    return 0


def run_check(registry: ParticleRegistry, reject_collisions: bool) -> int:
    collisions = registry.collisions()
    print(f"{len(registry)} particles, {len(collisions)} case-insensitive name collisions")
    for group in collisions:
        print("  " + ", ".join(f"{entry.name} ({entry.code})" for entry in group))
    return 1 if collisions and reject_collisions else 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        config = build_config(args)
        setup_logging(config.log_level)

        if args.command == "check":
            # Report collisions instead of failing construction on them
            registry = build_registry(dataclasses.replace(config, reject_collisions=False))
            return run_check(registry, config.reject_collisions)

        registry = build_registry(config)
    except (RegistryDataError, ValueError, OSError, yaml.YAMLError) as e:
        setup_logging()
        logger.error(f"Failed to load particle registry: {e}")
        return 1

    if args.command == "name":
        return run_name(registry, args.codes, args.strict)
    if args.command == "code":
        return run_code(registry, args.names, args.strict)
    return run_list(registry, args.match)


if __name__ == "__main__":
    sys.exit(main())
