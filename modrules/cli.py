# SPDX-License-Identifier: MIT
"""Command-line interface for modrules."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from modrules.configure.config import DEFAULT_CONFIG_FILE, Configure
from modrules.core.errors import ModrulesError
from modrules.core.platform import (
    DEFAULT_ENGINE_VERSION,
    EngineVersion,
    TargetInfo,
    TargetPlatform,
    TargetType,
)
from modrules.generators.manifest import ManifestGenerator
from modrules.modules.catalog import (
    DEFAULT_PROJECT_NAME,
    MODULES,
    configure_project,
    project_targets,
)
from modrules.modules.zip_utility import MODULE_NAME as ZIP_UTILITY, sevenzpp_dir
from modrules.thirdparty.sevenzpp import LinkConfigurationBuilder

# Set up logging
logger = logging.getLogger("modrules")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def parse_variables(args: list[str]) -> tuple[dict[str, str], list[str]]:
    """Parse KEY=value arguments from a list.

    Args:
        args: List of arguments.

    Returns:
        Tuple of (variables dict, remaining args).
    """
    variables: dict[str, str] = {}
    remaining: list[str] = []

    for arg in args:
        if "=" in arg and not arg.startswith("-"):
            key, _, value = arg.partition("=")
            if key:  # Valid KEY=value
                variables[key] = value
            else:
                remaining.append(arg)
        else:
            remaining.append(arg)

    return variables, remaining


def make_config(args: argparse.Namespace) -> Configure:
    """Create the Configure context from common arguments."""
    variables, remaining = parse_variables(getattr(args, "extra", []))
    for arg in remaining:
        logger.warning("Ignoring argument: %s", arg)
    return Configure(config_file=args.config, variables=variables)


def cmd_locate(args: argparse.Namespace) -> int:
    """Show where Visual Studio and the ATL headers were found."""
    setup_logging(args.verbose, args.debug)

    info = make_config(args).find_toolchain()
    root = info.root
    if root.path is None:
        print("Toolchain root: (unresolved)")
    else:
        note = "" if root.verified else " (not verified)"
        print(f"Toolchain root: {root.path} [{root.source}]{note}")

    atl = info.atl
    if atl.ok:
        print(f"ATL path: {atl.path}")
        return 0

    status = atl.reason.value if atl.reason else "failed"
    print(f"ATL path: {atl.value or '(none)'} [{status}]")
    if atl.detail:
        print(f"  {atl.detail}")
    return 1 if args.strict else 0


def cmd_plan(args: argparse.Namespace) -> int:
    """Print the 7zpp link plan for a platform as JSON."""
    setup_logging(args.verbose, args.debug)

    platform = TargetPlatform.from_name(args.platform)
    if args.sdk_root:
        sdk_root = Path(args.sdk_root)
    else:
        rel_dir, _ = MODULES[ZIP_UTILITY]
        sdk_root = sevenzpp_dir(Path(args.project_dir) / rel_dir)

    plan = LinkConfigurationBuilder().build(platform, sdk_root)
    print(json.dumps(plan.to_dict(), indent=2))
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Run a configuration pass and write build_manifest.json.

    This command:
    1. Locates the toolchain using the configured settings
    2. Configures every module for the requested target
    3. Writes the manifest to the build directory
    """
    setup_logging(args.verbose, args.debug)

    config = make_config(args)
    target = TargetInfo(
        platform=TargetPlatform.from_name(args.platform),
        configuration=args.configuration,
        engine_version=EngineVersion.parse(args.engine_version),
        target_type=TargetType.EDITOR if args.editor else TargetType.GAME,
    )
    project = configure_project(
        Path(args.project_dir),
        target,
        config.find_toolchain(),
        name=args.project_name,
    )
    output_file = ManifestGenerator().generate(project, Path(args.build_dir))
    print(f"Generated {output_file}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """List the declared modules and targets."""
    setup_logging(args.verbose, args.debug)

    print("Modules:")
    for name, (rel_dir, _) in MODULES.items():
        print(f"  {name:<26} {rel_dir}")
    print()
    print("Targets:")
    for target in project_targets(args.project_name):
        print(f"  {target.name:<26} {target.target_type}")
    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Settings file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "--project-dir", default=".", help="Project root directory (default: .)"
    )
    parser.add_argument(
        "--project-name",
        default=DEFAULT_PROJECT_NAME,
        help="Project name used for target names",
    )


def add_variable_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "extra",
        nargs="*",
        help="Settings overrides (KEY=value)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the modrules CLI."""
    parser = argparse.ArgumentParser(
        prog="modrules",
        description="Module build rules and toolchain path resolution.",
        epilog="Run 'modrules <command> --help' for command-specific help.",
    )
    from modrules import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # modrules locate
    locate_parser = subparsers.add_parser(
        "locate", help="Locate Visual Studio and the ATL headers"
    )
    add_common_args(locate_parser)
    locate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if the ATL path could not be resolved",
    )
    add_variable_args(locate_parser)
    locate_parser.set_defaults(func=cmd_locate)

    # modrules plan
    plan_parser = subparsers.add_parser(
        "plan", help="Show the 7zpp link plan for a platform"
    )
    add_common_args(plan_parser)
    plan_parser.add_argument("platform", help="Target platform (e.g. Win64)")
    plan_parser.add_argument(
        "--sdk-root", help="7zpp directory (default: derived from --project-dir)"
    )
    plan_parser.set_defaults(func=cmd_plan)

    # modrules generate
    gen_parser = subparsers.add_parser(
        "generate", help="Configure all modules and write build_manifest.json"
    )
    add_common_args(gen_parser)
    gen_parser.add_argument(
        "-p", "--platform", default="Win64", help="Target platform (default: Win64)"
    )
    gen_parser.add_argument(
        "--engine-version",
        default=str(DEFAULT_ENGINE_VERSION),
        help=f"Engine version (default: {DEFAULT_ENGINE_VERSION})",
    )
    gen_parser.add_argument(
        "--configuration", default="Development", help="Build configuration"
    )
    gen_parser.add_argument(
        "--editor", action="store_true", help="Configure the editor target"
    )
    gen_parser.add_argument(
        "-B", "--build-dir", default="build", help="Output directory (default: build)"
    )
    add_variable_args(gen_parser)
    gen_parser.set_defaults(func=cmd_generate)

    # modrules info
    info_parser = subparsers.add_parser("info", help="List modules and targets")
    add_common_args(info_parser)
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        result: int = args.func(args)
    except ModrulesError as e:
        logger.error("%s", e)
        return 1
    return result


if __name__ == "__main__":
    sys.exit(main())
