"""Command-line interface for mmpolicy.

This module provides the `mmpolicy` entry point. It handles argument
parsing, loading policy descriptions and options files, and maps
failures to exit codes.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from mmpolicy.config import ConfigValidationError, RunOptions, load_run_options
from mmpolicy.core import PolicyRunError, PolicyRunner
from mmpolicy.policy import load_policy, render_policy
from mmpolicy.utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_INPUT,
    EXIT_POLICY_FAILED,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_logger,
    setup_logging,
)

from .args import add_all_arguments, add_parallel_arguments, run_options_from_args

__all__ = [
    "add_all_arguments",
    "add_parallel_arguments",
    "build_parser",
    "main",
    "parse_args",
    "run_options_from_args",
]

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Write and run IBM Storage Scale file system policies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # 'render' command
    render_parser = subparsers.add_parser(
        "render", help="Print the policy text for a policy description"
    )
    render_parser.add_argument(
        "policy", type=Path, help="Policy description (YAML/JSON)"
    )
    render_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the policy text to this file instead of stdout",
    )
    render_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    # 'run' command
    run_parser = subparsers.add_parser(
        "run", help="Write a policy and run it with mmapplypolicy"
    )
    run_parser.add_argument(
        "policy", type=Path, help="Policy description (YAML/JSON)"
    )
    run_parser.add_argument(
        "target", help="Device or directory the policy is applied to"
    )
    run_parser.add_argument(
        "--policy-path",
        type=Path,
        required=True,
        help="File the policy text is written to (overwritten)",
    )
    run_parser.add_argument(
        "--prefix",
        type=Path,
        default=None,
        help="Directory or file name prefix for list files, used with `mmapplypolicy -f`",
    )
    run_parser.add_argument(
        "--options",
        type=Path,
        default=None,
        help="YAML/JSON file with run options; --mm-* arguments take precedence",
    )
    run_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    add_all_arguments(run_parser)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments, defaults to sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    return build_parser().parse_args(argv)


def _render(args: argparse.Namespace) -> int:
    policy = load_policy(args.policy)
    text = render_policy(policy)

    if args.output is None:
        sys.stdout.write(text)
    else:
        args.output.write_text(text, encoding="utf-8")
        logger.info(f"Policy '{policy.name}' written to {args.output}")

    return EXIT_SUCCESS


def _run(args: argparse.Namespace) -> int:
    policy = load_policy(args.policy)

    options = load_run_options(args.options) if args.options else RunOptions()
    options = options.merged(run_options_from_args(args))

    runner = PolicyRunner()
    reports = runner.run(policy, args.target, args.policy_path, args.prefix, options)

    for report in reports:
        print(report)

    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    setup_logging(
        verbose=args.verbose,
        information_level=getattr(args, "mm_information_level", None),
    )

    handlers = {"render": _render, "run": _run}

    try:
        return handlers[args.command](args)
    except ConfigValidationError as e:
        print(f"✗ Invalid input:\n{e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except PolicyRunError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_POLICY_FAILED
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        print(f"✗ Runtime error: {e}", file=sys.stderr)
        logger.exception("Unexpected error")
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Unexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.exception("Unexpected error")
        return EXIT_RUNTIME_ERROR
