"""Argparse integration for `mmapplypolicy` options.

All options are long options prefixed with `--mm-` and grouped under a
common heading, so they can be added to any tool's parser:

    parser = argparse.ArgumentParser(prog="mmx")
    add_all_arguments(parser)
    args = parser.parse_args(["--mm-N", "filer1,filer2", "--mm-L", "0"])
    options = run_options_from_args(args)
"""

import argparse
from pathlib import Path

from mmpolicy.config import RunOptions

HELP_HEADING = "Forwarded to `mmapplypolicy`"

ARG_ACTION = "mm_action"
ARG_CHOICE_ALGORITHM = "mm_choice_algorithm"
ARG_GLOBAL_WORK_DIR = "mm_global_work_dir"
ARG_INFORMATION_LEVEL = "mm_information_level"
ARG_LOCAL_WORK_DIR = "mm_local_work_dir"
ARG_NODES = "mm_nodes"

# dest -> RunOptions field
_FIELDS = {
    ARG_ACTION: "action",
    ARG_CHOICE_ALGORITHM: "choice_algorithm",
    ARG_GLOBAL_WORK_DIR: "global_work_dir",
    ARG_INFORMATION_LEVEL: "information_level",
    ARG_LOCAL_WORK_DIR: "local_work_dir",
    ARG_NODES: "nodes",
}


def _group(parser: argparse.ArgumentParser) -> argparse._ArgumentGroup:
    return parser.add_argument_group(HELP_HEADING)


def _add_nodes(group) -> None:
    group.add_argument(
        "--mm-N",
        dest=ARG_NODES,
        metavar="all|mount|Node,...|NodeFile|NodeClass",
        help="List of nodes, used with `mmapplypolicy -N`.",
    )


def _add_local_work_dir(group) -> None:
    group.add_argument(
        "--mm-s",
        dest=ARG_LOCAL_WORK_DIR,
        type=Path,
        metavar="DIR",
        help="Local work directory, used with `mmapplypolicy -s`.",
    )


def _add_global_work_dir(group) -> None:
    group.add_argument(
        "--mm-g",
        dest=ARG_GLOBAL_WORK_DIR,
        type=Path,
        metavar="DIR",
        help="Global work directory, used with `mmapplypolicy -g`.",
    )


def _add_action(group) -> None:
    group.add_argument(
        "--mm-I",
        dest=ARG_ACTION,
        metavar="yes|defer|test|prepare",
        help="Action performed on files, used with `mmapplypolicy -I`.",
    )


def _add_information_level(group) -> None:
    group.add_argument(
        "--mm-L",
        dest=ARG_INFORMATION_LEVEL,
        metavar="0|1|...|6",
        help="Information level, used with `mmapplypolicy -L`.",
    )


def _add_choice_algorithm(group) -> None:
    group.add_argument(
        "--mm-choice-algorithm",
        dest=ARG_CHOICE_ALGORITHM,
        metavar="best|exact|fast",
        help="Algorithm to select candidate files, used with `mmapplypolicy --choice-algorithm`.",
    )


def add_all_arguments(parser: argparse.ArgumentParser) -> argparse._ArgumentGroup:
    """Add every `--mm-*` option to the parser.

    Returns:
        The argument group holding the options
    """
    group = _group(parser)
    _add_nodes(group)
    _add_local_work_dir(group)
    _add_global_work_dir(group)
    _add_action(group)
    _add_information_level(group)
    _add_choice_algorithm(group)
    return group


def add_parallel_arguments(parser: argparse.ArgumentParser) -> argparse._ArgumentGroup:
    """Add only the parallel execution options `--mm-N`, `--mm-s` and `--mm-g`."""
    group = _group(parser)
    _add_nodes(group)
    _add_local_work_dir(group)
    _add_global_work_dir(group)
    return group


def run_options_from_args(args: argparse.Namespace) -> RunOptions:
    """Build RunOptions from parsed arguments.

    Options that were not added to the parser, or not given, stay None.
    """
    values = {}
    for dest, field in _FIELDS.items():
        value = getattr(args, dest, None)
        if value is not None:
            values[field] = value
    return RunOptions(**values)
