"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Mapping, Tuple

from graphbasic import defaults
from graphbasic.config import GraphConfig
from graphbasic.graph import Graph, GraphError
from graphbasic.logs import fatal, setup_logging
from graphbasic.report import Report


def main():
    parser, commands = get_parser()
    args = parser.parse_args()
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    try:
        command(args)
    except GraphError as ex:
        fatal("%s", ex)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="graphbasic", description="directed graph reachability demo"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_new = commands.add_parser("new", help="write a default graph config")
    parser_new.add_argument(
        "path", nargs="?", default="graphbasic.yml", help="file to create",
    )

    parser_demo = commands.add_parser(
        "demo", help="show neighbors and reachable vertices"
    )

    parser_neighbors = commands.add_parser(
        "neighbors", help="show the forward neighbors of each vertex"
    )

    parser_reach = commands.add_parser(
        "reach", help="show the vertices reachable from each start"
    )
    parser_reach.add_argument(
        "starts",
        metavar="start",
        type=int,
        nargs="*",
        help="start vertex (default: every vertex)",
    )

    for subparser in [parser_demo, parser_neighbors, parser_reach]:
        subparser.add_argument(
            "-c",
            "--config",
            type=Path,
            help="graph config file (default: built-in 10-vertex graph)",
        )

    for subparser in [parser_new, parser_demo, parser_neighbors, parser_reach]:
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def load_graph(args: Namespace) -> Graph:
    """Load the graph named by --config, or the built-in one."""
    if args.config is None:
        logging.info("using built-in graph")
        return Graph.from_edges(defaults.order, defaults.edges)
    if not args.config.is_file():
        fatal("config file %s not found", args.config)
    cfg = GraphConfig.load(args.config)
    cfg.validate()
    return cfg.build_graph()


def command_new(args: Namespace):
    path = Path(args.path)
    print(f"Creating {path}")
    try:
        with open(path, "x") as f:
            f.write(defaults.graphbasic_yml())
    except FileExistsError:
        fatal("%s already exists", path)


def command_demo(args: Namespace):
    Report(load_graph(args)).write(sys.stdout)


def command_neighbors(args: Namespace):
    load_graph(args).dump(sys.stdout)


def command_reach(args: Namespace):
    report = Report(load_graph(args))
    sys.stdout.write(report.reachable(args.starts or None))
