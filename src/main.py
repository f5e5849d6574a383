#!/usr/bin/env python3
""" Command-line entry point for nyxsh. """
import argparse
import sys

from config import get_settings
from shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(
        prog="nyxsh",
        description="A small interactive command shell",
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="COMMAND",
        help="run COMMAND and exit with its status",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="log level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = get_settings(log_level=args.log_level)
    sh = Shell(settings)

    if args.command is not None:
        return sh.run_command(args.command)
    return sh.run()


if __name__ == "__main__":
    sys.exit(main())
