"""
Tlahtolli CLI.
"""

import argparse
import logging

from tlahtolli.cli.commands import translate, dictionary, history


def main():
    parser = argparse.ArgumentParser(prog="tlahtolli", description="Nahuatl ⇄ Spanish translator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    translate.add_subparser(subparsers)
    dictionary.add_subparser(subparsers)
    history.add_subparser(subparsers)

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
