"""Command-line entry point for tinysh"""

from typing import List, Optional
import argparse
import logging
import sys

from .config import ShellConfig
from .exceptions import ConfigError, ShellExit
from .shell import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tinysh',
        description='A minimal interactive command interpreter',
    )
    parser.add_argument('-c', dest='command', metavar='COMMAND',
                        help='run COMMAND and exit with its status')
    parser.add_argument('--debug', action='store_true',
                        help='log command resolution and process launches to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ShellConfig.from_env()
    except ConfigError as e:
        sys.stderr.write(f"tinysh: {e}\n")
        return e.exit_code

    level = logging.DEBUG if args.debug else config.log_level
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    shell = Shell(config=config)

    if args.command is not None:
        try:
            return shell.execute(args.command)
        except ShellExit as e:
            return e.exit_code

    try:
        return shell.run()
    except KeyboardInterrupt:
        return 130


if __name__ == '__main__':
    sys.exit(main())
