"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

Command-line configuration for the p224 tool.
"""

import argparse
import logging
import os
import sys

from appdirs import AppDirs


# Log files go to an OS-appropriate data directory. It is only created when
# logs are saved.
_ad = AppDirs("p224", False)
DATA_DIR = _ad.user_data_dir
LOG_NAME = "p224.log"

logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}

EXAMPLES = (
    "af0181e90420508e39e9d862f1680dc22f5f024fcfc11939d7c6fedb",
    "14447aec7d78c691d0c1c94da1a6a85d9eefeddf8b42f51aa227376c",
    "af0181e90420508e39e9d862f1680dc22f5f024fcfc11939d7c6fedb "
    "457e0910e4a34933c1ad3034ad92504c8324b8701e56c37716bf541967813d3ff1390e5c1d0"
    "c833f1fce3ff8bc69b277a072c3c31b239aacf",
    "14447aec7d78c691d0c1c94da1a6a85d9eefeddf8b42f51aa227376c "
    "4bcf74addac6c83a587eeb6d2a724158cebaecfed0af82a90434268e03c82f21e137c7341a7"
    "0c0044ed058d5fe6c7aa38eb16542fdf5ae111",
)


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.
    """
    return logLevelMap[s.lower()]


def usage(prog):
    """
    The usage text, with example invocations.

    Args:
        prog (str): The program name.

    Returns:
        str: The text.
    """
    lines = [f"Usage: {prog} <private key> [public key]", "Examples:"]
    lines.extend(f"  {prog} {ex}" for ex in EXAMPLES)
    return "\n".join(lines)


class CmdArgs:
    """
    CmdArgs are command-line configuration options.
    """

    def __init__(self, argv=None):
        """
        Args:
            argv (list(str)): optional. The arguments, without the program
                name. Defaults to sys.argv[1:].
        """
        self.logLevel = logging.WARNING
        self.moduleLevels = {}
        parser = argparse.ArgumentParser(prog="p224", add_help=False)
        parser.add_argument(
            "keys", nargs="*", help="hex private key, then the peer's hex public key"
        )
        parser.add_argument("--loglevel")
        parser.add_argument("--savelogs", action="store_true")
        args, unknown = parser.parse_known_args(argv)
        if unknown:
            sys.exit(f"unknown arguments: {unknown}")
        keys = args.keys
        # The command only takes one or two keys. Anything else is answered
        # with the usage text.
        self.showUsage = not keys or len(keys) > 2
        self.privateKey = keys[0] if keys else None
        self.publicKey = keys[1] if len(keys) > 1 else None
        self.logPath = os.path.join(DATA_DIR, LOG_NAME) if args.savelogs else None
        if args.loglevel:
            try:
                if any(ch in args.loglevel for ch in (",", ":")):
                    pairs = (s.split(":") for s in args.loglevel.split(","))
                    self.moduleLevels = {k: logLvl(v) for k, v in pairs}
                else:
                    self.logLevel = logLvl(args.loglevel)
            except Exception:
                sys.exit(f"malformed loglevel specifier: {args.loglevel}")
