"""
Copyright (c) 2020, The Decred developers
See LICENSE for details

The p224 command. Prints the public key for a private key and, when a peer
public key is given, the ECDH shared secret.
"""

import sys

from p224 import P224Error
from p224.config import DATA_DIR, CmdArgs, usage
from p224.crypto.key import Key
from p224.util import helpers


def initLogging(cfg):
    """
    Initialize logging for the command.

    Args:
        cfg (CmdArgs): The command-line configuration.

    Returns:
        Logger: The command's logger.
    """
    if cfg.logPath:
        helpers.mkdir(DATA_DIR)
    helpers.prepareLogging(
        cfg.logPath, logLvl=cfg.logLevel, lvlMap=cfg.moduleLevels
    )
    log = helpers.getLogger("CLI")
    if cfg.logPath:
        log.info(f"saving logs to {cfg.logPath}")
    return log


def run(cfg, out=None):
    """
    Run the key operations described by the configuration and print the
    results.

    Args:
        cfg (CmdArgs): The command-line configuration.
        out (TextIO): optional. Output stream. Defaults to sys.stdout.

    Raises:
        P224Error: A key could not be decoded, or no secret could be derived.
    """
    out = out if out else sys.stdout
    key1 = Key.fromPrivateHex(cfg.privateKey)
    print(f'private key 1: "{key1.privateHex()}"', file=out)
    print(f'public key 1:  "{key1.publicHex()}"', file=out)

    if cfg.publicKey:
        key2 = Key.fromPublicHex(cfg.publicKey)
        shared = key1.derive(key2)
        print(f'public key 2:  "{key2.publicHex()}"', file=out)
        print(f'shared secret: "{shared.publicHex()}"', file=out)


def main(argv=None):
    """
    Entry point for the p224 console script.

    Args:
        argv (list(str)): optional. The arguments, without the program name.

    Returns:
        int: The process exit status.
    """
    cfg = CmdArgs(argv)
    if cfg.showUsage:
        print(usage("p224"))
        return 0
    log = initLogging(cfg)
    try:
        run(cfg)
    except P224Error as e:
        log.debug(helpers.formatTraceback(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
