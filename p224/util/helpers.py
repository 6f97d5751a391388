"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

import logging
from logging import Handler, Logger
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import sys
import traceback
from typing import Dict, List, Optional, TextIO, Union


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"

# Rotating log files are capped at 1 MB each, with two backups.
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUPS = 2


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(None, err, err.__traceback__))


def mkdir(path: Union[Path, str]) -> bool:
    """
    Create the directory if it doesn't exist.

    Args:
        path: the directory path.

    Returns:
        False if a regular file is in the way, otherwise True.
    """
    if os.path.isdir(path):
        return True
    if os.path.isfile(path):
        return False
    os.makedirs(path)
    return True


class LogSettings:
    """
    Used to track a few logging-related settings, and the handlers installed
    by prepareLogging so that a second call replaces rather than duplicates
    them.
    """

    root = logging.getLogger("p224")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: List[Handler] = []


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Prepare for using getLogger. Log records go to stderr, or the provided
    stream, so they never mix with command output on stdout. If filepath is
    provided, records are also saved to a rotating log file. Any loggers, both
    future loggers and those already created, will have their levels set
    according to the new logLvl and lvlMap.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level for loggers without an entry in the
            lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
        stream: The stream for console records. Defaults to sys.stderr.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))

    for handler in LogSettings.handlers:
        LogSettings.root.removeHandler(handler)
        handler.close()
    LogSettings.handlers = []

    formatter = logging.Formatter(LOG_FORMAT)
    if filepath:
        fileHandler = RotatingFileHandler(
            filepath, mode="a", maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS
        )
        fileHandler.setFormatter(formatter)
        LogSettings.handlers.append(fileHandler)
    streamHandler = logging.StreamHandler(stream if stream else sys.stderr)
    streamHandler.setFormatter(formatter)
    LogSettings.handlers.append(streamHandler)

    for handler in LogSettings.handlers:
        LogSettings.root.addHandler(handler)


def getLogger(name: str) -> Logger:
    """
    Gets a named child of the package logger. If the name has a log level
    registered with prepareLogging, that level will be used, otherwise the
    default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l
