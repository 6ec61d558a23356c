"""
Logging setup for the command line entry point.
"""
import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional, Union

# handlers installed by setup_logging; host handlers on the root are left alone
_installed: List[logging.Handler] = []


def setup_logging(level: Union[int, str] = logging.INFO, logfile: Optional[str] = None):
    """Sets the root logger up, replacing handlers from a previous call"""
    shutdown_logging()
    root = logging.getLogger()

    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    formatter = logging.Formatter(fmt)
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    _installed.append(sh)
    if logfile:
        fh = RotatingFileHandler(logfile, maxBytes=10_000_000, backupCount=3)
        fh.setFormatter(formatter)
        _installed.append(fh)

    root.setLevel(level)
    for h in _installed:
        root.addHandler(h)

    logging.captureWarnings(True)


def shutdown_logging():
    """
    Flush, close and remove the handlers installed by setup_logging.
    """
    root = logging.getLogger()
    while _installed:
        h = _installed.pop()
        root.removeHandler(h)
        try:
            h.flush()
            h.close()
        except OSError:
            pass
