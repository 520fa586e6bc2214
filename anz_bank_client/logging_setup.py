"""
Logging for the ANZ internet-banking client.

Library code only ever logs through ``log`` (or a logger handed to
:class:`anz_bank_client.client.Session`); nothing is configured until the
CLI calls :func:`setup_logging`.
"""

import logging
import sys

import colorlog

LOGGER_NAME = "anz-bank-client"
LOG_FORMAT = "%(log_color)s%(asctime)s %(name)s %(levelname)-7s%(reset)s %(message)s"
LOG_COLORS = {
    "DEBUG":    "cyan",
    "INFO":     "green",
    "WARNING":  "yellow",
    "ERROR":    "red",
    "CRITICAL": "bold_red",
}

log = logging.getLogger(LOGGER_NAME)


def setup_logging(debug: bool = False) -> None:
    """
    Send the package log to stderr in colour; stdout is reserved for the
    JSON the CLI prints.  *debug* also turns on urllib3's request log.
    """
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.propagate = False
    log.handlers.clear()

    handler = colorlog.StreamHandler(sys.stderr)
    handler.setFormatter(colorlog.ColoredFormatter(
        LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS,
    ))
    log.addHandler(handler)

    if debug:
        urllib3_log = logging.getLogger("urllib3")
        urllib3_log.setLevel(logging.DEBUG)
        urllib3_log.addHandler(handler)
