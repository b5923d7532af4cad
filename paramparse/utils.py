# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Install paramparse's root log handlers.

    One console handler is always installed. A file handler is added only when
    `log_filename` is given. Existing root handlers are removed first, so calling
    this twice does not duplicate output.

    Args:
        mode (str | None): "cli" renders records through `RichHandler` with markup
            off, so bracketed token text is printed as is. "json" writes one JSON
            object per record to stderr. When None, `PARAMPARSE_LOG_MODE` decides,
            then container detection picks "json" inside a container and "cli"
            elsewhere.
        log_filename (str | None): Log file to append to.
        json_log_to_file (bool): Write the file log as JSON instead of plain text.
        file_log_level (int): Threshold of the file handler.
        console_log_level (int): Threshold of the console handler. The default of
            WARNING keeps per-token debug records off the terminal.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("PARAMPARSE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("paramparse")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
