# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import shutil
import sys
from typing import Sequence

import pythonjsonlogger.json
from rich.logging import RichHandler
from rich.markup import escape

from argtap.console import console
from argtap.exceptions import TapError
from argtap.logger import logger
from argtap.parser.argument_parser import ArgumentParser


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0]
    program = shutil.which(script)
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable:
        return f"python {script}"
    return script


def run_parser(
    parser: ArgumentParser,
    argv: Sequence[str] | None = None,
    *,
    exit_on_error: bool = True,
) -> ArgumentParser:
    """
    Parse `argv` and report failures the way a command-line program should.

    On a `TapError` the message and the usage line are printed to the shared
    console. The process then exits with status 2, or the error is re-raised
    when `exit_on_error` is False.

    Args:
        parser (ArgumentParser): The parser to run.
        argv (Sequence[str] | None): Full argument vector. Defaults to `sys.argv`.
        exit_on_error (bool): Exit instead of re-raising.

    Returns:
        ArgumentParser: The parser, for chaining.
    """
    if not parser.program_name:
        parser.program_name = get_program_invocation()
    try:
        parser.parse(argv)
    except TapError as error:
        logger.debug("Parse failed: %s", error, exc_info=True)
        console.print(f"[bold red]error:[/bold red] {escape(str(error))}")
        console.print(escape(parser.get_usage()))
        if exit_on_error:
            sys.exit(2)
        raise
    return parser


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
    Configure logging for Argtap with support for both CLI-friendly and structured
    JSON output.

    Argtap never configures logging on import. Applications call this once at
    startup when they want the library's debug trail of token resolution and
    validation.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `ARGTAP_LOG_MODE` environment variable
            or fallback based on container detection.
        log_filename (str | None):
            Path to a log file. No file handler is installed when omitted.
        json_log_to_file (bool):
            Whether to format file logs as JSON (structured) instead of plain text.
            Defaults to False.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.

    Environment Variables:
        ARGTAP_LOG_MODE: Can override `mode` to enforce "cli" or "json" logging behavior.
    """
    if not mode:
        mode = os.getenv("ARGTAP_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            console=console,
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

    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
