from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: locale selection, argument parsing,
logging bootstrap, scan execution and report rendering. Scan problems
are mapped to exit codes here; the core never prints.
"""

import argparse
import json
import sys
from typing import List, Optional

from dirsize.core.pipeline.engine import run_scan
from dirsize.domain.errors import FatalInputError
from dirsize.domain.models import ScanResult
from dirsize.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from dirsize.interface.cli import args as cli_args
from dirsize.interface.cli.render import render_failures, render_table
from dirsize.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 on success, including partial reports).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Locale must be active before help texts are built
    locale = cli_args.preselect_locale(argv)
    if locale != i18n.locale:
        i18n.load_locale(locale)

    # 2. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file),
        force=True,
    )

    try:
        return _run(parser, args)
    finally:
        shutdown_logging()


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    # 4. Input validation
    try:
        config = cli_args.args_to_config(args)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    logger.debug(f"Resolved configuration: {config}")

    # 5. Scan execution phase
    try:
        result = run_scan(config)
    except FatalInputError as e:
        msg = i18n.t("cli.errors.fatal", path=e.path, error=e.cause or e)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_report(result)

    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_report(result: ScanResult) -> None:
    """
    Print the table to stdout and skipped entries to stderr.

    Args:
        result: The scan result to render.
    """
    for line in render_table(result.rows):
        print(line)

    if result.partial:
        for line in render_failures(result.failures):
            print(f"WARNING: {line}", file=sys.stderr)
        print(i18n.t("cli.status.partial", count=len(result.failures)), file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
