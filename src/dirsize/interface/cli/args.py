from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into the
immutable ScanConfig consumed by the core.
"""

import argparse
from typing import List, Optional

from dirsize.domain.config import DEFAULT_SORT_DIRECTION, ScanConfig, SortDirection
from dirsize.utils.i18n import DEFAULT_LOCALE, i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirsize CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirsize",
        description=i18n.t("app.description"),
    )

    p.add_argument(
        "--root",
        dest="root",
        default=None,
        help=i18n.t("cli.args.root"),
    )
    p.add_argument(
        "--sort",
        dest="sort",
        default=DEFAULT_SORT_DIRECTION.value,
        choices=SortDirection.tokens(),
        help=i18n.t("cli.args.sort"),
    )

    # --- Output and diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    _add_lang_argument(p)

    return p


def preselect_locale(argv: Optional[List[str]]) -> str:
    """
    Extract --lang ahead of full parsing so help texts use that language.

    Other arguments are ignored here; the full parser reports them
    afterwards.
    """
    pre = argparse.ArgumentParser(prog="dirsize", add_help=False)
    _add_lang_argument(pre)
    known, _ = pre.parse_known_args(argv)
    return known.lang

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> ScanConfig:
    """
    Translate the argparse Namespace into a scan configuration.

    Args:
        args: Parsed command-line arguments.

    Returns:
        ScanConfig: Validated configuration.

    Raises:
        ValueError: If the root is missing or blank, or the sort token is
                    not recognized.
    """
    root = (args.root or "").strip()
    if not root:
        raise ValueError(i18n.t("cli.errors.missing_root"))

    return ScanConfig(root=root, sort_direction=SortDirection.parse(args.sort))

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _add_lang_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--lang",
        dest="lang",
        default=DEFAULT_LOCALE,
        choices=i18n.available_locales() or [DEFAULT_LOCALE],
        help=i18n.t("cli.args.lang"),
    )
