"""
Utility functions for the column aligner.
"""

import os
from typing import Mapping, Optional

from .core.models import ConfigurationError, FormatOptions


RULES_ENV = "TM_SOURCE_ALIGNMENT_PATTERN"
SELECTED_TEXT_ENV = "TM_SELECTED_TEXT"
LINE_NUMBER_ENV = "TM_LINE_NUMBER"


def parse_line_number(value: Optional[str]) -> Optional[int]:
    """Parse a 1-based cursor line; None or empty means no cursor"""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError as e:
        raise ConfigurationError(
            f"Cursor line must be an integer, got {value!r}", segment=value
        ) from e


def build_options_from_env(
    environ: Optional[Mapping[str, str]] = None, with_line_number: bool = True
) -> FormatOptions:
    """Build FormatOptions from editor-style environment variables.

    A set TM_SELECTED_TEXT (even empty) selects whole-text formatting.
    With `with_line_number=False` TM_LINE_NUMBER is not read, so a cursor
    line supplied elsewhere is not blocked by a bad environment value.
    """
    if environ is None:
        environ = os.environ

    line_number = None
    if with_line_number:
        line_number = parse_line_number(environ.get(LINE_NUMBER_ENV))

    return FormatOptions(
        rule_spec=environ.get(RULES_ENV),
        selected_text=SELECTED_TEXT_ENV in environ,
        line_number=line_number,
    )


def build_options_from_args(args, base: Optional[FormatOptions] = None) -> FormatOptions:
    """Overlay argparse values on base options (from the environment).

    Arguments left at None (or False for --all) do not override.
    """
    base = base or FormatOptions()
    overrides = {
        "rule_spec": getattr(args, "rules", None),
        "selected_text": getattr(args, "all", None) or None,
        "line_number": getattr(args, "line", None),
    }

    # Remove None values to avoid overriding the environment
    overrides = {k: v for k, v in overrides.items() if v is not None}

    return FormatOptions(
        rule_spec=overrides.get("rule_spec", base.rule_spec),
        selected_text=overrides.get("selected_text", base.selected_text),
        line_number=overrides.get("line_number", base.line_number),
    )
