"""The ordered rule pipeline.

Rule order is fixed and part of the contract: ``trailing_break`` runs before
``sort_cases`` so that every switch's final fallthrough block is terminated
when blocks are sorted.  ``build_pipeline`` selects the enabled rules for a
``FormatOptions`` without running anything, which keeps the order testable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from jsclean.config import FormatOptions
from jsclean.rules.braces import insert_braces, strip_braces
from jsclean.rules.comments import cap_comments
from jsclean.rules.declarations import separate_vars
from jsclean.rules.equality import exact_equals
from jsclean.rules.sorting import sort_functions, sort_properties
from jsclean.rules.switch import sort_cases, trailing_break
from jsclean.tree.nodes import Program

__all__ = ["RULE_ORDER", "Rule", "apply_rules", "build_pipeline"]

logger = logging.getLogger(__name__)

Rule = Callable[[Program], None]

# (rule name, option that enables it, rule); brace rules share a slot.
RULE_ORDER: tuple[tuple[str, str, Rule], ...] = (
    ("exact_equals", "exact_equals", exact_equals),
    ("insert_braces", "extra_braces", insert_braces),
    ("strip_braces", "strip_braces", strip_braces),
    ("trailing_break", "trailing_break", trailing_break),
    ("cap_comments", "cap_comments", cap_comments),
    ("separate_vars", "separate_vars", separate_vars),
    ("sort_cases", "sort_cases", sort_cases),
    ("sort_functions", "sort_functions", sort_functions),
    ("sort_properties", "sort_properties", sort_properties),
)


def build_pipeline(options: FormatOptions) -> tuple[tuple[str, Rule], ...]:
    """Return the enabled rules as ``(name, rule)`` pairs in run order."""
    return tuple((name, rule) for name, flag, rule in RULE_ORDER if getattr(options, flag))


def apply_rules(program: Program, options: FormatOptions) -> Program:
    """Run every enabled rule over *program* in place and return it."""
    for name, rule in build_pipeline(options):
        logger.debug("applying rule %s", name)
        rule(program)
    return program
