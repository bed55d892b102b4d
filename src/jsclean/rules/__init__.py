"""Transform rules: independent in-place rewrites run in a fixed order."""

from __future__ import annotations

from jsclean.rules.pipeline import apply_rules, build_pipeline

__all__ = ["apply_rules", "build_pipeline"]
