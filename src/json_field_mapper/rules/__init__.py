"""Rule list parsing."""
from .parser import parse_rule, parse_rules, split_candidates

__all__ = ["parse_rule", "parse_rules", "split_candidates"]
