from textmetrics.placeholders.at_rule import (
    extract_at_rule_replacement,
    iter_at_rule_preludes,
)
from textmetrics.placeholders.declarations import (
    extract_declarations,
    extract_property,
    extract_value,
)
from textmetrics.placeholders.groups import extract_groups, has_group
from textmetrics.placeholders.scanner import find_balanced_groups

__all__ = [
    "extract_declarations",
    "extract_property",
    "extract_value",
    "extract_groups",
    "has_group",
    "extract_at_rule_replacement",
    "iter_at_rule_preludes",
    "find_balanced_groups",
]
