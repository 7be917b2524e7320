"""Domain-specific calculation helpers."""

from .deductions import DeductionLine, RuleAssessment, assess_rule, calculate_component
from .utils import calculate_progressive_tax, round_currency

__all__ = [
    "DeductionLine",
    "RuleAssessment",
    "assess_rule",
    "calculate_component",
    "calculate_progressive_tax",
    "round_currency",
]
