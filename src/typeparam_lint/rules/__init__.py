"""Rules shipped with typeparam-lint."""

from typeparam_lint.rules.base import BaseRule
from typeparam_lint.rules.generic_parameter_names import (
    DESCRIPTOR,
    DIAGNOSTIC_ID,
    GenericParameterNamesMustBeginWithT,
    is_conformant,
)
from typeparam_lint.rules.registry import (
    BUILTIN_RULES,
    RuleAlreadyRegisteredError,
    RuleNotFoundError,
    RuleRegistry,
)

__all__ = [
    "BUILTIN_RULES",
    "DESCRIPTOR",
    "DIAGNOSTIC_ID",
    "BaseRule",
    "GenericParameterNamesMustBeginWithT",
    "RuleAlreadyRegisteredError",
    "RuleNotFoundError",
    "RuleRegistry",
    "is_conformant",
]
