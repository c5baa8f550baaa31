"""Domain Types: rich types that replace bare primitives across the gallery.

Invariants:
    - OrderId wraps str, Amount wraps a positive real: never pass bare primitives in command/payment logic
    - Every variant of every capability is named by a str Enum member

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: variant names appear verbatim in log extras
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OrderId = NewType("OrderId", str)


# ─── Value Types ─────────────────────────────────────────────────

Amount = NewType("Amount", float)   # any positive real, int included


# ─── Enums ───────────────────────────────────────────────────────

class PatternName(str, Enum):
    """The demonstrated patterns, one runnable demo each."""
    STRATEGY = "strategy"
    COMMAND = "command"
    ABSTRACT_FACTORY = "abstract_factory"


class SortVariant(str, Enum):
    """Sorting strategies of the abstract Strategy example."""
    ASCENDING = "ascending"
    REVERSE = "reverse"


class PaymentMethod(str, Enum):
    """Payment strategies of the concrete Strategy example."""
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"


class FactoryVariant(str, Enum):
    """Product families of the abstract Abstract Factory example."""
    FIRST = "1"
    SECOND = "2"


class Theme(str, Enum):
    """UI product families of the concrete Abstract Factory example."""
    DARK = "dark"
    LIGHT = "light"
