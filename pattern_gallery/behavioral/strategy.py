"""Strategy: interchangeable algorithms behind one declared interface.

Invariants:
    - Context and Item delegate to whatever strategy is bound, never to a named variant
    - Sorting strategies return a new list; the caller's sequence is never mutated
    - Payment strategies act for effect (narration) and return None

Design Decisions:
    - Abstract example sorts strings; concrete example pays for an item
    - Narrator passed per call: strategies hold no IO handle
"""

from abc import ABC, abstractmethod
from numbers import Real
from typing import Sequence

from pattern_gallery.core.domain_types import Amount, PaymentMethod, SortVariant
from pattern_gallery.core.errors import InvalidPriceError
from pattern_gallery.core.narration import Narrator
from pattern_gallery.core.slot import Slot


DEMO_DATA: tuple[str, ...] = ("a", "b", "c", "d", "e")


# ─── Abstract example ────────────────────────────────────────────

class Strategy(ABC):
    """Operations common to all supported versions of the algorithm."""
    variant: SortVariant

    @abstractmethod
    def do_algorithm(self, data: Sequence[str]) -> list[str]: ...


class AscendingSort(Strategy):
    """Ascending order. Stable for equal elements."""
    variant = SortVariant.ASCENDING

    def do_algorithm(self, data: Sequence[str]) -> list[str]:
        return sorted(data)


class ReverseOrder(Strategy):
    """Input order inverted."""
    variant = SortVariant.REVERSE

    def do_algorithm(self, data: Sequence[str]) -> list[str]:
        return list(reversed(data))


class Context:
    """Defines the interface of interest to clients.

    Holds one Strategy and delegates the algorithm to it. Does not know
    which concrete strategy it holds.
    """

    def __init__(self, strategy: Strategy):
        self._strategy = Slot(Strategy)
        self._strategy.bind(strategy)

    @property
    def strategy(self) -> Strategy:
        return self._strategy.bound

    def set_strategy(self, strategy: Strategy) -> None:
        self._strategy.bind(strategy)

    def do_some_business_logic(
        self, narrator: Narrator, data: Sequence[str] = DEMO_DATA,
    ) -> list[str]:
        strategy = self._strategy.bound
        narrator.say(
            "Context: Sorting data using the strategy (not sure how it'll do it)"
        )
        result = strategy.do_algorithm(data)
        narrator.say(",".join(result))
        return result


# ─── Concrete example: payments ──────────────────────────────────

class PaymentStrategy(ABC):
    variant: PaymentMethod

    @abstractmethod
    def pay(self, amount: Amount, narrator: Narrator) -> None: ...


class CreditCardPayment(PaymentStrategy):
    variant = PaymentMethod.CREDIT_CARD

    def pay(self, amount: Amount, narrator: Narrator) -> None:
        narrator.say(f"Paid {amount} using credit card.")


class PayPalPayment(PaymentStrategy):
    variant = PaymentMethod.PAYPAL

    def pay(self, amount: Amount, narrator: Narrator) -> None:
        narrator.say(f"Paid {amount} using PayPal.")


class Item:
    """Purchasable item. Price fixed at construction, payment swappable."""

    def __init__(self, price: Real, payment: PaymentStrategy):
        # bool is a Real too
        if isinstance(price, bool) or not isinstance(price, Real) or not price > 0:
            raise InvalidPriceError(price)
        self._price = Amount(price)
        self._payment = Slot(PaymentStrategy)
        self._payment.bind(payment)

    @property
    def price(self) -> Amount:
        return self._price

    def set_payment_strategy(self, payment: PaymentStrategy) -> None:
        self._payment.bind(payment)

    def buy(self, narrator: Narrator) -> None:
        self._payment.bound.pay(self._price, narrator)
