"""Command: requests wrapped as objects, issued through an invoker or manager.

Invariants:
    - Invoker hooks are checked against Command when set, never sniffed at call time
    - An unset Invoker hook is skipped via Slot.is_bound
    - OrderManager owns its order book; commands return the replacement tuple
      and the manager stores it, so a cancel really removes the order
    - Commands run synchronously in the order they are issued

Design Decisions:
    - Order is a frozen pydantic model: ids are validated once, orders never mutate
    - Order book is a tuple: no caller can mutate it behind the manager's back
"""

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from pattern_gallery.core.domain_types import OrderId
from pattern_gallery.core.errors import CapabilityMismatchError
from pattern_gallery.core.narration import Narrator
from pattern_gallery.core.slot import Slot

logger = logging.getLogger(__name__)


# ─── Abstract example ────────────────────────────────────────────

class Command(ABC):
    """Declares a method for executing a command."""

    @abstractmethod
    def execute(self, narrator: Narrator) -> None: ...


class SimpleCommand(Command):
    """Implements a simple operation on its own."""

    def __init__(self, payload: str):
        self._payload = payload

    def execute(self, narrator: Narrator) -> None:
        narrator.say(
            f"SimpleCommand: See, I can do simple things like printing ({self._payload})"
        )


class Receiver:
    """Holds the business logic. Any class may serve as a receiver."""

    def do_something(self, a: str, narrator: Narrator) -> None:
        narrator.say(f"Receiver: Working on ({a}.)")

    def do_something_else(self, b: str, narrator: Narrator) -> None:
        narrator.say(f"Receiver: Also working on ({b}.)")


class ComplexCommand(Command):
    """Delegates the real work to a receiver, with context data fixed at construction."""

    def __init__(self, receiver: Receiver, a: str, b: str):
        self._receiver = receiver
        self._a = a
        self._b = b

    def execute(self, narrator: Narrator) -> None:
        narrator.say(
            "ComplexCommand: Complex stuff should be done by a receiver object."
        )
        self._receiver.do_something(self._a, narrator)
        self._receiver.do_something_else(self._b, narrator)


class Invoker:
    """Sends requests to commands. Independent of concrete commands and receivers."""

    def __init__(self) -> None:
        self._on_start = Slot(Command)
        self._on_finish = Slot(Command)

    def set_on_start(self, command: Command) -> None:
        self._on_start.bind(command)

    def set_on_finish(self, command: Command) -> None:
        self._on_finish.bind(command)

    def clear_on_start(self) -> None:
        self._on_start.clear()

    def clear_on_finish(self) -> None:
        self._on_finish.clear()

    def do_something_important(self, narrator: Narrator) -> None:
        narrator.say("Invoker: Does anybody want something done before I begin?")
        if self._on_start.is_bound:
            self._on_start.bound.execute(narrator)

        narrator.say("Invoker: ...doing something really important...")

        narrator.say("Invoker: Does anybody want something done after I finish?")
        if self._on_finish.is_bound:
            self._on_finish.bound.execute(narrator)


# ─── Concrete example: orders ────────────────────────────────────

class Order(BaseModel):
    """A placed order."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    dish: str | None = None


class OrderCommand(ABC):
    """Takes the current order book, returns the replacement order book."""

    @abstractmethod
    def execute(
        self, orders: tuple[Order, ...], narrator: Narrator,
    ) -> tuple[Order, ...]: ...


class PlaceOrderCommand(OrderCommand):
    def __init__(self, dish: str, order_id: str):
        self._order = Order(id=order_id, dish=dish)

    def execute(
        self, orders: tuple[Order, ...], narrator: Narrator,
    ) -> tuple[Order, ...]:
        narrator.say(
            f"You have successfully ordered {self._order.dish} ({self._order.id})"
        )
        return orders + (self._order,)


class CancelOrderCommand(OrderCommand):
    def __init__(self, order_id: str):
        self._order_id = OrderId(order_id)

    def execute(
        self, orders: tuple[Order, ...], narrator: Narrator,
    ) -> tuple[Order, ...]:
        remaining = tuple(o for o in orders if o.id != self._order_id)
        if len(remaining) == len(orders):
            logger.info(
                f"Cancel for unknown order {self._order_id}",
                extra={"pattern": "command"},
            )
        narrator.say(f"You have canceled your order {self._order_id}")
        return remaining


class TrackOrderCommand(OrderCommand):
    def __init__(self, order_id: str):
        self._order_id = OrderId(order_id)

    def execute(
        self, orders: tuple[Order, ...], narrator: Narrator,
    ) -> tuple[Order, ...]:
        narrator.say(f"Your order {self._order_id} will arrive in 20 minutes.")
        return orders


class OrderManager:
    """Executes order commands against the order book it owns."""

    def __init__(self) -> None:
        self._orders: tuple[Order, ...] = ()

    @property
    def orders(self) -> tuple[Order, ...]:
        return self._orders

    def execute(
        self, command: OrderCommand, narrator: Narrator,
    ) -> tuple[Order, ...]:
        if not isinstance(command, OrderCommand):
            raise CapabilityMismatchError("OrderCommand", type(command).__name__)
        self._orders = command.execute(self._orders, narrator)
        return self._orders
