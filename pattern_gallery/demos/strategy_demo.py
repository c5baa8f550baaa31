"""Strategy Demo: sort with one strategy, rebind, sort again; then pay two ways.

Run with `python -m pattern_gallery.demos.strategy_demo` or `pattern-strategy`.
"""

import sys

from pattern_gallery.behavioral.strategy import (
    AscendingSort, Context, CreditCardPayment, Item, PayPalPayment, ReverseOrder,
)
from pattern_gallery.core.domain_types import PatternName
from pattern_gallery.core.narration import Narrator
from pattern_gallery.infrastructure.console import run_demo


def abstract_example(narrator: Narrator) -> None:
    # The client picks the strategy; the context only knows the interface.
    context = Context(AscendingSort())
    narrator.say("Client: Strategy is set to normal sorting.")
    context.do_some_business_logic(narrator)

    narrator.say()

    narrator.say("Client: Strategy is set to reverse sorting.")
    context.set_strategy(ReverseOrder())
    context.do_some_business_logic(narrator)


def concrete_example(narrator: Narrator) -> None:
    item = Item(100, CreditCardPayment())
    item.buy(narrator)

    narrator.say()

    item2 = Item(200, PayPalPayment())
    item2.buy(narrator)


def run(narrator: Narrator) -> None:
    narrator.say("Please read the code below, start with strategy example")
    narrator.say()

    abstract_example(narrator)

    narrator.say("Then continue with concrete strategy example")

    concrete_example(narrator)


def main() -> int:
    return run_demo(PatternName.STRATEGY, run)


if __name__ == "__main__":
    sys.exit(main())
