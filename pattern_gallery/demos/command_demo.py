"""Command Demo: an invoker with start/finish hooks, then an order manager.

Run with `python -m pattern_gallery.demos.command_demo` or `pattern-command`.
"""

import sys

from pattern_gallery.behavioral.command import (
    CancelOrderCommand, ComplexCommand, Invoker, OrderManager,
    PlaceOrderCommand, Receiver, SimpleCommand, TrackOrderCommand,
)
from pattern_gallery.core.domain_types import PatternName
from pattern_gallery.core.narration import Narrator
from pattern_gallery.infrastructure.console import run_demo


def abstract_example(narrator: Narrator) -> None:
    invoker = Invoker()
    invoker.set_on_start(SimpleCommand("Say Hi!"))
    receiver = Receiver()
    invoker.set_on_finish(ComplexCommand(receiver, "Send email", "Save report"))

    invoker.do_something_important(narrator)


def concrete_example(narrator: Narrator) -> OrderManager:
    manager = OrderManager()

    manager.execute(PlaceOrderCommand("Pad Thai", "1234"), narrator)
    manager.execute(TrackOrderCommand("1234"), narrator)
    manager.execute(CancelOrderCommand("1234"), narrator)
    return manager


def run(narrator: Narrator) -> None:
    narrator.say("Please read the code below, start with example")
    narrator.say()

    abstract_example(narrator)

    narrator.say("Then continue with concrete example")

    concrete_example(narrator)


def main() -> int:
    return run_demo(PatternName.COMMAND, run)


if __name__ == "__main__":
    sys.exit(main())
