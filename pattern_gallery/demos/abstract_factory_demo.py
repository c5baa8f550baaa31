"""Abstract Factory Demo: one client run against two factories, then a dark UI.

Run with `python -m pattern_gallery.demos.abstract_factory_demo` or
`pattern-abstract-factory`.
"""

import sys

from pattern_gallery.core.domain_types import PatternName, Theme
from pattern_gallery.core.narration import Narrator
from pattern_gallery.creational.abstract_factory import (
    ConcreteFactory1, ConcreteFactory2, FactoryClient, factory_for, render_screen,
)
from pattern_gallery.infrastructure.console import run_demo


def abstract_example(narrator: Narrator) -> None:
    narrator.say("Client: Testing client code with the first factory type...")
    client = FactoryClient(ConcreteFactory1())
    client.run(narrator)

    narrator.say()

    narrator.say(
        "Client: Testing the same client code with the second factory type..."
    )
    client.set_factory(ConcreteFactory2())
    client.run(narrator)


def concrete_example(narrator: Narrator) -> None:
    render_screen(factory_for(Theme.DARK), narrator)


def run(narrator: Narrator) -> None:
    narrator.say(
        "Please read the code below, start with abstract factory example"
    )
    narrator.say()

    abstract_example(narrator)

    narrator.say("Then continue with concrete factory example")

    concrete_example(narrator)


def main() -> int:
    return run_demo(PatternName.ABSTRACT_FACTORY, run)


if __name__ == "__main__":
    sys.exit(main())
