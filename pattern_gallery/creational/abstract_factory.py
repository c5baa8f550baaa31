"""Abstract Factory: families of related products created through one factory.

Invariants:
    - Every product a concrete factory creates belongs to that factory's variant
    - Client code sees only abstract factory and product types
    - Mixing products of different factories is not prevented; compatibility
      holds only while one factory is used throughout a unit of work

Design Decisions:
    - factory_for() is an explicit Theme -> factory dict, no lookup by class name
"""

import logging
from abc import ABC, abstractmethod

from pattern_gallery.core.domain_types import FactoryVariant, Theme
from pattern_gallery.core.narration import Narrator
from pattern_gallery.core.slot import Slot

logger = logging.getLogger(__name__)


# ─── Abstract example ────────────────────────────────────────────

class AbstractProductA(ABC):
    """Base interface of the first product of every family."""

    @abstractmethod
    def useful_function_a(self) -> str: ...


class ConcreteProductA1(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A2."


class AbstractProductB(ABC):
    """Base interface of the second product.

    Product B does its own thing and can also collaborate with a product A.
    The collaboration is only correct when both come from the same factory.
    """

    @abstractmethod
    def useful_function_b(self) -> str: ...

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str: ...


class ConcreteProductB1(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"


class AbstractFactory(ABC):
    """Declares one creation method per product of the family."""
    variant: FactoryVariant

    @abstractmethod
    def create_product_a(self) -> AbstractProductA: ...

    @abstractmethod
    def create_product_b(self) -> AbstractProductB: ...


class ConcreteFactory1(AbstractFactory):
    variant = FactoryVariant.FIRST

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    variant = FactoryVariant.SECOND

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


def client_code(factory: AbstractFactory, narrator: Narrator) -> None:
    """Works with factories and products only through their abstract types."""
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    narrator.say(product_b.useful_function_b())
    narrator.say(product_b.another_useful_function_b(product_a))


class FactoryClient:
    """Runs client_code against whichever factory is bound."""

    def __init__(self, factory: AbstractFactory):
        self._factory = Slot(AbstractFactory)
        self._factory.bind(factory)

    def set_factory(self, factory: AbstractFactory) -> None:
        self._factory.bind(factory)

    def run(self, narrator: Narrator) -> None:
        client_code(self._factory.bound, narrator)


# ─── Concrete example: UI themes ─────────────────────────────────

class Button(ABC):
    @abstractmethod
    def click(self, narrator: Narrator) -> None: ...


class Panel(ABC):
    @abstractmethod
    def display(self, narrator: Narrator) -> None: ...


class DarkButton(Button):
    def click(self, narrator: Narrator) -> None:
        narrator.say("Clicked a dark button!")


class DarkPanel(Panel):
    def display(self, narrator: Narrator) -> None:
        narrator.say("Displaying a dark panel.")


class LightButton(Button):
    def click(self, narrator: Narrator) -> None:
        narrator.say("Clicked a light button!")


class LightPanel(Panel):
    def display(self, narrator: Narrator) -> None:
        narrator.say("Displaying a light panel.")


class UIAbstractFactory(ABC):
    variant: Theme

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_panel(self) -> Panel: ...


class DarkModeFactory(UIAbstractFactory):
    variant = Theme.DARK

    def create_button(self) -> Button:
        return DarkButton()

    def create_panel(self) -> Panel:
        return DarkPanel()


class LightModeFactory(UIAbstractFactory):
    variant = Theme.LIGHT

    def create_button(self) -> Button:
        return LightButton()

    def create_panel(self) -> Panel:
        return LightPanel()


_THEME_FACTORIES: dict[Theme, type[UIAbstractFactory]] = {
    Theme.DARK: DarkModeFactory,
    Theme.LIGHT: LightModeFactory,
}


def factory_for(theme: Theme) -> UIAbstractFactory:
    """Return a fresh factory for `theme`. Accepts the enum or its value."""
    return _THEME_FACTORIES[Theme(theme)]()


def render_screen(factory: UIAbstractFactory, narrator: Narrator) -> None:
    logger.debug(
        f"Rendering screen with the {factory.variant.value} theme",
        extra={"pattern": "abstract_factory", "variant": factory.variant.value},
    )
    button = factory.create_button()
    button.click(narrator)

    panel = factory.create_panel()
    panel.display(narrator)
