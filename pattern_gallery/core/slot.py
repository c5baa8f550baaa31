"""Composer Binding: one slot holding exactly one implementation of a declared capability.

Invariants:
    - bind() checks the declared capability with isinstance, once, at bind time
    - bind() fully replaces the previous binding before the next read of `bound`
    - Reading `bound` while unbound raises UnboundComposerError (fail fast, never None)
    - Slot never branches on which concrete variant is bound

Design Decisions:
    - Capabilities are ABCs, so the bind-time check is nominal rather than structural
    - clear() is for optional hooks (Invoker); composers with a required
      binding never call it
    - Log extras carry the variant enum value when the implementation declares one
"""

import logging
from enum import Enum
from typing import Generic, TypeVar

from pattern_gallery.core.errors import CapabilityMismatchError, UnboundComposerError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def variant_of(impl: object) -> str:
    """Variant tag of `impl` for log extras: its enum value, else its class name."""
    variant = getattr(type(impl), "variant", None)
    if isinstance(variant, Enum):
        return variant.value
    return type(impl).__name__


class Slot(Generic[T]):
    """Holds the currently bound implementation of `capability`."""

    def __init__(self, capability: type[T], impl: T | None = None):
        self._capability = capability
        self._impl: T | None = None
        if impl is not None:
            self.bind(impl)

    @property
    def capability(self) -> type[T]:
        return self._capability

    @property
    def is_bound(self) -> bool:
        return self._impl is not None

    @property
    def bound(self) -> T:
        if self._impl is None:
            raise UnboundComposerError(self._capability.__name__)
        return self._impl

    def bind(self, impl: T) -> None:
        """Bind `impl`, replacing any previous binding."""
        if not isinstance(impl, self._capability):
            raise CapabilityMismatchError(
                self._capability.__name__, type(impl).__name__,
            )
        self._impl = impl
        logger.debug(
            f"Bound {type(impl).__name__} as {self._capability.__name__}",
            extra={
                "capability": self._capability.__name__,
                "variant": variant_of(impl),
            },
        )

    def clear(self) -> None:
        self._impl = None
