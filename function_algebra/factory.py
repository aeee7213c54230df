"""
FunctionFactory — build primitive functions by name.

    factory = FunctionFactory()
    f = factory.create_object("polynomial", [1, 2, 5])
    g = factory.create_object("ident")

The value passed in is untyped; it is turned into a payload and checked
against what the named variant expects before anything is built. An
unknown name gives None rather than an error.
"""

import logging
from typing import Dict, List, Optional, Type

from .function import (
    Constant,
    Exponential,
    Identity,
    Polynomial,
    Power,
    PrimitiveFunction,
)

log = logging.getLogger(__name__)

DEFAULT_VARIANTS: Dict[str, Type[PrimitiveFunction]] = {
    "const": Constant,
    "ident": Identity,
    "power": Power,
    "exp": Exponential,
    "polynomial": Polynomial,
}


class FunctionFactory:
    """Name -> primitive variant lookup."""

    def __init__(self, register_defaults: bool = True):
        self._variants: Dict[str, Type[PrimitiveFunction]] = {}
        if register_defaults:
            for name, cls in DEFAULT_VARIANTS.items():
                self.register(name, cls)

    def register(self, name: str, cls: Type[PrimitiveFunction]) -> None:
        """Register (or replace) the variant built for name."""
        if not (isinstance(cls, type) and issubclass(cls, PrimitiveFunction)):
            raise TypeError(f"{cls!r} is not a PrimitiveFunction subclass")
        self._variants[name] = cls
        log.debug("registered %r -> %s", name, cls.__name__)

    def names(self) -> List[str]:
        return sorted(self._variants)

    def create_object(self, name: str, value=None) -> Optional[PrimitiveFunction]:
        """Build the variant registered under name from value.

        Returns None for an unknown or non-string name. Raises MalformedPayloadError if
        value does not have the shape the variant expects.
        """
        cls = self._variants.get(name) if isinstance(name, str) else None
        if cls is None:
            log.debug("no variant registered for %r", name)
            return None
        f = cls.from_value(value)
        log.debug("created %r from %r", f, value)
        return f

    def __contains__(self, name: str) -> bool:
        return isinstance(name, str) and name in self._variants


_default_factory = FunctionFactory()


def create_object(name: str, value=None) -> Optional[PrimitiveFunction]:
    """create_object() on the shared default factory."""
    return _default_factory.create_object(name, value)
