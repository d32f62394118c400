"""
Fixtura Blueprint Registry — per-class store of named blueprints.

Each class that defines blueprints gets its own registry, kept in a weak
side table keyed by the class object.  Subclasses do not share their
superclass's registry; blueprint inheritance goes through the parent chain
of :class:`~fixtura.blueprint.Blueprint` instead.

Registries are mutated without locking.  Define and clear blueprints during
single-threaded setup (module import, ``conftest.py``, fixtures); making
objects from an already-built registry is safe from any thread as long as
nothing is being redefined at the same time; serial numbers are drawn
under a per-chain lock.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Dict, List, Optional, Type

from .blueprint import MASTER, Blueprint, ParentRef
from .exceptions import NoBlueprintFault
from .recipes import RecipeRecorder

logger = logging.getLogger("fixtura.registry")

__all__ = ["BlueprintRegistry"]


class BlueprintRegistry:
    """Named blueprints for one owner class."""

    _registries: "weakref.WeakKeyDictionary[type, BlueprintRegistry]" = weakref.WeakKeyDictionary()

    def __init__(self, owner: type):
        self.owner = owner
        self._blueprints: Dict[str, Blueprint] = {}

    @classmethod
    def for_class(cls, owner: type, create: bool = True) -> Optional[BlueprintRegistry]:
        """Get the registry of ``owner``, creating it on first use."""
        registry = cls._registries.get(owner)
        if registry is None and create:
            registry = cls(owner)
            cls._registries[owner] = registry
        return registry

    @classmethod
    def clear_all(cls) -> None:
        """Clear the blueprints of every class in the process."""
        for registry in list(cls._registries.values()):
            registry.clear()

    def define(
        self,
        name: str,
        parent: ParentRef,
        body: Callable[[RecipeRecorder], Any],
        engine: Optional[Type[Blueprint]] = None,
    ) -> Blueprint:
        """
        Record ``body``'s recipes and store a new blueprint under ``name``.

        Any existing blueprint with that name is replaced outright.  With
        ``parent=None`` the default parent applies: the superclass's
        ``master`` for a ``master`` blueprint, otherwise this class's own
        ``master``.
        """
        recorder = RecipeRecorder()
        body(recorder)

        if parent is None:
            parent = self.owner.__mro__[1:] if name == MASTER else (self.owner,)

        factory = engine or Blueprint
        blueprint = factory(
            self.owner,
            name=name,
            parent=parent,
            attributes=recorder.recipes,
        )

        if name in self._blueprints:
            logger.debug("Replacing blueprint %s.%s", self.owner.__name__, name)
        else:
            logger.debug("Defined blueprint %s.%s", self.owner.__name__, name)
        self._blueprints[name] = blueprint
        return blueprint

    def lookup(self, name: str) -> Blueprint:
        """Get the blueprint called ``name`` or raise :class:`NoBlueprintFault`."""
        blueprint = self._blueprints.get(name)
        if blueprint is None:
            raise NoBlueprintFault(self.owner, name)
        return blueprint

    def fetch(self, name: str) -> Optional[Blueprint]:
        return self._blueprints.get(name)

    def clear(self) -> None:
        if self._blueprints:
            logger.debug(
                "Clearing %d blueprint(s) of %s", len(self._blueprints), self.owner.__name__
            )
        self._blueprints.clear()

    def names(self) -> List[str]:
        return list(self._blueprints)

    def __contains__(self, name: object) -> bool:
        return name in self._blueprints

    def __len__(self) -> int:
        return len(self._blueprints)

    def __repr__(self) -> str:
        return f"<BlueprintRegistry {self.owner.__name__} {self.names()}>"
