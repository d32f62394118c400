"""
Blueprint — the construction engine.

A Blueprint holds the ordered attribute recipes declared for one named
blueprint of a class, a (lazily resolved) parent blueprint to inherit
recipes from, and the logic that materializes an instance:

1. Walk the parent chain from the root ancestor down to this blueprint,
   concatenating recipes.  A name redeclared by a descendant moves to the
   descendant's position and fully shadows the ancestor's recipe.
2. Names present in the override mapping skip their recipe and take the
   override verbatim, in the same position.
3. Remaining recipes run in order against the in-progress instance, so a
   recipe can read every attribute assigned before it.
4. The populated instance is returned (and saved, for ``make_saved``).
"""

from __future__ import annotations

import inspect
import logging
import threading
from types import SimpleNamespace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .config import get_settings
from .exceptions import BlueprintCantSaveFault, BlueprintCycleFault
from .recipes import Recipe

logger = logging.getLogger("fixtura.blueprint")

__all__ = ["Blueprint", "KwargsBlueprint", "MASTER"]

MASTER = "master"

ParentRef = Union["Blueprint", str, Sequence[type], None]


class Blueprint:
    """
    Default construction engine.

    Instances are created with the owner's no-argument constructor and
    populated attribute by attribute with ``setattr``.  Subclass and return
    from ``Machinable.blueprint_class()`` to customise construction; see
    :class:`KwargsBlueprint`.

    Args:
        owner: The class this blueprint produces instances of.
        name: The blueprint's name within the owner's registry.
        parent: Where to inherit recipes from.  A Blueprint is used as-is, a
            string names another blueprint of the owner, and a sequence of
            classes is searched in order for the first ``master`` blueprint.
        attributes: Ordered mapping of attribute name to recipe.
    """

    def __init__(
        self,
        owner: type,
        *,
        name: str = MASTER,
        parent: ParentRef = None,
        attributes: Optional[Mapping[str, Any]] = None,
    ):
        self.owner = owner
        self.name = name
        self._parent = parent
        self.attributes: Dict[str, Recipe] = {
            key: Recipe.of(value) for key, value in (attributes or {}).items()
        }
        self._serial_number = 0
        self._serial_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.owner.__name__}.{self.name}>"

    # ── Inheritance ──────────────────────────────────────────────────

    @property
    def parent(self) -> Optional[Blueprint]:
        """The parent blueprint, looked up on every access."""
        from .registry import BlueprintRegistry

        ref = self._parent
        if ref is None or isinstance(ref, Blueprint):
            return ref
        if isinstance(ref, str):
            registry = BlueprintRegistry.for_class(self.owner, create=False)
            return registry.fetch(ref) if registry is not None else None

        for klass in ref:
            registry = BlueprintRegistry.for_class(klass, create=False)
            if registry is None:
                continue
            candidate = registry.fetch(MASTER)
            if candidate is not None and candidate is not self:
                return candidate
        return None

    def ancestry(self) -> List[Blueprint]:
        """Blueprints from the root ancestor down to (and including) self."""
        chain: List[Blueprint] = []
        current: Optional[Blueprint] = self
        while current is not None:
            if any(bp is current for bp in chain):
                path = [f"{bp.owner.__name__}.{bp.name}" for bp in chain]
                raise BlueprintCycleFault(path + [f"{current.owner.__name__}.{current.name}"])
            chain.append(current)
            current = current.parent
        chain.reverse()
        return chain

    def effective_recipes(self) -> Dict[str, Recipe]:
        """Own and inherited recipes, in evaluation order."""
        resolved: Dict[str, Recipe] = {}
        for blueprint in self.ancestry():
            for key, recipe in blueprint.attributes.items():
                resolved.pop(key, None)
                resolved[key] = recipe
        return resolved

    def new_serial_number(self) -> str:
        """Next serial number, shared by every blueprint in the chain."""
        parent = self.parent
        if parent is not None:
            return parent.new_serial_number()
        with self._serial_lock:
            self._serial_number += 1
            number = self._serial_number
        return get_settings().format_serial(number)

    # ── Construction hooks ───────────────────────────────────────────

    def new_instance(self) -> Any:
        return self.owner()

    def assign(self, instance: Any, key: str, value: Any) -> None:
        setattr(instance, key, value)

    def finalize(self, instance: Any) -> Any:
        return instance

    def can_save(self) -> bool:
        return callable(getattr(self.owner, "save", None))

    # ── Making objects ───────────────────────────────────────────────

    def make(self, attributes: Optional[Mapping[str, Any]] = None) -> Any:
        """Construct an object, overriding recipes with ``attributes``."""
        overrides = dict(attributes or {})
        recipes = self.effective_recipes()
        serial_number = self.new_serial_number()
        instance = self.new_instance()

        for key, value in overrides.items():
            if key not in recipes:
                self.assign(instance, key, value)

        for key, recipe in recipes.items():
            if key in overrides:
                value = overrides[key]
            else:
                value = recipe.evaluate(instance, serial_number)
            self.assign(instance, key, value)

        return self.finalize(instance)

    def make_saved(self, attributes: Optional[Mapping[str, Any]] = None) -> Any:
        """Construct an object and call its ``save()``."""
        self.ensure_can_save()
        obj = self.make(attributes)
        obj.save()
        logger.debug("Saved %r from %r", obj, self)
        return obj

    async def amake_saved(self, attributes: Optional[Mapping[str, Any]] = None) -> Any:
        """Construct an object and await its ``save()``."""
        self.ensure_can_save(awaitable=True)
        obj = self.make(attributes)
        result = obj.save()
        if inspect.isawaitable(result):
            await result
        logger.debug("Saved %r from %r", obj, self)
        return obj

    def ensure_can_save(self, awaitable: bool = False) -> None:
        if not self.can_save():
            raise BlueprintCantSaveFault(self)
        if not awaitable and inspect.iscoroutinefunction(self.owner.save):
            raise BlueprintCantSaveFault(self, "save() is a coroutine, use amake_saved")


class KwargsBlueprint(Blueprint):
    """
    Engine for classes that must receive every attribute at construction
    (dataclasses, frozen or slotted classes).  Recipes see a mutable draft;
    the owner is then called with the draft's attributes as keywords.
    """

    def new_instance(self) -> SimpleNamespace:
        return SimpleNamespace()

    def finalize(self, instance: SimpleNamespace) -> Any:
        return self.owner(**vars(instance))
