"""
Machinable — the class-side blueprint API.

Inherit from :class:`Machinable` to give a class ``define_blueprint``,
``make``, ``make_saved`` and friends::

    class Post(Machinable):
        pass

    @Post.define_blueprint()
    def master(r):
        r.title = "A Post"
        r.body = "Lorem ipsum..."

    @Post.define_blueprint("draft")
    def draft(r):
        r.body = "Draft body"

    Post.make()                      # master blueprint
    Post.make(title="Hi")            # with an override
    Post.make(3, "draft")            # list of three drafts
    Post.make_saved({"title": "x"})  # built, then saved
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Tuple, Type

from .blueprint import MASTER, Blueprint, ParentRef
from .exceptions import ArgumentShapeFault
from .recipes import RecipeRecorder
from .registry import BlueprintRegistry

__all__ = ["Machinable"]


def decode_make_args(
    args: Tuple[Any, ...], overrides: Dict[str, Any]
) -> Tuple[Optional[int], str, Dict[str, Any]]:
    """
    Split ``make`` arguments into ``(count, name, attributes)``.

    Positional arguments are taken in order: an optional count, an optional
    blueprint name, an optional attribute mapping.  Keyword arguments may be
    used instead of the mapping, but not together with it.
    """
    remaining = list(args)

    def shift(kind: Any, exclude: Tuple[type, ...] = ()) -> Any:
        if remaining and isinstance(remaining[0], kind) and not isinstance(remaining[0], exclude):
            return remaining.pop(0)
        return None

    count = shift(int, (bool,))
    name = shift(str)
    if name is None:
        name = MASTER
    attributes = shift(Mapping)

    if remaining:
        raise ArgumentShapeFault(args)
    if count is not None and count < 0:
        raise ArgumentShapeFault(args, "Count must be non-negative")
    if attributes is not None and overrides:
        raise ArgumentShapeFault(args, "Pass overrides as a mapping or as keywords, not both")

    return count, name, dict(attributes if attributes is not None else overrides)


class Machinable:
    """Mixin adding blueprint definition and object construction."""

    @classmethod
    def define_blueprint(
        cls,
        name: str = MASTER,
        body: Optional[Callable[[RecipeRecorder], Any]] = None,
        *,
        parent: ParentRef = None,
    ) -> Any:
        """
        Define (or replace) the blueprint called ``name`` for this class.

        ``body`` receives a recorder; attribute assignments on it become the
        blueprint's recipes.  Called without ``body``, returns a decorator.
        """
        if body is None:
            def decorator(func: Callable[[RecipeRecorder], Any]) -> Blueprint:
                return cls.define_blueprint(name, func, parent=parent)
            return decorator

        registry = BlueprintRegistry.for_class(cls)
        return registry.define(name, parent, body, engine=cls.blueprint_class())

    @classmethod
    def get_blueprint(cls, name: str = MASTER) -> Optional[Blueprint]:
        registry = BlueprintRegistry.for_class(cls, create=False)
        return registry.fetch(name) if registry is not None else None

    @classmethod
    def make(cls, /, *args: Any, **overrides: Any) -> Any:
        """
        Construct an object from a blueprint.

        :call-seq: ``make([count], [blueprint_name], [attributes])``

        With ``count``, returns a list of independently built objects.
        """
        return cls._make_each(args, overrides, lambda bp, attrs: bp.make(attrs))

    @classmethod
    def make_saved(cls, /, *args: Any, **overrides: Any) -> Any:
        """Construct and save objects; same arguments as :meth:`make`."""
        return cls._make_each(
            args, overrides, lambda bp, attrs: bp.make_saved(attrs), saving=True
        )

    @classmethod
    async def amake_saved(cls, /, *args: Any, **overrides: Any) -> Any:
        """Async :meth:`make_saved` for classes whose ``save()`` is awaitable."""
        count, blueprint, attributes = cls._decode(args, overrides)
        blueprint.ensure_can_save(awaitable=True)
        if count is None:
            return await blueprint.amake_saved(attributes)
        return [await blueprint.amake_saved(attributes) for _ in range(count)]

    @classmethod
    def clear_blueprints(cls) -> None:
        """Remove all blueprints defined on this class."""
        BlueprintRegistry.for_class(cls).clear()

    @classmethod
    def blueprint_class(cls) -> Type[Blueprint]:
        """
        Engine used for new blueprints of this class.

        Override to return a custom :class:`Blueprint` subclass (e.g.
        :class:`~fixtura.blueprint.KwargsBlueprint`).
        """
        return Blueprint

    # ── Internals ────────────────────────────────────────────────────

    @classmethod
    def _decode(
        cls, args: Tuple[Any, ...], overrides: Dict[str, Any]
    ) -> Tuple[Optional[int], Blueprint, Dict[str, Any]]:
        count, name, attributes = decode_make_args(args, overrides)
        blueprint = BlueprintRegistry.for_class(cls).lookup(name)
        return count, blueprint, attributes

    @classmethod
    def _make_each(
        cls,
        args: Tuple[Any, ...],
        overrides: Dict[str, Any],
        build: Callable[[Blueprint, Dict[str, Any]], Any],
        saving: bool = False,
    ) -> Any:
        count, blueprint, attributes = cls._decode(args, overrides)
        if saving:
            blueprint.ensure_can_save()
        if count is None:
            return build(blueprint, attributes)
        return [build(blueprint, attributes) for _ in range(count)]
