"""
Attribute recipes and the recording context blueprint bodies run in.

A recipe is a deferred computation: it runs only when an object is made,
never when the blueprint is defined.  Callables receive as many of
``(instance, serial_number)`` as they take required positional arguments::

    r.title = "A Post"                                  # constant
    r.slug = lambda: uuid.uuid4().hex                   # zero-argument
    r.heading = lambda post: post.title.upper()         # reads the instance
    r.email = lambda user, sn: f"user{sn}@example.com"  # serial number
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, List


def _required_positional(func: Callable) -> int:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return 0

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return 2
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ) and param.default is inspect.Parameter.empty:
            count += 1
    return min(count, 2)


class Recipe:
    """A deferred attribute value."""

    __slots__ = ("func", "arity")

    def __init__(self, func: Callable[..., Any], arity: int | None = None):
        self.func = func
        self.arity = _required_positional(func) if arity is None else arity

    @classmethod
    def of(cls, value: Any) -> "Recipe":
        """Wrap ``value``; non-callables become constants."""
        if isinstance(value, Recipe):
            return value
        if callable(value):
            return cls(value)
        return Constant(value)

    def evaluate(self, instance: Any, serial_number: str) -> Any:
        return self.func(*(instance, serial_number)[: self.arity])

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.func!r}>"


class Constant(Recipe):
    """A literal value, assigned as-is on every make."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value
        super().__init__(lambda: value, arity=0)

    def __repr__(self) -> str:
        return f"<Constant {self.value!r}>"


class Repeated(Recipe):
    """Evaluates an inner recipe ``count`` times, producing a list."""

    __slots__ = ("count", "inner")

    def __init__(self, count: int, inner: Recipe):
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self.count = count
        self.inner = inner
        super().__init__(self._collect, arity=2)

    def _collect(self, instance: Any, serial_number: str) -> List[Any]:
        return [self.inner.evaluate(instance, serial_number) for _ in range(self.count)]

    def __repr__(self) -> str:
        return f"<Repeated {self.count} x {self.inner!r}>"


def repeated(count: int, value: Any) -> Repeated:
    """
    Build a collection attribute.

    Usage::

        @Post.define_blueprint()
        def master(r):
            r.comments = repeated(3, lambda post: Comment.make(post=post))
    """
    return Repeated(count, Recipe.of(value))


class RecipeRecorder:
    """
    Records ``(attribute, recipe)`` pairs in the order a blueprint body
    declares them.  Re-declaring a name replaces its recipe in place.

    Attributes are write-only here; read previously assigned values from
    the instance passed to a recipe instead.
    """

    __slots__ = ("_recipes",)

    def __init__(self):
        object.__setattr__(self, "_recipes", {})

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            raise AttributeError(
                f"Cannot record private attribute {name!r} by assignment; "
                f"use record({name!r}, value)"
            )
        self.record(name, value)

    def __getattr__(self, name: str) -> Any:
        raise AttributeError(
            f"{name!r} is not readable while recording; "
            f"take the instance as the recipe's first argument"
        )

    def record(self, name: str, value: Any) -> None:
        self._recipes[name] = Recipe.of(value)

    @property
    def recipes(self) -> Dict[str, Recipe]:
        return dict(self._recipes)
