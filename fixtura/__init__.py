"""
Fixtura — declarative test fixtures built from class blueprints.

Quick Start::

    from fixtura import Machinable

    class Post(Machinable):
        pass

    @Post.define_blueprint()
    def master(r):
        r.title = lambda post, sn: f"Post {sn}"
        r.body = "Lorem ipsum..."

    post = Post.make(title="Hi")
    posts = Post.make(3)
"""

from .blueprint import MASTER, Blueprint, KwargsBlueprint
from .config import (
    ConfigLoader,
    FixturaSettings,
    get_settings,
    set_settings,
    override_settings,
)
from .exceptions import (
    BLUEPRINT,
    ArgumentShapeFault,
    BlueprintCantSaveFault,
    BlueprintCycleFault,
    BlueprintFault,
    NoBlueprintFault,
)
from .faults import Fault, FaultDomain, Severity
from .machinable import Machinable
from .recipes import Constant, Recipe, RecipeRecorder, Repeated, repeated
from .registry import BlueprintRegistry

__version__ = "0.1.0"

__all__ = [
    # Core
    "Machinable",
    "Blueprint",
    "KwargsBlueprint",
    "BlueprintRegistry",
    "MASTER",
    # Recipes
    "Recipe",
    "Constant",
    "Repeated",
    "RecipeRecorder",
    "repeated",
    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    "BLUEPRINT",
    "BlueprintFault",
    "ArgumentShapeFault",
    "NoBlueprintFault",
    "BlueprintCantSaveFault",
    "BlueprintCycleFault",
    # Config
    "ConfigLoader",
    "FixturaSettings",
    "get_settings",
    "set_settings",
    "override_settings",
]
