"""
Fixtura Blueprint Exceptions — fault-domain-integrated error hierarchy.

Every error raised while defining or making blueprints belongs to the
``BLUEPRINT`` fault domain, carrying a stable code and diagnostic metadata.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .faults import Fault, FaultDomain, Severity

if TYPE_CHECKING:
    from .blueprint import Blueprint


# ── Fault Domain ─────────────────────────────────────────────────────────

BLUEPRINT = FaultDomain(
    name="BLUEPRINT",
    description="Blueprint definition and construction errors",
)


# ── Base ─────────────────────────────────────────────────────────────────

class BlueprintFault(Fault):
    """Base fault for all blueprint errors."""

    domain = BLUEPRINT
    severity = Severity.ERROR
    code = "FX000"

    def __init__(
        self,
        message: str = "Blueprint error",
        *,
        code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code or self.__class__.code,
            retryable=False,
            metadata=metadata,
        )


# ── Specific Faults ──────────────────────────────────────────────────────

class ArgumentShapeFault(BlueprintFault, TypeError):
    """Raised when the arguments to ``make`` cannot be decoded."""

    code = "FX100"

    def __init__(self, args: tuple, reason: str = "Couldn't understand arguments"):
        super().__init__(
            message=f"{reason}: {args!r}",
            metadata={"args": args},
        )
        self.args_given = args


class NoBlueprintFault(BlueprintFault, LookupError):
    """Raised when a class has no blueprint with the requested name."""

    code = "FX200"

    def __init__(self, owner: type, name: str):
        super().__init__(
            message=f"No {name} blueprint defined for class {owner.__name__}",
            metadata={"owner": owner.__qualname__, "name": name},
        )
        self.owner = owner
        self.name = name


class BlueprintCantSaveFault(BlueprintFault):
    """Raised by ``make_saved`` when the owner class cannot persist objects."""

    code = "FX300"

    def __init__(self, blueprint: Blueprint, reason: str = "does not define save()"):
        owner = blueprint.owner
        super().__init__(
            message=f"make_saved is not supported for {owner.__name__}: {reason}",
            metadata={"owner": owner.__qualname__, "blueprint": blueprint.name},
        )
        self.blueprint = blueprint


class BlueprintCycleFault(BlueprintFault):
    """Raised when a blueprint's parent chain refers back to itself."""

    code = "FX400"

    def __init__(self, cycle_path: List[str]):
        super().__init__(
            message=f"Circular blueprint parent detected: {' → '.join(cycle_path)}",
            metadata={"cycle": cycle_path},
        )
