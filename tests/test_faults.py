"""
Tests for the fault taxonomy.
"""

from __future__ import annotations

import pytest

from fixtura.blueprint import Blueprint
from fixtura.exceptions import (
    BLUEPRINT,
    ArgumentShapeFault,
    BlueprintCantSaveFault,
    BlueprintCycleFault,
    BlueprintFault,
    NoBlueprintFault,
)
from fixtura.faults import Fault, FaultDomain, Severity


class Widget:
    pass


class TestFault:

    def test_requires_code_message_domain(self):
        with pytest.raises(TypeError):
            Fault(code="X")

    def test_defaults(self):
        fault = Fault(code="C", message="bad blueprint", domain=BLUEPRINT)
        assert fault.severity == Severity.ERROR
        assert fault.retryable is False
        assert str(fault) == "[C] bad blueprint"

    def test_explicit_severity(self):
        fault = Fault(code="C", message="m", domain=BLUEPRINT, severity=Severity.FATAL, retryable=True)
        assert fault.severity == Severity.FATAL
        assert fault.retryable is True

    def test_to_dict(self):
        fault = Fault(code="C", message="m", domain=BLUEPRINT, metadata={"k": 1})
        assert fault.to_dict() == {
            "code": "C",
            "message": "m",
            "domain": "BLUEPRINT",
            "severity": "error",
            "retryable": False,
            "metadata": {"k": 1},
        }

    def test_domain_equality(self):
        assert FaultDomain("x") == FaultDomain("x")
        assert FaultDomain("x") == "x"
        assert hash(FaultDomain("x")) == hash(FaultDomain("x"))


class TestBlueprintFaults:

    @pytest.mark.parametrize("fault, code", [
        (ArgumentShapeFault(("a",)), "FX100"),
        (NoBlueprintFault(Widget, "master"), "FX200"),
        (BlueprintCantSaveFault(Blueprint(Widget)), "FX300"),
        (BlueprintCycleFault(["a", "b", "a"]), "FX400"),
    ])
    def test_codes_and_domain(self, fault, code):
        assert isinstance(fault, BlueprintFault)
        assert fault.code == code
        assert fault.domain == BLUEPRINT
        assert fault.severity == Severity.ERROR
        assert fault.retryable is False

    def test_no_blueprint_message(self):
        fault = NoBlueprintFault(Widget, "draft")
        assert fault.message == "No draft blueprint defined for class Widget"
        assert fault.metadata == {"owner": "Widget", "name": "draft"}

    def test_cant_save_metadata(self):
        fault = BlueprintCantSaveFault(Blueprint(Widget, name="draft"))
        assert "Widget" in fault.message
        assert fault.metadata["blueprint"] == "draft"

    def test_argument_shape_is_type_error(self):
        fault = ArgumentShapeFault((1, 2))
        assert isinstance(fault, TypeError)
        assert fault.args_given == (1, 2)
        assert fault.message == "Couldn't understand arguments: (1, 2)"

    def test_cycle_message(self):
        fault = BlueprintCycleFault(["A.x", "A.y", "A.x"])
        assert fault.message == "Circular blueprint parent detected: A.x → A.y → A.x"
