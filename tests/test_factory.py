"""Tests for building primitives by name and for payload checking."""

import numpy as np
import pytest

from function_algebra import (
    Constant,
    Exponential,
    FunctionFactory,
    Identity,
    IntPayload,
    MalformedPayloadError,
    NoPayload,
    Polynomial,
    Power,
    SequencePayload,
    create_object,
    payload_from_value,
)
from function_algebra.function import PrimitiveFunction


# ================================================================
# FACTORY
# ================================================================

class TestFactoryCreate:

    def setup_method(self):
        self.fact = FunctionFactory()

    def test_default_names(self):
        assert self.fact.names() == ["const", "exp", "ident", "polynomial", "power"]

    def test_creates_each_variant(self):
        assert isinstance(self.fact.create_object("ident"), Identity)
        assert isinstance(self.fact.create_object("const", 23), Constant)
        assert isinstance(self.fact.create_object("power", 2), Power)
        assert isinstance(self.fact.create_object("polynomial", [1, 2, 5]), Polynomial)
        assert isinstance(self.fact.create_object("exp", 3), Exponential)

    def test_values(self):
        assert self.fact.create_object("const", 322).evaluate(1) == 322
        assert self.fact.create_object("power", 3).evaluate(3) == 27
        assert self.fact.create_object("ident").evaluate(14) == 14
        assert self.fact.create_object("polynomial", [1, 2]).evaluate(5) == 11
        assert self.fact.create_object("exp", 2).evaluate(2) == pytest.approx(54.59, abs=0.01)

    def test_derivatives(self):
        assert self.fact.create_object("const", 14).derivative(5) == 0
        assert self.fact.create_object("ident").derivative(3) == 1
        assert self.fact.create_object("power", 3).derivative(2) == 12
        assert self.fact.create_object("polynomial", [1, 2, 3]).derivative(1) == 8
        assert self.fact.create_object("exp", 2).derivative(2) == pytest.approx(109.19, abs=0.01)

    def test_ident_ignores_payload(self):
        assert isinstance(self.fact.create_object("ident", "anything"), Identity)
        assert isinstance(self.fact.create_object("ident", 7), Identity)

    def test_polynomial_from_tuple_and_array(self):
        assert self.fact.create_object("polynomial", (1, 2)).evaluate(5) == 11
        f = self.fact.create_object("polynomial", np.array([1, 2]))
        assert f.coefficients == (1, 2)

    def test_typed_payloads(self):
        assert self.fact.create_object("power", IntPayload(2)).evaluate(3) == 9
        f = self.fact.create_object("polynomial", SequencePayload((0, 1)))
        assert f.evaluate(4) == 4

    def test_unknown_name_returns_none(self):
        assert self.fact.create_object("sin", 1) is None
        assert "sin" not in self.fact
        assert "power" in self.fact

    @pytest.mark.parametrize("name", [["const"], None, 3, ("power",)])
    def test_non_string_name_returns_none(self, name):
        assert self.fact.create_object(name, 1) is None
        assert name not in self.fact

    def test_module_level_create_object(self):
        f = create_object("polynomial", [-5, 2, 3])
        assert f.evaluate(1) == 0
        assert create_object("nope") is None

    def test_combine_created_objects(self):
        a = self.fact.create_object("polynomial", [1, 6])
        b = self.fact.create_object("power", 4)
        assert (a * b).derivative(1) == 34


class TestFactoryMalformed:

    def setup_method(self):
        self.fact = FunctionFactory()

    @pytest.mark.parametrize(
        "name, value",
        [
            ("power", "2"),
            ("power", 2.5),
            ("power", 10 ** 400),
            ("const", 2 ** 31),
            ("polynomial", [1, 10 ** 400]),
            ("power", [2]),
            ("const", None),
            ("exp", True),
            ("polynomial", 3),
            ("polynomial", []),
            ("polynomial", [1, "a"]),
            ("polynomial", None),
        ],
    )
    def test_rejects_wrong_shape(self, name, value):
        with pytest.raises(MalformedPayloadError):
            self.fact.create_object(name, value)

    def test_error_mentions_variant(self):
        with pytest.raises(MalformedPayloadError, match="Power"):
            self.fact.create_object("power", [1, 2])


class TestFactoryRegistration:

    def test_register_custom_variant(self):
        class Square(Power):
            @classmethod
            def from_value(cls, value=None):
                return cls(2)

        fact = FunctionFactory()
        fact.register("square", Square)
        f = fact.create_object("square")
        assert f.evaluate(3) == 9
        assert "square" in fact.names()

    def test_empty_factory(self):
        fact = FunctionFactory(register_defaults=False)
        assert fact.names() == []
        assert fact.create_object("const", 1) is None

    def test_register_rejects_non_primitive(self):
        fact = FunctionFactory()
        with pytest.raises(TypeError):
            fact.register("bad", int)
        with pytest.raises(TypeError):
            fact.register("bad", Constant(1))

    def test_registered_classes_are_primitives(self):
        fact = FunctionFactory()
        for name in fact.names():
            assert issubclass(type(fact.create_object(name, [1] if name == "polynomial" else 1)), PrimitiveFunction)


# ================================================================
# PAYLOADS
# ================================================================

class TestPayloads:

    def test_none(self):
        assert payload_from_value(None) == NoPayload()

    def test_int(self):
        assert payload_from_value(5) == IntPayload(5)
        assert payload_from_value(np.int32(5)) == IntPayload(5)
        assert type(payload_from_value(np.int32(5)).value) is int

    def test_sequence(self):
        assert payload_from_value([1, 2]) == SequencePayload((1, 2))
        assert payload_from_value((1, 2)).values == (1, 2)

    def test_payload_passes_through(self):
        p = IntPayload(3)
        assert payload_from_value(p) is p

    @pytest.mark.parametrize("bad", ["abc", 2.5, True, {"a": 1}, object()])
    def test_unsupported(self, bad):
        with pytest.raises(MalformedPayloadError):
            payload_from_value(bad)

    @pytest.mark.parametrize("big", [10 ** 400, 2 ** 31, -2 ** 31 - 1])
    def test_out_of_range_integers(self, big):
        with pytest.raises(MalformedPayloadError):
            payload_from_value(big)
        with pytest.raises(MalformedPayloadError):
            payload_from_value([0, big])

    def test_int_payload_rejects_float(self):
        with pytest.raises(MalformedPayloadError):
            IntPayload(1.5)

    def test_sequence_payload_rejects_floats(self):
        with pytest.raises(MalformedPayloadError):
            SequencePayload([1, 2.0])

    def test_payloads_are_frozen(self):
        p = IntPayload(3)
        with pytest.raises(AttributeError):
            p.value = 4
