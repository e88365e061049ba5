import pytest

from typesafety.variant import BasicVariant, fallback_variant, variant, with_variant
from typesafety.variant_policy import NullVar, OptionalPolicy, nullvar


class Boom:
    def __init__(self, *args):
        raise RuntimeError("construction failed")


IntStr = variant(int, str)
OptIntStr = variant(NullVar, int, str)


def test_construct_from_value():
    v = IntStr(3)
    assert v.has_value(int)
    assert not v.has_value(str)
    assert v.value(int) == 3
    assert bool(v)


def test_construct_from_type_and_args():
    v = IntStr(int, "42")
    assert v.value(int) == 42
    assert v.kind is int


def test_non_empty_variant_requires_value():
    with pytest.raises(TypeError):
        IntStr()
    with pytest.raises(TypeError):
        IntStr(nullvar)


def test_optional_variant_empty_state():
    v = OptIntStr()
    assert not v
    assert v.has_value(NullVar)
    assert v.value(NullVar) is nullvar
    assert v.type_id == 0
    assert OptIntStr(nullvar) == nullvar


def test_reset_only_when_allowed():
    v = OptIntStr("abc")
    v.reset()
    assert not v.has_value()
    w = IntStr("abc")
    with pytest.raises(TypeError):
        w.reset()
    assert w.value(str) == "abc"


def test_value_errors():
    v = IntStr(3)
    with pytest.raises(ValueError):
        v.value(str)
    with pytest.raises(TypeError):
        v.value(float)
    with pytest.raises(ValueError):
        v.value(NullVar)


def test_emplace_changes_type():
    v = IntStr(3)
    assert v.emplace(str, "abc") == "abc"
    assert v.has_value(str)
    assert v.value(str) == "abc"
    v.emplace(int, 7)
    assert v.value(int) == 7


def test_emplace_bool_converted_to_int():
    v = IntStr(0)
    v.emplace(int, True)
    assert type(v.value(int)) is int


def test_rarely_empty_keeps_old_value_on_failure():
    V = variant(int, Boom)
    v = V(5)
    with pytest.raises(RuntimeError):
        v.emplace(Boom)
    assert v.value(int) == 5


def test_optional_policy_empties_on_failure():
    V = variant(NullVar, int, Boom)
    v = V(5)
    with pytest.raises(RuntimeError):
        v.emplace(Boom)
    assert not v.has_value()


def test_fallback_policy_stores_fallback_on_failure():
    F = fallback_variant(int, str, Boom)
    f = F("x")
    with pytest.raises(RuntimeError):
        f.emplace(Boom)
    assert f.has_value(int)
    assert f.value(int) == int()


def test_fallback_variant_cannot_be_empty():
    F = fallback_variant(int, str)
    with pytest.raises(TypeError):
        F()


def test_optional_value_and_value_or():
    v = IntStr("abc")
    assert v.optional_value(str) == "abc"
    assert v.optional_value(int) is None
    assert v.value_or(int, "12") == 12
    assert v.value_or(str, "zzz") == "abc"
    e = OptIntStr()
    assert e.optional_value(NullVar) is nullvar


def test_map_applies_function():
    v = IntStr(3)
    m = v.map(lambda x, y: x * y, 2)
    assert m.value(int) == 6
    assert v.value(int) == 3


def test_map_with_mapping_skips_missing_type():
    v = IntStr("abc")
    m = v.map({int: lambda x: x + 1})
    assert m == v
    assert m is not v


def test_map_empty_and_unstorable():
    assert not OptIntStr().map(lambda x: x)
    with pytest.raises(TypeError):
        IntStr(3).map(float)


def test_swap_variants():
    a, b = IntStr(1), IntStr("b")
    a.swap(b)
    assert a.value(str) == "b"
    assert b.value(int) == 1
    c, d = OptIntStr(4), OptIntStr()
    c.swap(d)
    assert not c
    assert d.value(int) == 4


def test_swap_rejects_other_types():
    with pytest.raises(TypeError):
        IntStr(1).swap(variant(int, float)(1))


def test_equality_with_values():
    v = IntStr(1)
    assert v == 1
    assert v != 1.0
    assert v != "1"
    assert v == IntStr(1)
    assert v != IntStr(2)
    assert OptIntStr() == OptIntStr()


def test_ordering_by_type_then_value():
    assert IntStr(1) < IntStr(2)
    assert IntStr(100) < IntStr("a")
    assert IntStr("a") > IntStr(100)
    assert IntStr(2) >= IntStr(2)
    assert IntStr(2) <= 2
    assert 1 < IntStr(2)


def test_ordering_with_nullvar():
    full, empty = OptIntStr(1), OptIntStr()
    assert full > nullvar
    assert not (full < nullvar)
    assert nullvar < full
    assert empty <= nullvar
    assert not (empty < nullvar)
    assert full >= nullvar
    assert empty < full


def test_with_variant_calls_function():
    seen = []
    with_variant(IntStr(3), lambda x, y: seen.append((x, y)), "extra")
    with_variant(OptIntStr(), seen.append)
    with_variant(IntStr("s"), {int: seen.append})
    assert seen == [(3, "extra")]


def test_invalid_types_rejected():
    with pytest.raises(TypeError):
        BasicVariant((), OptionalPolicy())
    with pytest.raises(TypeError):
        BasicVariant((int, int), OptionalPolicy())
    with pytest.raises(TypeError):
        IntStr(2.5)