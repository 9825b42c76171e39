from __future__ import annotations

import copy
import dataclasses

import pytest

from gasunit import (
    ONE_TGAS,
    U64_MAX,
    DivisionByZero,
    Gas,
    InvalidDigit,
    Overflow,
    Underflow,
)


def test_from_tgas_scaling() -> None:
    assert Gas.from_tgas(1) == Gas(1_000_000_000_000)
    assert Gas.from_tgas(300) == Gas(300_000_000_000_000)
    assert Gas.from_tgas(0) == Gas(0)
    assert ONE_TGAS == Gas.from_tgas(1)


def test_from_tgas_overflow() -> None:
    max_tgas = U64_MAX // 10**12
    assert Gas.from_tgas(max_tgas).magnitude == max_tgas * 10**12
    with pytest.raises(Overflow):
        Gas.from_tgas(max_tgas + 1)


def test_from_raw_wraps_any_u64() -> None:
    assert Gas.from_raw(0).magnitude == 0
    assert Gas.from_raw(U64_MAX).magnitude == U64_MAX
    assert Gas() == Gas(0)


@pytest.mark.parametrize("bad, exc", [(-1, Underflow), (U64_MAX + 1, Overflow), (1.5, TypeError), (True, TypeError), ("5", TypeError)])
def test_constructor_enforces_u64(bad, exc) -> None:
    with pytest.raises(exc):
        Gas(bad)


def test_add_and_overflow() -> None:
    assert Gas(2).add(Gas(3)) == Gas(5)
    assert Gas(2) + Gas(3) == Gas(5)
    assert Gas(U64_MAX).add(Gas(0)) == Gas(U64_MAX)
    with pytest.raises(Overflow) as ei:
        Gas(U64_MAX).add(Gas(1))
    assert ei.value.code == "GAS/OVERFLOW"
    # builtin compatibility
    assert isinstance(ei.value, OverflowError)


def test_sub_and_underflow() -> None:
    assert Gas(5).sub(Gas(3)) == Gas(2)
    assert Gas(5) - Gas(5) == Gas(0)
    with pytest.raises(Underflow) as ei:
        Gas(3).sub(Gas(5))
    assert ei.value.data == {"lhs": "3", "rhs": "5"}


def test_in_place_mutates_receiver() -> None:
    g = Gas(10)
    same = g.add_in_place(Gas(5))
    assert same is g
    assert g == Gas(15)
    g.sub_in_place(Gas(15))
    assert g == Gas(0)


def test_failed_in_place_leaves_receiver_unchanged() -> None:
    g = Gas(U64_MAX - 1)
    with pytest.raises(Overflow):
        g.add_in_place(Gas(2))
    assert g.magnitude == U64_MAX - 1

    h = Gas(1)
    with pytest.raises(Underflow):
        h.sub_in_place(Gas(2))
    assert h.magnitude == 1


def test_augmented_operators_build_new_values() -> None:
    g = Gas(1)
    alias = g
    g += Gas(4)
    assert g == Gas(5) and alias == Gas(1)
    g -= Gas(2)
    assert g == Gas(3)
    with pytest.raises(Underflow):
        g -= Gas(10)
    assert g == Gas(3)


def test_shared_constant_survives_augmented_assignment() -> None:
    budget = ONE_TGAS
    budget += Gas(5)
    assert budget == Gas(10**12 + 5)
    assert ONE_TGAS.magnitude == 10**12
    budget = ONE_TGAS
    budget -= Gas(1)
    assert ONE_TGAS == Gas.from_tgas(1)


@pytest.mark.parametrize("bad", [-5, U64_MAX + 9, 7])
def test_magnitude_cannot_be_reassigned(bad: int) -> None:
    g = Gas(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        g.magnitude = bad  # type: ignore[misc]
    assert g.magnitude == 1


def test_sum_starts_from_int_zero() -> None:
    parts = [Gas(1), Gas(2), Gas(3)]
    assert sum(parts) == Gas(6)
    assert sum([]) == 0
    assert 0 + Gas(4) == Gas(4)
    with pytest.raises(TypeError):
        1 + Gas(4)  # type: ignore[operator]
    with pytest.raises(Overflow):
        sum([Gas(U64_MAX), Gas(1)])


def test_scalar_mul_div_rem() -> None:
    g = Gas(17)
    assert g.mul_scalar(3) == Gas(51)
    assert g * 3 == 3 * g == Gas(51)
    assert g.div_scalar(5) == Gas(3)
    assert g // 5 == Gas(3)
    assert g.rem_scalar(5) == Gas(2)
    assert g % 5 == Gas(2)
    with pytest.raises(Overflow):
        Gas(U64_MAX).mul_scalar(2)
    assert Gas(0).mul_scalar(U64_MAX) == Gas(0)


@pytest.mark.parametrize("op", ["div_scalar", "rem_scalar"])
def test_division_by_zero_is_typed(op: str) -> None:
    with pytest.raises(DivisionByZero) as ei:
        getattr(Gas(10), op)(0)
    assert isinstance(ei.value, ZeroDivisionError)
    assert ei.value.code == "GAS/DIVISION_BY_ZERO"


def test_division_by_zero_operators() -> None:
    with pytest.raises(DivisionByZero):
        Gas(1) // 0
    with pytest.raises(DivisionByZero):
        Gas(1) % 0


@pytest.mark.parametrize("scalar, exc", [(-1, Underflow), (U64_MAX + 1, Overflow), (2.0, TypeError)])
def test_scalar_must_be_u64(scalar, exc) -> None:
    with pytest.raises(exc):
        Gas(1).mul_scalar(scalar)


def test_mixed_type_operators_are_rejected() -> None:
    with pytest.raises(TypeError):
        Gas(1) + 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        Gas(1) * Gas(2)  # type: ignore[operator]
    with pytest.raises(TypeError):
        Gas(4) / 2  # type: ignore[operator]
    with pytest.raises(TypeError):
        Gas(1).add(1)  # type: ignore[arg-type]


def test_saturating_helpers() -> None:
    assert Gas(U64_MAX).saturating_add(Gas(10)) == Gas(U64_MAX)
    assert Gas(1).saturating_add(Gas(2)) == Gas(3)
    assert Gas(1).saturating_sub(Gas(5)) == Gas(0)
    assert Gas(5).saturating_sub(Gas(1)) == Gas(4)


def test_ordering_equality_hash() -> None:
    assert Gas(1) < Gas(2) <= Gas(2) < Gas(U64_MAX)
    assert max(Gas(3), Gas(9), Gas(4)) == Gas(9)
    assert Gas(7) != 7
    assert {Gas(7): "a"}[Gas(7)] == "a"
    assert len({Gas(1), Gas(1), Gas(2)}) == 2


def test_conversions() -> None:
    g = Gas(12345)
    assert int(g) == 12345
    assert str(g) == "12345"
    assert repr(g) == "Gas(magnitude=12345)"
    assert not Gas(0)
    assert Gas(1)


def test_copies_are_independent() -> None:
    a = Gas(10)
    b = copy.copy(a)
    b.add_in_place(Gas(1))
    assert a == Gas(10)
    assert b == Gas(11)


def test_parse_classmethod_uses_freeform_rules() -> None:
    assert Gas.parse("1_000_000_000_000") == Gas(1_000_000_000_000)
    with pytest.raises(InvalidDigit):
        Gas.parse("A")
