import pytest
import os
import sys
import numpy as np
from decimal import Decimal
from fractions import Fraction

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from dok_matrix import (DOKMatrix, zero, one, register_element, is_element_type, element_type_of,
                        ElementRegistrationError, UnknownElementTypeError)
from test_utils import check_identity


BUILTIN_TYPES = [float, int, complex, Fraction, Decimal,
                 np.float64, np.float32, np.float16, np.int64, np.int32, np.complex128]


def test_float_identities():
    assert zero(float) == 0.0
    assert one(float) == 1.0
    assert type(zero(float)) is float
    assert type(one(float)) is float
    # float is the default element type
    assert zero() is zero(float)
    assert one() is one(float)


@pytest.mark.parametrize("elem_type", BUILTIN_TYPES)
def test_builtin_identities(elem_type):
    assert is_element_type(elem_type)
    assert type(zero(elem_type)) is elem_type
    assert type(one(elem_type)) is elem_type
    assert zero(elem_type) == 0
    assert one(elem_type) == 1


@pytest.mark.parametrize("elem_type", BUILTIN_TYPES)
def test_identities_are_shared(elem_type):
    assert zero(elem_type) is zero(elem_type)
    assert one(elem_type) is one(elem_type)


def test_unknown_type():
    assert not is_element_type(str)
    assert not is_element_type([])
    with pytest.raises(UnknownElementTypeError) as exc_info:
        zero(str)
    assert exc_info.value.elem_type is str
    with pytest.raises(UnknownElementTypeError):
        one(bytes)


class Mod7:
    """Integers modulo 7, a minimal element type for registration tests."""

    def __init__(self, value: int):
        self.value = value % 7

    def __eq__(self, other):
        return isinstance(other, Mod7) and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Mod7({self.value})"


def test_register_element():
    register_element(Mod7, Mod7(0), Mod7(1))
    assert is_element_type(Mod7)
    assert zero(Mod7) == Mod7(0)
    assert one(Mod7) is one(Mod7)

    m = DOKMatrix.identity(3, dtype=Mod7)
    check_identity(m)
    assert m[0, 0] is one(Mod7)
    assert m[0, 2] is zero(Mod7)


def test_register_element_same_identities_is_noop():
    register_element(Mod7, Mod7(0), Mod7(1))
    original_zero = zero(Mod7)
    register_element(Mod7, Mod7(0), Mod7(1))
    assert zero(Mod7) is original_zero


def test_register_element_conflict():
    with pytest.raises(ElementRegistrationError):
        register_element(float, 0.0, 2.0)
    with pytest.raises(ElementRegistrationError):
        register_element(int, 0.0, 1.0)
    assert one(float) == 1.0
    assert type(zero(int)) is int


@pytest.mark.parametrize("value, expected", [
    (1.5, float),
    (3, int),
    (True, int),
    (2j, complex),
    (Fraction(1, 2), Fraction),
    (Decimal("1.1"), Decimal),
    (np.float64(1.0), np.float64),
    (np.float32(1.0), np.float32),
    (np.int32(4), np.int32),
])
def test_element_type_of(value, expected):
    assert element_type_of(value) is expected


def test_element_type_of_unknown():
    with pytest.raises(UnknownElementTypeError):
        element_type_of("abc")
