import logging
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

import numpy as np

from .dok_errors import ElementRegistrationError, UnknownElementTypeError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementIdentity:
    """Additive and multiplicative identities of a matrix element type."""
    zero: object
    one: object


# element type -> identities, populated at import and by register_element()
_IDENTITIES: dict[type, ElementIdentity] = {}


def _same_value(a, b) -> bool:
    return type(a) is type(b) and a == b


def register_element(elem_type: type, zero, one) -> None:
    """Make elem_type usable as a DOKMatrix element type.

    Args:
        elem_type: The element type to register.
        zero: Additive identity of elem_type. Returned for every unstored matrix entry.
        one: Multiplicative identity of elem_type. Used to fill identity matrix diagonals.

    Raises:
        ElementRegistrationError: If elem_type is already registered with different identities.
    """
    existing = _IDENTITIES.get(elem_type)
    if existing is not None:
        if _same_value(existing.zero, zero) and _same_value(existing.one, one):
            return
        raise ElementRegistrationError(elem_type, (existing.zero, existing.one), (zero, one))
    _IDENTITIES[elem_type] = ElementIdentity(zero=zero, one=one)
    logger.debug("registered element type %s (zero=%r, one=%r)", elem_type.__name__, zero, one)


def identities(elem_type: type) -> ElementIdentity:
    """Returns the registered identities of elem_type."""
    try:
        return _IDENTITIES[elem_type]
    except (KeyError, TypeError):
        raise UnknownElementTypeError(elem_type) from None


def zero(elem_type: type = float):
    """Returns the shared additive identity of elem_type.

    The same object is returned on every call.
    """
    return identities(elem_type).zero


def one(elem_type: type = float):
    """Returns the shared multiplicative identity of elem_type.

    The same object is returned on every call.
    """
    return identities(elem_type).one


def is_element_type(elem_type) -> bool:
    try:
        return elem_type in _IDENTITIES
    except TypeError:
        # unhashable
        return False


def element_type_of(value) -> type:
    """Returns the registered element type of value.

    The exact type of value is tried first, then its base classes in MRO order,
    so a numpy.float64 resolves to numpy.float64 rather than float.

    Raises:
        UnknownElementTypeError: If neither the type of value nor any of its bases is registered.
    """
    for cls in type(value).__mro__:
        if cls in _IDENTITIES:
            return cls
    raise UnknownElementTypeError(type(value))


register_element(float, 0.0, 1.0)
register_element(int, 0, 1)
register_element(complex, 0j, 1 + 0j)
register_element(Fraction, Fraction(0), Fraction(1))
register_element(Decimal, Decimal(0), Decimal(1))

for _np_type in (np.float64, np.float32, np.float16, np.int64, np.int32, np.complex128):
    register_element(_np_type, _np_type(0), _np_type(1))
del _np_type
