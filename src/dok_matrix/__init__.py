"""
Dictionary-of-Keys sparse matrices.

A coordinate-keyed sparse matrix container generic over numeric element types,
plus a lazy cartesian product helper for sweeping coordinate ranges.
"""

__version__ = "0.1.0"

import logging

from .dok_matrix import DOKMatrix
from .elements import zero, one, register_element, is_element_type, element_type_of, ElementIdentity
from .iter_utils import CartesianProduct, cartesian_product
from .config import DOKConfig
from .dok_errors import (
    DOKConfigError,
    DOKRuntimeError,
    InvalidShapeError,
    ElementRegistrationError,
    IndexOutOfBoundsError,
    UnknownElementTypeError,
    NotReplayableError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DOKMatrix",
    "zero",
    "one",
    "register_element",
    "is_element_type",
    "element_type_of",
    "ElementIdentity",
    "CartesianProduct",
    "cartesian_product",
    "DOKConfig",
    "DOKConfigError",
    "DOKRuntimeError",
    "InvalidShapeError",
    "ElementRegistrationError",
    "IndexOutOfBoundsError",
    "UnknownElementTypeError",
    "NotReplayableError",
]
