import logging
import operator
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .config import DOKConfig
from .dok_errors import IndexOutOfBoundsError, InvalidShapeError
from .elements import identities


logger = logging.getLogger(__name__)

Coords = tuple[int, int]


def _as_extent(name: str, value) -> int:
    if isinstance(value, bool):
        raise InvalidShapeError(name, value)
    try:
        extent = operator.index(value)
    except TypeError:
        raise InvalidShapeError(name, value) from None
    if extent < 0:
        raise InvalidShapeError(name, value)
    return extent


def _unpack_key(key) -> Coords:
    if isinstance(key, tuple) and len(key) == 2:
        return key
    raise KeyError(f"DOKMatrix indices must be a tuple of length 2, got {key!r}")


def _as_index(value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"DOKMatrix indices must be integers, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"DOKMatrix indices must be integers, got {value!r}") from None


@dataclass(frozen=True, eq=False)
class DOKMatrix:
    """A Dictionary-of-Keys sparse matrix.

    Only entries that differ from the element type's zero need to be stored;
    any coordinate missing from data_store reads as zero. The matrix is
    immutable: transformations such as transposed() return a new matrix.

    Args:
        nrows: Number of rows in the matrix.
        ncols: Number of columns in the matrix.
        data_store: Map from (row, col) coordinates of non-zero elements to values.
            The mapping is copied, later changes by the caller are not seen.
        dtype: Element type. Must have zero/one identities registered.
        config: Construction policy. Stored coordinates are not checked against
            the shape unless config.eager_bounds_check is set.
    """

    nrows: int
    ncols: int
    data_store: Optional[Mapping[Coords, object]] = field(default_factory=dict)
    dtype: type = float
    config: Optional[DOKConfig] = field(default_factory=DOKConfig, repr=False)

    def __post_init__(self) -> None:
        if self.config is None:
            object.__setattr__(self, 'config', DOKConfig())
        # raises UnknownElementTypeError for unregistered types
        elem_zero = identities(self.dtype).zero
        self.config.validate()

        object.__setattr__(self, 'nrows', _as_extent('nrows', self.nrows))
        object.__setattr__(self, 'ncols', _as_extent('ncols', self.ncols))

        entries = dict(self.data_store) if self.data_store is not None else {}
        for key in entries:
            _unpack_key(key)
        if self.config.drop_explicit_zeros:
            zero_keys = [k for k, v in entries.items() if v == elem_zero]
            for k in zero_keys:
                del entries[k]
            if zero_keys:
                logger.debug("dropped %d explicit zero entries", len(zero_keys))
        object.__setattr__(self, 'data_store', MappingProxyType(entries))

        if self.config.eager_bounds_check:
            self.validate()

    @classmethod
    def zeros(cls, nrows: int, ncols: int, dtype: type = float,
              config: Optional[DOKConfig] = None) -> 'DOKMatrix':
        """Create a matrix of the given shape with all zero elements."""
        return cls(nrows, ncols, {}, dtype=dtype, config=config)

    @classmethod
    def identity(cls, size: int, dtype: type = float,
                 config: Optional[DOKConfig] = None) -> 'DOKMatrix':
        """Create a size x size identity matrix.

        Args:
            size: Number of rows and columns.
            dtype: Element type. The diagonal holds the shared one() of this type.
            config: Construction policy.

        Returns:
            DOKMatrix storing exactly the diagonal coordinates (i, i).
        """
        size = _as_extent('size', size)
        elem_one = identities(dtype).one
        entries = {(i, i): elem_one for i in range(size)}
        logger.debug("built %dx%d identity matrix of %s", size, size, dtype.__name__)
        return cls(size, size, entries, dtype=dtype, config=config)

    def transposed(self) -> 'DOKMatrix':
        """Returns a new matrix with rows and columns swapped.

        Every stored entry (row, col) -> v becomes (col, row) -> v. The
        receiver is not modified.
        """
        entries = {(j, i): v for (i, j), v in self.data_store.items()}
        logger.debug("transposed %dx%d matrix with %d stored entries", self.nrows, self.ncols, len(entries))
        return DOKMatrix(self.ncols, self.nrows, entries, dtype=self.dtype, config=self.config)

    @property
    def T(self) -> 'DOKMatrix':
        return self.transposed()

    @property
    def shape(self) -> tuple[int, int]:
        return (self.nrows, self.ncols)

    @property
    def nnz(self) -> int:
        """Number of stored entries, explicit zeros included."""
        return len(self.data_store)

    def get(self, row: int, col: int):
        """Get the value at position (row, col)."""
        return self[row, col]

    def __getitem__(self, key):
        """Returns the value at position (row, col).

        Args:
            key: A tuple (row, col).

        Returns:
            The stored value at (row, col), or the shared zero of dtype if nothing is stored there.

        Raises:
            IndexOutOfBoundsError: If row >= nrows or col >= ncols. Negative indices are out of bounds too.
            KeyError: If key is not a tuple of length 2.
            TypeError: If row or col is not an integer.
        """
        row, col = _unpack_key(key)
        row, col = _as_index(row), _as_index(col)
        if not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise IndexOutOfBoundsError(row, col, self.nrows, self.ncols)
        try:
            return self.data_store[row, col]
        except KeyError:
            return identities(self.dtype).zero

    def validate(self) -> None:
        """Checks every stored coordinate against the matrix shape.

        Raises:
            IndexOutOfBoundsError: For the first out-of-bounds coordinate, in sorted order.
        """
        for row, col in sorted(self.data_store):
            if not (0 <= row < self.nrows and 0 <= col < self.ncols):
                raise IndexOutOfBoundsError(row, col, self.nrows, self.ncols)

    def is_equal(self, other: 'DOKMatrix') -> bool:
        """Whether other has the same shape and the same value at every coordinate.

        An explicitly stored zero compares equal to an absent entry.
        """
        if self.shape != other.shape:
            return False
        self_zero = identities(self.dtype).zero
        other_zero = identities(other.dtype).zero
        for key in self.data_store.keys() | other.data_store.keys():
            if self.data_store.get(key, self_zero) != other.data_store.get(key, other_zero):
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, DOKMatrix):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None

    def __contains__(self, key) -> bool:
        """Checks if a value is stored at position (row, col)."""
        if not (isinstance(key, tuple) and len(key) == 2):
            return False
        return key in self.data_store

    def __len__(self) -> int:
        return len(self.data_store)

    def __iter__(self):
        """Allows iteration over the stored position tuples."""
        return iter(self.data_store.keys())

    def keys(self):
        """Returns the stored position tuples."""
        return self.data_store.keys()

    def values(self):
        """Returns the stored values."""
        return self.data_store.values()

    def items(self) -> list[tuple[Coords, object]]:
        """Returns a list of ((row, col), value) pairs, mimicking dict.items()."""
        return list(self.data_store.items())

    def __repr__(self) -> str:
        """String representation of the matrix."""
        items_str = ", ".join(f"{k}: {v}" for k, v in sorted(self.data_store.items()))
        return f"DOKMatrix(shape=({self.nrows}, {self.ncols}), dtype={self.dtype.__name__}, {{{items_str}}})"

    def copy(self) -> 'DOKMatrix':
        """Returns a copy of the matrix."""
        return DOKMatrix(self.nrows, self.ncols, self.data_store, dtype=self.dtype, config=self.config)
