import copy
from collections.abc import Iterable, Iterator

from .dok_errors import NotReplayableError


# marks an outer sequence that started empty or has run out; None is a valid item
_EXHAUSTED = object()


class CartesianProduct:
    """
    Lazy row-major cartesian product of two sequences.

    The first sequence is the outer dimension and is consumed once, so it may
    be any iterable, including an infinite one. The second sequence is the
    inner dimension and is replayed for every outer item, so it must be finite
    and re-iterable: each iter() call on it has to give a fresh iterator. It is
    copied when the product is built, so later changes by the caller are not seen.

    The product is single pass. Once exhausted it keeps raising StopIteration.
    """

    def __init__(self, first: Iterable, second: Iterable):
        if isinstance(second, Iterator):
            raise NotReplayableError(second)
        # pristine copy of the inner sequence, only ever used to restart _second
        try:
            self._second_source = copy.copy(second)
        except TypeError as err:
            raise NotReplayableError(second, reason=str(err)) from err
        self._second = iter(self._second_source)
        self._first = iter(first)
        self._saved_first = next(self._first, _EXHAUSTED)
        self._finished = False

    def __iter__(self) -> 'CartesianProduct':
        return self

    def __next__(self) -> tuple:
        if self._finished:
            raise StopIteration

        # The inner item is fetched first: when the inner iterator runs out the
        # outer iterator has to advance before anything is paired.
        try:
            second_item = next(self._second)
        except StopIteration:
            self._second = iter(self._second_source)
            try:
                second_item = next(self._second)
            except StopIteration:
                # empty inner sequence
                self._finished = True
                raise
            self._saved_first = next(self._first, _EXHAUSTED)

        if self._saved_first is _EXHAUSTED:
            self._finished = True
            raise StopIteration
        return (self._saved_first, second_item)


def cartesian_product(first: Iterable, second: Iterable) -> CartesianProduct:
    """Returns the lazy cartesian product of first and second.

    Pairs are produced in row-major order: every item of second is paired with
    the first item of first, then with the second item of first, and so on.

    Args:
        first: Outer sequence. Consumed once.
        second: Inner sequence. Must be finite and re-iterable (range, list, tuple, ...).

    Raises:
        NotReplayableError: If second is a one-shot iterator such as a generator.

    Example:
        >>> list(cartesian_product(range(2), 'ab'))
        [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]
    """
    return CartesianProduct(first, second)
