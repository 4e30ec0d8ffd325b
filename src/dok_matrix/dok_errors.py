

class DOKConfigError(ValueError):
    """Base class for DOK matrix configuration and construction errors."""
    pass

class DOKRuntimeError(ValueError):
    """Base class for DOK matrix runtime errors."""
    pass



class InvalidShapeError(DOKConfigError):
    """Raised when a matrix extent is not a non-negative integer."""

    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        message = f"Matrix extent '{name}' must be a non-negative integer, got {value!r}"
        super().__init__(message)


class ElementRegistrationError(DOKConfigError):
    """Raised when an element type is re-registered with different identities."""

    def __init__(self, elem_type: type, existing, requested):
        self.elem_type = elem_type
        self.existing = existing
        self.requested = requested
        message = (
            f"Element type {elem_type.__name__} is already registered with identities "
            f"(zero={existing[0]!r}, one={existing[1]!r}), "
            f"cannot re-register with (zero={requested[0]!r}, one={requested[1]!r})"
        )
        super().__init__(message)


class IndexOutOfBoundsError(DOKRuntimeError, IndexError):
    """Raised when a matrix element is accessed outside the declared shape."""

    def __init__(self, row: int, col: int, nrows: int, ncols: int):
        self.row = row
        self.col = col
        self.nrows = nrows
        self.ncols = ncols
        message = f"Out of bounds index ({row}, {col}) for sparse matrix of shape ({nrows}, {ncols})"
        super().__init__(message)


class UnknownElementTypeError(TypeError):
    """Raised when a type without registered zero/one identities is used as a matrix element type."""

    def __init__(self, elem_type):
        self.elem_type = elem_type
        name = getattr(elem_type, '__name__', repr(elem_type))
        message = f"No zero/one identities registered for element type {name}. Use register_element() first."
        super().__init__(message)


class NotReplayableError(TypeError):
    """Raised when the inner sequence of a cartesian product cannot be iterated more than once."""

    def __init__(self, sequence, reason: str = None):
        self.sequence = sequence
        self.reason = reason
        if reason is None:
            problem = "is a one-shot iterator and cannot be replayed"
        else:
            problem = f"cannot be copied for replay ({reason})"
        message = (
            f"Inner sequence of type {type(sequence).__name__} {problem}. "
            f"Pass a re-iterable sequence such as a range, list or tuple."
        )
        super().__init__(message)
