from dataclasses import dataclass

from .dok_errors import DOKConfigError


@dataclass(frozen=True)
class DOKConfig:
    """
    Construction policy for DOKMatrix.

    The defaults wrap the caller's entries as given and defer coordinate
    checking to element access.
    """

    eager_bounds_check: bool = False
    """Whether construction checks every stored coordinate against the matrix shape.
    When False, out-of-bounds entries are only reported when they are read."""

    drop_explicit_zeros: bool = False
    """Whether entries equal to the element type's zero are omitted at construction.
    Reads are unaffected, since an absent entry already reads as zero."""

    def validate(self) -> None:
        """Validate configuration parameters."""
        for name in ('eager_bounds_check', 'drop_explicit_zeros'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise DOKConfigError(f"{name} must be a bool, got {type(value).__name__}")
