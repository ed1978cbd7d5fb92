"""
GEOMtools: Errors

Exceptions raised by the numerical routines. Every error carries a stable
``category`` identifier alongside the human-readable message, so callers can
branch on the kind of failure without parsing text.

Degenerate geometry (zero-length generating vectors, dependent vectors) is
never an error; it shows up as zero-valued outputs.

Author: GEOMtools developers

"""


class GeomToolsError(Exception):
    """
    Base class for GEOMtools errors.

    Args:
        message (str): human-readable description of the failure.
        category (str): stable identifier of the failure kind.
    """

    category = "GEOMTOOLS"

    def __init__(
        self,
        message: str,
        category: str = None) -> None:
        super().__init__(message)
        self.message = message
        if category is not None:
            self.category = category

    def __str__(self) -> str:
        return f"{self.category}: {self.message}"


class AllocationError(GeomToolsError, MemoryError):
    """Temporary storage for a computation could not be obtained."""

    category = "MALLOCFAILED"
