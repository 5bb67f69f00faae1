"""
Exception hierarchy for diffsplice.

The diff engine itself never raises on malformed diff text; these are for
the outer layers (CLI and HTTP service) when a caller asks for a file, hunk
or change group that is not there.
"""

from fastapi import HTTPException, status


class DiffspliceException(Exception):
    """Base class for all diffsplice exceptions."""
    pass


class DiffLookupError(DiffspliceException, LookupError):
    """A requested file, hunk or change group does not exist."""
    pass


class DiffspliceAPIException(HTTPException):
    """
    Common HTTP exception for the diffsplice API.
    Provides a consistent response format.
    """
    def __init__(self, status_code: int, detail: str, headers: dict = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class DiffTargetNotFoundException(DiffspliceAPIException):
    """Raised when the requested file, hunk or change group is missing."""
    def __init__(self, detail: str = "Diff target not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail
        )
