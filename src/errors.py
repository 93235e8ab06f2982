"""Exceptions raised by the family tree engine."""


class FamilyTreeError(Exception):
    """Base class for every error the engine raises."""


class OutOfRangeError(FamilyTreeError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Person index {index} out of range (store holds {size} persons)")


class FormatError(FamilyTreeError, ValueError):
    """Structurally invalid persisted content."""

    def __init__(self, reason: str, record: int | None = None):
        self.reason = reason
        self.record = record
        if record is None:
            message = f"Invalid file format ({reason})."
        else:
            message = f"Corrupt data while reading Person #{record} ({reason})."
        super().__init__(message)


class FileAccessError(FamilyTreeError, OSError):
    """A data file could not be opened for reading or writing."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class InvalidStateError(FamilyTreeError):
    pass
