class TblpeekError(Exception):
    """Base class for errors raised by tblpeek."""


class ColumnNotFoundError(TblpeekError, KeyError):
    """A column reference does not name a column of the table."""

    def __init__(self, ref, available):
        self.ref = ref
        self.available = list(available)
        super().__init__(f"Error: Column '{ref}' not found. Available: {self.available}.")

    def __str__(self):
        # KeyError would repr() the message
        return self.args[0]


class RowRangeError(TblpeekError, IndexError):
    """A requested row window falls outside the table."""
