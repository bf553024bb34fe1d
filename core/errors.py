# core/errors.py

class HabitImportError(Exception):
    """A CSV import that failed as a whole. ``str(e)`` is shown to the user."""

class FormatError(HabitImportError):
    pass

class NoValidRowsError(HabitImportError):
    pass

class RowError(ValueError):
    """One CSV data row failed validation; the importer counts it and moves on."""
