"""Exceptions raised by pyfetch."""


class PyfetchError(Exception):
    """Base class for pyfetch errors."""


class PackageCountError(PyfetchError):
    """The number of installed packages could not be determined."""
