class FormatError(Exception):
    """Base class for exceptions raised while formatting
    """


class MalformedSpecifier(FormatError, ValueError):
    """Raised when an explicit argument index is not a positive integer.
    """


class IndexOutOfRange(FormatError, IndexError):
    """Raised when a specifier refers to an argument that wasn't passed.
    """


class UnsupportedConversion(FormatError, ValueError):
    """Raised when a conversion can't be applied to its argument.
    """
