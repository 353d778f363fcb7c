class InvalidArgument(ValueError):
    """Raised when an entry point receives a malformed argument, for example
    a modulus that is not prime."""
    pass


class Unsatisfiable(ValueError):
    """Raised when the requested order does not divide the group order."""
    pass


class InvariantError(AssertionError):
    """An algebraic guarantee failed to hold.

    This indicates a defect in the group model or in an action passed to the
    engine. It is never recovered from.
    """
    pass
