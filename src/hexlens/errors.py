class InvalidInputError(TypeError, ValueError):
    """Raised when a caller hands the renderer something it cannot dump.

    Covers non byte-like data, text streams, and negative or non-integer
    limits. Nothing is rendered when this is raised.
    """
