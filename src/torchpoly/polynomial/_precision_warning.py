class PrecisionWarning(UserWarning):
    """Requested decimal precision exceeds what binary64 floats carry."""

    pass
