class PrivGuardError(Exception):
    pass


class CyclicPayloadError(PrivGuardError):
    """Raised when a payload container contains itself."""


class ConfigUpdateError(PrivGuardError, ValueError):
    """
    Raised when a configuration update is rejected.
    The previously active configuration stays in effect.
    """
