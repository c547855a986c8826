# gdlogit/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (config values, shapes, paths).
    Should NOT print traceback.
    """


class InvalidInputError(UserInputError, ValueError):
    """
    Bad configuration or size mismatch, detected before any side effect.
    """


class ModelIOError(OSError):
    """
    Model file cannot be opened, read, written, or is malformed.
    """


class ModelSaveError(RuntimeError):
    """
    Fatal: training finished but its parameters could not be persisted.
    """
