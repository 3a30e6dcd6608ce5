"""
Custom exceptions for the algorithms package.
"""

class CurvestepError(Exception):
    """Base exception for curvestep errors.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InvalidParameterError(CurvestepError):
    """Raised when a configuration value is outside its admissible range.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class NotInitializedError(CurvestepError):
    """Raised when a step is requested without an initial parameter.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class BackendError(CurvestepError):
    """Raised when an exception occurs in a backend.
    
    Parameters
    ----------
    message : str
        The error message.
    """
    
    def __init__(self, message: str):
        super().__init__(message)


class SingularMatrixError(BackendError):
    """Raised when the Hessian cannot be inverted at the current parameter.
    
    Parameters
    ----------
    message : str
        The error message.
    """
    
    def __init__(self, message: str):
        super().__init__(message)
