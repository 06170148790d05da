"""
Error handling utilities for consistent error message extraction.
"""


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract a log-friendly message from an unknown error type.

    Playwright timeouts and cancellations sometimes carry an empty
    message, in which case the exception class name is used.
    """
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return "Unknown error"
