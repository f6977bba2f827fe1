"""
Custom exceptions for welcome email handling.

These are raised inside the request pipeline and mapped to HTTP error
responses at the route boundary.
"""


class WelcomeEmailError(Exception):
    """
    Base exception for welcome email failures.
    """
    pass


class EmailSendError(WelcomeEmailError):
    """
    Raised when the email provider rejects a send.

    The message is the provider's own error text when available.
    """
    pass
