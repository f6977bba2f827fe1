"""
Form-submission client for the send-confirmation endpoint.
"""
from client.signup_form import (
    SignupForm,
    SubmissionFailure,
    SubmissionOutcome,
    SubmissionSuccess,
    submit_signup,
)

__all__ = [
    "SignupForm",
    "SubmissionFailure",
    "SubmissionOutcome",
    "SubmissionSuccess",
    "submit_signup",
]
