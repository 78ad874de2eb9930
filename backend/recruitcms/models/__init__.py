from .tenant import Tenant
from .user import User
from .landing_page import LandingPage
from .form_submission import FormSubmission
from .upload import Upload
from .auth_token import AuthToken
from .impersonation_session import ImpersonationSession

__all__ = [
    "Tenant",
    "User",
    "LandingPage",
    "FormSubmission",
    "Upload",
    "AuthToken",
    "ImpersonationSession",
]
