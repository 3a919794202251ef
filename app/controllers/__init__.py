"""
controllers/ — Transport-agnostic request handlers

Controllers take an HttpRequest, return an HttpResponse, and never raise.
The FastAPI glue that feeds them lives in routers/.
"""

from .decorators import LogControllerDecorator  # noqa: F401
from .errors import InvalidParamError, MissingParamError, ServerError  # noqa: F401
from .helpers import bad_request, server_error, success_request  # noqa: F401
from .signup import SignupController  # noqa: F401
