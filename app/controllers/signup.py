"""
controllers/signup.py — Signup request validation and dispatch

Business Rules:
- Required fields are checked in order: name, email, password,
  passwordConfirmation; only the first missing one is reported (400)
- A present field that is not a string is invalid (400 on that field)
- password must equal passwordConfirmation (400 on passwordConfirmation)
- email must pass the EmailValidator (400 on email)
- AddAccount receives exactly {name, email, password}
- Any exception from EmailValidator or AddAccount becomes a 500
- No timeout is applied: a hanging AddAccount hangs the request until the
  caller cancels it, and cancellation propagates (it is not an Exception)

Called by: factories.make_signup_controller, routers/signup.py
Depends on: protocols, controllers.helpers, controllers.errors
"""

from loguru import logger

from ..models import AddAccountInput
from ..protocols import AddAccount, Controller, EmailValidator, HttpRequest, HttpResponse
from .errors import InvalidParamError, MissingParamError
from .helpers import bad_request, server_error, success_request

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


class SignupController(Controller):
    def __init__(self, email_validator: EmailValidator, add_account: AddAccount):
        self.email_validator = email_validator
        self.add_account = add_account

    async def handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body or {}
        for field in REQUIRED_FIELDS:
            if not body.get(field):
                return bad_request(MissingParamError(field))
        for field in REQUIRED_FIELDS:
            if not isinstance(body[field], str):
                return bad_request(InvalidParamError(field))

        name = body["name"]
        email = body["email"]
        password = body["password"]

        if password != body["passwordConfirmation"]:
            return bad_request(InvalidParamError("passwordConfirmation"))

        try:
            if not self.email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            account = await self.add_account.execute(
                AddAccountInput(name=name, email=email, password=password)
            )
        except Exception as e:
            logger.debug("Signup failed in a collaborator: {}", e)
            return server_error(e)

        return success_request(account)
