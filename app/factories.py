"""Composition root: builds controllers with their production collaborators."""

from .config import settings
from .controllers import LogControllerDecorator, SignupController
from .database import MongoConnection
from .protocols import Controller
from .repositories import AccountMongoRepository, LogErrorMongoRepository
from .services.add_account import DbAddAccount
from .services.email_validator import EmailValidatorAdapter
from .services.hasher import BcryptAdapter


def make_signup_controller(connection: MongoConnection) -> Controller:
    add_account = DbAddAccount(
        BcryptAdapter(settings.bcrypt_rounds),
        AccountMongoRepository(connection),
    )
    controller = SignupController(EmailValidatorAdapter(), add_account)
    return LogControllerDecorator(controller, LogErrorMongoRepository(connection))
