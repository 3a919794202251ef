"""
repositories/ — MongoDB persistence adapters

Each repository receives the MongoConnection it writes through.
"""

from .account_repository import AccountMongoRepository  # noqa: F401
from .log_error_repository import LogErrorMongoRepository  # noqa: F401
