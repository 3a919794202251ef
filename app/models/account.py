"""Account documents stored in the ``accounts`` collection."""

from pydantic import BaseModel, ConfigDict


class AddAccountInput(BaseModel):
    """Validated signup data handed to the AddAccount use case."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str


class Account(AddAccountInput):
    """A persisted account. ``id`` is the stringified Mongo ``_id``."""

    id: str
