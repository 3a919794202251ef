"""
protocols.py — Interface contracts shared across layers

Every collaborator is injected through its constructor and typed against
one of these abstract classes. Production implementations live in
services/ and repositories/; tests hand-write their own fakes.

Business Rules:
- Each contract exposes exactly one operation
- HttpRequest/HttpResponse are immutable and transport-agnostic
- Only EmailValidator.is_valid is synchronous

Called by: controllers, services, repositories, routers, tests
Depends on: models
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .models import Account, AddAccountInput


# ── HTTP envelope ────────────────────────────────────────────────────


@dataclass(frozen=True)
class HttpRequest:
    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None


# ── Presentation ─────────────────────────────────────────────────────


class Controller(ABC):
    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        ...


class EmailValidator(ABC):
    @abstractmethod
    def is_valid(self, email: str) -> bool:
        ...


# ── Domain use cases ─────────────────────────────────────────────────


class AddAccount(ABC):
    @abstractmethod
    async def execute(self, data: AddAccountInput) -> Account:
        ...


# ── Infrastructure ───────────────────────────────────────────────────


class Hasher(ABC):
    @abstractmethod
    async def hash(self, value: str) -> str:
        ...


class AddAccountRepository(ABC):
    @abstractmethod
    async def add(self, data: AddAccountInput) -> Account:
        ...


class LogErrorRepository(ABC):
    @abstractmethod
    async def log(self, stack: str) -> None:
        ...
