"""
routers/signup.py — Account signup route

Called by: main.py (router mount)
Depends on: routers.adapter, protocols
"""

from fastapi import APIRouter, Depends, Request

from ..models import Account
from ..protocols import Controller
from ..schemas.errors import ErrorResponse
from .adapter import adapt_route

router = APIRouter(tags=["signup"])


def get_signup_controller(request: Request) -> Controller:
    """The controller built once in the app lifespan."""
    return request.app.state.signup_controller


@router.post(
    "/signup",
    responses={
        200: {"model": Account},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def signup(request: Request, controller: Controller = Depends(get_signup_controller)):
    return await adapt_route(controller, request)
