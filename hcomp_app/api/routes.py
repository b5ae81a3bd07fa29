"""
Phrase and health endpoints.
The request method is never inspected, so every route answers any method.
"""

from fastapi import APIRouter, Depends
from fastapi.routing import APIRoute
from starlette.routing import Match

from hcomp_app.api.schemas import HealthResponse, PhraseResponse
from hcomp_app.config import Settings, get_settings
from hcomp_app.core.phrases import random_phrase


class AnyMethodRoute(APIRoute):
    """
    APIRoute that matches the still-encoded request path and ignores the method.

    `/%68ealth` is not `/health`: the raw path must equal the route path exactly.
    """

    def matches(self, scope):
        raw_path = scope.get("raw_path")
        if raw_path is not None:
            if raw_path.split(b"?", 1)[0].decode("latin-1") != scope["path"]:
                return Match.NONE, {}

        match, child_scope = super().matches(scope)
        # PARTIAL only signals a method mismatch
        if match == Match.PARTIAL:
            match = Match.FULL
        return match, child_scope

    async def handle(self, scope, receive, send):
        await self.app(scope, receive, send)


router = APIRouter(route_class=AnyMethodRoute, redirect_slashes=False)


@router.api_route("/", response_model=PhraseResponse, tags=["phrase"])
@router.api_route("/version", response_model=PhraseResponse, tags=["phrase"])
async def version(settings: Settings = Depends(get_settings)) -> PhraseResponse:
    """Return a random phrase with the running version."""
    return PhraseResponse(message=random_phrase(), version=settings.version)


@router.api_route("/health", response_model=HealthResponse, tags=["health"])
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(message=random_phrase(), version=settings.version)
