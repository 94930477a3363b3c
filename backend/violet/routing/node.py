"""
Violet API Backend - Route Node
================================

What:  Owns the endpoints of one domain inside one API version, or the base
       endpoints (liveness, monitoring probe) that belong to no domain.
Why:   Domain code registers endpoints with a relative route and a handler;
       the node builds the absolute path, asks the router whether the
       endpoint already exists, and installs a uniform wrapper around the
       handler on the transport.
How:   Every accepted endpoint is appended to `endpoints` and installed on the
       FastAPI APIRouter shared by the node's gateway.

Handler contract:
    handler(request: Request, response: Response) -> Outcome | Awaitable[Outcome]

    `response` is the FastAPI sub-response: headers set on it are copied to
    the final response. The status code and body always come from the
    returned Outcome.

Failure semantics:
    - Duplicated or poisoned registrations are dropped and logged, never raised.
    - Handler exceptions become 500 responses, never reach the transport.
"""

import inspect
import re
from typing import Any, Awaitable, Callable, List, Optional, Union

from fastapi import APIRouter, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from violet.config import settings
from violet.core.result import Failure, Outcome, Success
from violet.exceptions import VioletError
from violet.logger import SeverityLogger, get_logger
from violet.routing.errors import (
    MalformedOutcomeError,
    MonitoringFalsePositiveError,
    UndefinedDomainError,
    UndefinedRouteError,
    UnsupportedVerbError,
)
from violet.routing.types import Endpoint, RegistryQueries, RestVerb

Handler = Callable[[Request, Response], Union[Outcome, Awaitable[Outcome]]]

NOT_IMPLEMENTED = 501

# Express style ":clientId" segments, installed as Starlette "{clientId}"
_PATH_PARAM = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

# Headers owned by the final response, never copied from the sub-response
_OWNED_HEADERS = {b"content-length", b"content-type"}


def transport_path(uri: str) -> str:
    return _PATH_PARAM.sub(r"{\1}", uri)


def serialize_payload(payload: Any) -> Any:
    """JSON-ready form of an Outcome value or error."""
    if isinstance(payload, VioletError):
        return payload.to_dict()
    if isinstance(payload, BaseException):
        return {"error": type(payload).__name__, "message": str(payload)}
    return jsonable_encoder(payload)


class RouteNode:
    """
    Registry entity for one (domain, version) pair.

    Base nodes have `domain=None` (and `version=None` for the root liveness
    endpoints). A node created as a duplicate is *poisoned*: it stays usable
    but every add_endpoint call on it is a no-op.
    """

    def __init__(
        self,
        registry: RegistryQueries,
        router: APIRouter,
        base_path: str,
        is_duplicated: bool = False,
        domain: Optional[str] = None,
        version: Optional[str] = None,
        logger: Optional[SeverityLogger] = None,
        ping_message: Optional[str] = None,
    ):
        self.registry = registry
        self.router = router
        self.base_path = base_path
        self.is_duplicated = is_duplicated
        self.domain = domain
        self.version = version
        self.endpoints: List[Endpoint] = []
        self.logger = logger or get_logger("violet.routing")
        self.ping_message = ping_message or (
            f"[API Online] Target: {settings.server_environment}"
        )

    def __repr__(self) -> str:
        return (
            f"RouteNode(version={self.version!r}, domain={self.domain!r}, "
            f"endpoints={len(self.endpoints)}, is_duplicated={self.is_duplicated})"
        )

    # ── Registration ──────────────────────────────────────────────────────

    def add_endpoint(
        self,
        verb: Union[RestVerb, str],
        route: str,
        handler: Optional[Handler] = None,
    ) -> None:
        """
        Register `verb base_path/version/route` and install its handler.

        Without a handler the endpoint answers 501 Not Implemented.
        """
        uri = f"{self.base_path}/{self.version}/{route}"

        if self.domain is None:
            self.logger.warning("%s", UndefinedDomainError(context={"uri": uri}))
            return

        try:
            rest_verb = RestVerb(verb.lower() if isinstance(verb, str) else verb)
        except ValueError:
            self.logger.warning("%s", UnsupportedVerbError(verb))
            return

        if self.is_duplicated:
            self.logger.warning(
                "Dropping %s %s: node '%s' of version '%s' is a duplicate",
                rest_verb.value.upper(),
                uri,
                self.domain,
                self.version,
            )
            return

        is_duplicated = self.registry.has_uri_duplicity(
            domain=self.domain,
            version=self.version,
            uri=uri,
            verb=rest_verb.value,
        )
        if is_duplicated:
            return

        self.endpoints.append(Endpoint(verb=rest_verb.value, uri=uri))
        self._proxy(rest_verb, uri, handler)

    def add_base_endpoint(self, uri: str) -> None:
        """Liveness probe: GET uri answers 200 with the ping message."""
        if not self._accept_base(uri):
            return

        message = self.ping_message

        async def ping() -> Response:
            return PlainTextResponse(message, status_code=200)

        self._install(RestVerb.GET, uri, ping)

    def add_monitoring_endpoint(self, uri: str) -> None:
        """Synthetic failure used to check the error monitoring pipeline."""
        if not self._accept_base(uri):
            return

        async def debug_monitoring() -> Response:
            raise MonitoringFalsePositiveError()

        self._install(RestVerb.GET, uri, debug_monitoring)

    def _accept_base(self, uri: str) -> bool:
        verb = RestVerb.GET.value
        if self.registry.has_uri_duplicity(uri=uri, verb=verb):
            return False
        self.endpoints.append(Endpoint(verb=verb, uri=uri))
        return True

    # ── Handler wrapping ──────────────────────────────────────────────────

    def _install(self, verb: RestVerb, uri: str, endpoint: Callable[..., Any]) -> None:
        self.router.add_api_route(
            transport_path(uri),
            endpoint,
            methods=verb.methods(),
            response_model=None,
            include_in_schema=self.domain is not None,
        )

    def _proxy(self, verb: RestVerb, uri: str, handler: Optional[Handler]) -> None:
        """
        Install `handler` behind the uniform request wrapper.

        The wrapper awaits the handler's Outcome and writes its status code
        and value. Any exception, including a handler returning something
        other than an Outcome, becomes an UndefinedRouteError 500 response.
        """
        if handler is None:
            async def fallback(request: Request) -> Response:
                return Response(status_code=NOT_IMPLEMENTED)

            self._install(verb, uri, fallback)
            return

        logger = self.logger

        async def api_callback(request: Request, response: Response) -> Response:
            try:
                outcome = handler(request, response)
                if inspect.isawaitable(outcome):
                    outcome = await outcome
                if not isinstance(outcome, (Success, Failure)):
                    raise MalformedOutcomeError(outcome)
                final = self._write(outcome)
            except Exception as exc:
                failure = UndefinedRouteError(
                    context={"method": request.method, "path": request.url.path},
                    cause=exc,
                )
                logger.error("%s", failure, exc_info=True)
                return JSONResponse(status_code=failure.status_code, content=failure.to_dict())

            # Raw pairs: repeated headers such as Set-Cookie must all survive
            final.raw_headers.extend(
                (key, value)
                for key, value in response.raw_headers
                if key.lower() not in _OWNED_HEADERS
            )
            return final

        api_callback.__name__ = getattr(handler, "__name__", "api_callback")
        self._install(verb, uri, api_callback)

    @staticmethod
    def _write(outcome: Outcome) -> Response:
        payload = outcome.get_value()
        if payload is None:
            return Response(status_code=outcome.status_code)
        return JSONResponse(status_code=outcome.status_code, content=serialize_payload(payload))
