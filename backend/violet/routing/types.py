"""
Routing value types: versions, verbs, endpoint records and the query
interface children use to consult the router.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol


class ApiVersion(str, Enum):
    """API versions available for gateway registration."""

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"
    V4 = "v4"
    V5 = "v5"
    V6 = "v6"
    V7 = "v7"
    V8 = "v8"
    V9 = "v9"


class RestVerb(str, Enum):
    """HTTP verbs accepted by `RouteNode.add_endpoint`."""

    ALL = "all"
    DELETE = "delete"
    GET = "get"
    HEAD = "head"
    OPTIONS = "options"
    PATCH = "patch"
    POST = "post"
    PUT = "put"

    def methods(self) -> List[str]:
        """Transport methods the verb installs; `all` covers every other verb."""
        if self is RestVerb.ALL:
            return [verb.value.upper() for verb in RestVerb if verb is not RestVerb.ALL]
        return [self.value.upper()]


@dataclass(frozen=True)
class Endpoint:
    """A registered (verb, absolute path) pair."""

    verb: str
    uri: str


class RegistryQueries(Protocol):
    """
    The part of the router a gateway or node is allowed to see.

    Children ask before they register; they never reach into the router's
    gateway or node lists themselves.
    """

    def has_version_duplicity(self, version: str) -> bool: ...

    def has_domain_duplicity(self, domain: str, version: str) -> bool: ...

    def has_uri_duplicity(
        self,
        *,
        uri: str,
        verb: str,
        domain: Optional[str] = None,
        version: Optional[str] = None,
    ) -> bool: ...
