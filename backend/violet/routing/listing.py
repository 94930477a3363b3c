"""
Violet API Backend - Route Listing
===================================

What:  Builds the human-readable table of every registered endpoint.
Why:   Duplicate registrations are dropped silently at start-up; the listing
       is how a developer audits what actually got routed.
How:   Flatten → sort → render → log at NOTICE.

Ordering:
    Version > Domain > Verb > Path, each compared as plain strings. One
    stable sort on the composite key, so equal keys keep the order in which
    they were registered. Base endpoints are listed under domain "base"
    and version "--" when they belong to no version.

Example:
    List of Endpoints routed:
    --   base    -> GET  /
    --   base    -> GET  /api
    v1   base    -> GET  /api/v1
    v1   clients -> GET  /api/v1/clients/
    v1   clients -> POST /api/v1/clients/
"""

from typing import Iterable, List, NamedTuple, Sequence

from violet.logger import SeverityLogger
from violet.routing.errors import PrintEndpointsError

BASE_DOMAIN = "base"
NO_VERSION = "--"
HEADER = "List of Endpoints routed:"


class ListedEndpoint(NamedTuple):
    version: str
    domain: str
    verb: str
    uri: str


def collect_endpoints(base_nodes: Iterable, gateways: Iterable) -> List[ListedEndpoint]:
    """Every endpoint of every gateway node, then every base node endpoint."""
    entries: List[ListedEndpoint] = []

    for gateway in gateways:
        for node in gateway.nodes:
            for endpoint in node.endpoints:
                entries.append(
                    ListedEndpoint(gateway.version, str(node.domain), endpoint.verb, endpoint.uri)
                )

    for node in base_nodes:
        for endpoint in node.endpoints:
            entries.append(
                ListedEndpoint(node.version or NO_VERSION, BASE_DOMAIN, endpoint.verb, endpoint.uri)
            )

    return entries


def sort_endpoints(entries: Iterable[ListedEndpoint]) -> List[ListedEndpoint]:
    return sorted(entries, key=lambda e: (e.version, e.domain, e.verb, e.uri))


def render_listing(entries: Sequence[ListedEndpoint]) -> str:
    """One line per endpoint, columns padded to the longest value."""
    if not entries:
        return HEADER

    version_width = max(len(e.version) for e in entries)
    domain_width = max(len(e.domain) for e in entries)
    verb_width = max(len(e.verb) for e in entries)

    lines = [HEADER]
    for e in entries:
        lines.append(
            f"{e.version:<{version_width}} "
            f"{e.domain:<{domain_width}} -> "
            f"{e.verb.upper():<{verb_width}} "
            f"{e.uri}"
        )
    return "\n".join(lines)


def build_listing(base_nodes: Iterable, gateways: Iterable) -> str:
    return render_listing(sort_endpoints(collect_endpoints(base_nodes, gateways)))


def log_route_tree(base_nodes: Iterable, gateways: Iterable, logger: SeverityLogger) -> None:
    """
    Log the listing once, at NOTICE.

    Routes are already mounted when this runs: a failure here is reported
    and swallowed, it never affects what is being served.
    """
    try:
        entries = sort_endpoints(collect_endpoints(base_nodes, gateways))
        if entries:
            logger.notice("%s", render_listing(entries))
    except Exception as exc:
        logger.alert("%s", PrintEndpointsError(cause=exc))
