"""
Violet API Backend - Routing Errors
====================================

What:  Structured errors reported by the route registry.
When:  Registration and activation errors are *logged* by the router, gateways
       and nodes (never raised across them). Request-time errors are written
       as 500 responses by the route proxy. The monitoring probe raises
       MonitoringFalsePositiveError on purpose.

Error Catalogue:
    Registration (warning / alert, registration dropped)
    ├── DuplicatedVersionError
    ├── DuplicatedDomainError
    ├── DuplicatedEndpointError
    ├── VersionNotFoundError
    ├── DomainNotFoundError
    ├── UndefinedDomainError
    ├── UnsupportedVerbError
    └── UnsupportedVersionError
    Activation (emergency, remaining gateways still mounted)
    └── GatewayActivationError
    Diagnostics (alert, routes unaffected)
    └── PrintEndpointsError
    Request time (500 response)
    ├── UndefinedRouteError
    ├── MalformedOutcomeError
    └── MonitoringFalsePositiveError
"""

from typing import Optional

from violet.exceptions import VioletError

_NO_SOLUTION = (
    "There is no set solution. You need to contact the support team for further assistance."
)
_HUMAN_ERROR = "This is probably a human error in the routing implementation."


class RouteError(VioletError):
    """Base class for everything the registry reports."""


class DuplicatedVersionError(RouteError):
    default_message = "The version tried to register already exists."
    solution = f"{_HUMAN_ERROR} Try using a different version."

    def __init__(self, version: str):
        super().__init__(context={"version": version})
        self.detail = (
            f"The version '{version}' that was attempted to be registered already "
            "exists in the ApiRouter instance."
        )


class DuplicatedDomainError(RouteError):
    default_message = "The domain tried to register already exists."
    solution = f"{_HUMAN_ERROR} Try using a different domain name."

    def __init__(self, domain: str, version: str):
        super().__init__(context={"domain": domain, "version": version})
        self.detail = (
            f"The domain '{domain}' that was attempted to be registered already "
            f"exists in the gateway of version '{version}'."
        )


class DuplicatedEndpointError(RouteError):
    default_message = "The endpoint tried to register already exists."
    solution = (
        f"{_HUMAN_ERROR} Try using different verb and uri values, "
        "following RESTful principles."
    )

    def __init__(self, uri: str, verb: str):
        super().__init__(context={"uri": uri, "verb": verb})
        self.detail = (
            f"The endpoint with uri '{uri}' and verb '{verb}' that was attempted "
            "to be registered already exists."
        )


class VersionNotFoundError(RouteError):
    default_message = "The version used in a routing validation doesn't exist."
    solution = _NO_SOLUTION

    def __init__(self, version: Optional[str]):
        super().__init__(context={"version": version})
        self.detail = f"No RouteGateway is registered under the version '{version}'."


class DomainNotFoundError(RouteError):
    default_message = "There is no domain registered for this endpoint."
    solution = _HUMAN_ERROR

    def __init__(self, domain: str):
        super().__init__(context={"domain": domain})
        self.detail = (
            f"An endpoint was validated without previously registering the "
            f"domain '{domain}' to which it belongs."
        )


class UndefinedDomainError(RouteError):
    default_message = "Some endpoint had an undefined domain."
    detail = (
        "An endpoint was added to a RouteNode that has no domain. Only base "
        "nodes lack a domain, and they only accept base endpoints."
    )
    solution = _NO_SOLUTION


class UnsupportedVerbError(RouteError):
    default_message = "The verb used to register the endpoint is not supported."
    solution = "Use one of: all, delete, get, head, options, patch, post, put."

    def __init__(self, verb: object):
        super().__init__(context={"verb": verb})
        self.detail = f"The verb '{verb}' is not a RestVerb."


class UnsupportedVersionError(RouteError):
    default_message = "The version tried to register is not supported."
    solution = "Use one of the ApiVersion values (v1 to v9)."

    def __init__(self, version: object):
        super().__init__(context={"version": version})
        self.detail = f"The version '{version}' is not an ApiVersion."


class GatewayActivationError(RouteError):
    default_message = "Starting routing has failed."
    detail = "This should not happen and is a critical error."
    solution = _NO_SOLUTION


class PrintEndpointsError(RouteError):
    default_message = "Route tree logging failed."
    detail = "This should not happen and is a critical error."
    solution = _NO_SOLUTION


class UndefinedRouteError(RouteError):
    default_message = "An unexpected error occurred trying to execute an endpoint."
    detail = (
        "Some undefined error has occurred executing an endpoint request, "
        "which is considered a critical server failure."
    )
    solution = _NO_SOLUTION


class MalformedOutcomeError(RouteError):
    default_message = "An endpoint handler returned something other than an Outcome."
    solution = "Return ok(...) or fail(...) from every endpoint handler."

    def __init__(self, returned: object):
        super().__init__(context={"returned_type": type(returned).__name__})
        self.detail = f"Expected Success or Failure, got {type(returned).__name__}."


class MonitoringFalsePositiveError(RouteError):
    default_message = "This is a debug error for testing purposes on monitoring services."
    detail = "You shouldn't worry about this error, it was intentional."
    solution = "There is no set solution."
