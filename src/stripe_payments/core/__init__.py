"""
Core primitives: configuration, transport, parameter encoding and paging.
"""

from .client import StripeClient
from .config import (
    ClientConfig,
    ClientParameters,
    ConfigError,
    load_client_config,
)
from .environment import ClientEnvironment, build_environment, load_env_file
from .errors import (
    DecodeError,
    NotFoundError,
    RequestError,
    StripeError,
    TransportError,
)
from .iterator import ListIterator
from .models import DeletedResource, ListMeta, Page
from .params import UNSET, Filters, ListParams, Params, encode_params, is_set
from .transport import RawResponse, Transport

__all__ = [
    "UNSET",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "DecodeError",
    "DeletedResource",
    "Filters",
    "ListIterator",
    "ListMeta",
    "ListParams",
    "NotFoundError",
    "Page",
    "Params",
    "RawResponse",
    "RequestError",
    "StripeClient",
    "StripeError",
    "Transport",
    "TransportError",
    "build_environment",
    "encode_params",
    "is_set",
    "load_client_config",
    "load_env_file",
]
