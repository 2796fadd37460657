"""chimpfields package for managing the merge fields of Mailchimp lists."""

from .chimpclient import ChimpClient, ClientConfig
from .chimpclient.exceptions import APIError
from .mergefields import (
    CreateParams,
    FieldType,
    GetParams,
    ListMergeFields,
    ListParams,
    MergeField,
    Options,
    UpdateParams,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "ChimpClient",
    "ClientConfig",
    "CreateParams",
    "FieldType",
    "GetParams",
    "ListMergeFields",
    "ListParams",
    "MergeField",
    "Options",
    "UpdateParams",
]
