from .models import (
    CreateParams,
    FieldType,
    GetParams,
    ListMergeFields,
    ListParams,
    MergeField,
    Options,
    UpdateParams,
)

__all__ = [
    "CreateParams",
    "FieldType",
    "GetParams",
    "ListMergeFields",
    "ListParams",
    "MergeField",
    "Options",
    "UpdateParams",
]
