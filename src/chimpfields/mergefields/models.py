from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldType(str, Enum):
    """The kinds of merge field a list can hold."""

    TEXT = "text"
    ADDRESS = "address"
    BIRTHDAY = "birthday"
    DATE = "date"
    DROPDOWN = "dropdown"
    IMAGE = "imageurl"
    NUMBER = "number"
    PHONE = "phone"
    RADIO = "radio"

    def __str__(self) -> str:
        return self.value


class Options(BaseModel):
    """Type-specific settings of a merge field.

    Only the attributes matching the field's type are meaningful:
    ``default_country`` for address, ``phone_format`` for phone,
    ``date_format`` for date and birthday, ``choices`` for dropdown and radio,
    ``size`` for text. Unset attributes are left out of request bodies.
    """

    model_config = ConfigDict(extra="ignore")

    default_country: int | None = Field(
        default=None, description="ISO 3166 country code for address fields."
    )
    phone_format: str | None = None
    date_format: str | None = None
    choices: list[str] | None = None
    size: int | None = None


class MergeField(BaseModel):
    """A merge field definition as reported by the remote service."""

    model_config = ConfigDict(extra="ignore")

    merge_id: int = Field(description="Identifier assigned by the service.")
    tag: str = ""
    name: str = ""
    type: str = Field(default="", description="The raw field type.")
    required: bool = False
    default_value: str = ""
    public: bool = False
    display_order: int = 0
    options: Options | None = None
    help_text: str = ""
    list_id: str = ""

    @property
    def field_type(self) -> FieldType | None:
        """The type as a FieldType, or None if the service reports another."""
        try:
            return FieldType(self.type)
        except ValueError:
            return None


class ListMergeFields(BaseModel):
    """A page of merge fields of a list.

    ``total_items`` counts all merge fields matching the query and may be
    larger than ``merge_fields`` when the query is paginated.
    """

    model_config = ConfigDict(extra="ignore")

    merge_fields: list[MergeField] = Field(default_factory=list)
    list_id: str = ""
    total_items: int = 0

    def find(self, merge_id: int, tag: str | None = None) -> MergeField | None:
        """Look up a merge field by its identifier and, optionally, its tag.

        The service does not guarantee any ordering of the fields, so lookups
        are always made by key.

        Args:
            merge_id (int): The identifier of the merge field.
            tag (str | None): If given, the tag the field must carry as well.

        Returns:
            MergeField | None: The matching merge field, or None.
        """
        for field in self.merge_fields:
            if field.merge_id == merge_id and (tag is None or field.tag == tag):
                return field
        return None


# --- Request parameters ---
class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        """The attributes the caller set explicitly, in wire format.

        Attributes left at their default or set to None are omitted, while
        attributes the caller set to a zero value such as ``False`` or ``0``
        are kept.
        """
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class CreateParams(_Params):
    """Parameters for adding a merge field to a list."""

    name: str
    type: FieldType
    tag: str | None = None
    required: bool = False
    default_value: str = ""
    public: bool = False
    display_order: int = 0
    options: Options | None = None
    help_text: str = ""


class UpdateParams(_Params):
    """Parameters for updating a merge field.

    The service requires ``name`` in every update. ``tag`` and ``type`` cannot
    be changed once the field exists.
    """

    name: str
    required: bool = False
    default_value: str = ""
    public: bool = False
    display_order: int = 0
    options: Options | None = None
    help_text: str = ""


class GetParams(_Params):
    """Field selection for reading a single merge field."""

    fields: list[str] | None = None
    exclude_fields: list[str] | None = None

    def to_query(self) -> dict[str, Any]:
        """The query string parameters, with field lists comma-joined."""
        query = self.to_payload()
        for key in ("fields", "exclude_fields"):
            if query.get(key):
                query[key] = ",".join(query[key])
            else:
                query.pop(key, None)
        return query


class ListParams(GetParams):
    """Field selection, pagination and filters for listing merge fields."""

    count: int | None = None
    offset: int | None = None
    type: FieldType | None = None
    required: bool | None = None

