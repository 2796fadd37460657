from typing import TYPE_CHECKING

import pandas as pd

from chimpfields.mergefields import (
    CreateParams,
    GetParams,
    ListMergeFields,
    ListParams,
    MergeField,
    UpdateParams,
)

if TYPE_CHECKING:  # pragma: no cover
    from ..chimpclient import ChimpClient


class MergeFieldService:
    """
    Entry point for operations on the merge fields of a list.
    """

    _route = "lists/{list_id}/merge-fields"

    def __init__(self, client: "ChimpClient"):
        """Initialize the MergeFieldService. The service keeps no state besides
        the client, so a single instance can be shared between callers.

        Args:
            client (ChimpClient): The ChimpClient instance to use for API calls.
        """
        self._client = client

    def _collection(self, list_id: str) -> str:
        return self._route.format(list_id=list_id)

    def _item(self, list_id: str, merge_id: int) -> str:
        return f"{self._collection(list_id)}/{merge_id}"

    def create(self, list_id: str, params: CreateParams | None) -> MergeField:
        """Add a new merge field to a list.

        The service validates the field, e.g. that the tag is unique in the
        list and that the options fit the field type.

        Args:
            list_id (str): The identifier of the list.
            params (CreateParams | None): The merge field to create.

        Raises:
            APIError: If the request fails.

        Returns:
            MergeField: The created merge field including its new merge_id.
        """
        body = params.to_payload() if params is not None else None
        return self._client.call(
            "POST", self._collection(list_id), body=body, model=MergeField
        )

    def get_list(
        self, list_id: str, params: ListParams | None = None
    ) -> ListMergeFields:
        """
        Lists the merge fields of a list. The ordering of the fields is up to
        the service.

        Args:
            list_id (str): The identifier of the list.
            params (ListParams | None): Optional field selection, pagination
                and filters.

        Returns:
            ListMergeFields: The merge fields and the total number of matches.
        """
        query = params.to_query() if params is not None else None
        return self._client.call(
            "GET", self._collection(list_id), params=query, model=ListMergeFields
        )

    def get(
        self, list_id: str, merge_id: int, params: GetParams | None = None
    ) -> MergeField:
        """Get a single merge field of a list.

        Args:
            list_id (str): The identifier of the list.
            merge_id (int): The identifier of the merge field.
            params (GetParams | None): Optional field selection.

        Raises:
            ResourceNotFoundError: If the merge field does not exist.

        Returns:
            MergeField: The merge field.
        """
        query = params.to_query() if params is not None else None
        return self._client.call(
            "GET", self._item(list_id, merge_id), params=query, model=MergeField
        )

    def update(
        self, list_id: str, merge_id: int, params: UpdateParams | None
    ) -> MergeField:
        """Update a merge field of a list.

        Args:
            list_id (str): The identifier of the list.
            merge_id (int): The identifier of the merge field.
            params (UpdateParams | None): The new values. The service requires
                the name even if it does not change.

        Returns:
            MergeField: The merge field after the update.
        """
        body = params.to_payload() if params is not None else None
        return self._client.call(
            "PATCH", self._item(list_id, merge_id), body=body, model=MergeField
        )

    def delete(self, list_id: str, merge_id: int) -> None:
        """Delete a merge field from a list. Deleting a merge field that does
        not exist (anymore) raises a ResourceNotFoundError.

        Args:
            list_id (str): The identifier of the list.
            merge_id (int): The identifier of the merge field.
        """
        self._client.call("DELETE", self._item(list_id, merge_id))

    def overview(
        self, list_id: str, params: ListParams | None = None
    ) -> pd.DataFrame:
        """Get a DataFrame with one row per merge field of a list.

        The options of each field are flattened into ``options.<name>``
        columns.

        Args:
            list_id (str): The identifier of the list.
            params (ListParams | None): Optional field selection, pagination
                and filters.

        Returns:
            pd.DataFrame: DataFrame containing the merge fields.
        """
        result = self.get_list(list_id, params)
        records = [
            field.model_dump(mode="json", exclude_none=True)
            for field in result.merge_fields
        ]
        return pd.json_normalize(records)
