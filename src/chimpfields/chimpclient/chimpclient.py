import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from .config import ClientConfig
from .exceptions import raise_from_response
from .services import MergeFieldService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ChimpClient:
    def __init__(self, config: ClientConfig) -> None:
        """Initialize the client for the Mailchimp Marketing API.

        Args:
            config (ClientConfig): The API key and connection settings.
                The API host is derived from the data center of the key
                unless the config provides a base_url.

        Returns:
            ChimpClient: An instance of the client.
        """
        self._config = config
        self._base_url = config.api_url

        # Create the client
        timeout = httpx.Timeout(
            config.timeout,
            connect=config.connect_timeout,
            read=config.read_timeout,
            write=None,
        )
        limits = httpx.Limits(
            max_connections=config.max_connections,
            max_keepalive_connections=config.max_connections,
        )
        self._client = httpx.Client(
            base_url=self._base_url,
            auth=httpx.BasicAuth("anystring", config.api_key.get_secret_value()),
            headers={"Accept": "application/json"},
            verify=config.verify,
            timeout=timeout,
            limits=limits,
        )
        self._is_closed = False

        # ---- include services ----
        self.merge_fields: MergeFieldService = MergeFieldService(client=self)

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "ChimpClient":
        """Create a client configured from the environment (see
        ClientConfig.from_env)."""
        return cls(ClientConfig.from_env(env_file))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """Close the HTTPX client."""
        self._client.close()
        self._is_closed = True

    def __repr__(self):
        return f"ChimpClient(base_url={self._base_url})"

    def request(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        """Send an HTTP request to the specified endpoint.

        Args:
            method (str): The HTTP method (e.g., 'GET', 'POST').
            endpoint (str): The API path relative to the API root,
                e.g. 'lists/abc123/merge-fields'.
            **kwargs: Additional arguments to pass to the request.

        Returns:
            httpx.Response: The response from the server.
        """
        if self._is_closed:
            raise RuntimeError(
                "Attempted to make a request with a closed ChimpClient. Ensure you "
                "are performing all operations within the 'with' context block."
            )
        logger.debug("%s %s", method, endpoint)
        response = self._client.request(method, endpoint, **kwargs)
        logger.debug("%s %s -> %s", method, endpoint, response.status_code)
        return response

    def call(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        model: type[ModelT] | None = None,
    ) -> ModelT | None:
        """Perform a single API call and decode the result.

        Args:
            method (str): The HTTP method.
            path (str): The API path relative to the API root.
            params (dict[str, Any] | None): Query string parameters. Nothing is
                sent if None.
            body (dict[str, Any] | None): The JSON body. Nothing is sent if None.
            model (type[BaseModel] | None): The model to decode the response
                into. The response is discarded if None.

        Raises:
            APIError: If the service answers with an error status.

        Returns:
            BaseModel | None: The decoded response, or None if no model was
                given or the response has no content.
        """
        kwargs: dict[str, Any] = {}
        if params is not None:
            kwargs["params"] = params
        if body is not None:
            kwargs["json"] = body
        response = self.request(method, path, **kwargs)
        raise_from_response(response)

        if model is None or not response.content:
            return None
        return model.model_validate(response.json())

    def ping(self) -> str:
        """Check that the API is reachable and the API key is valid.

        Returns:
            str: The health status message of the service.
        """
        response = self.get("ping")
        raise_from_response(response)
        return response.json().get("health_status", "")

    def post(self, endpoint: str, json: dict | None = None, **kwargs) -> httpx.Response:
        """Send a POST request to the specified endpoint."""
        return self.request("POST", endpoint, json=json, **kwargs)

    def delete(self, endpoint: str, **kwargs) -> httpx.Response:
        """Send a DELETE request to the specified endpoint."""
        return self.request("DELETE", endpoint, **kwargs)

    def get(self, endpoint: str, **kwargs) -> httpx.Response:
        """Send a GET request to the specified endpoint."""
        return self.request("GET", endpoint, **kwargs)

    def patch(
        self, endpoint: str, json: dict | None = None, **kwargs
    ) -> httpx.Response:
        """Send a PATCH request to the specified endpoint."""
        return self.request("PATCH", endpoint, json=json, **kwargs)
