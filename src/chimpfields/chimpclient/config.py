import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

API_KEY_ENV = "MAILCHIMP_API_KEY"
BASE_URL_ENV = "MAILCHIMP_BASE_URL"
VERIFY_ENV = "MAILCHIMP_VERIFY"

BASE_URL_TEMPLATE = "https://{dc}.api.mailchimp.com/3.0/"


class ClientConfig(BaseModel):
    """Connection settings for a ChimpClient.

    Mailchimp API keys end with the data center of the account, e.g.
    ``0123456789abcdef-us6``. The data center selects the API host unless
    ``base_url`` is given explicitly.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    api_key: SecretStr = Field(description="The Mailchimp API key.")
    base_url: str | None = Field(
        default=None,
        description="Override for the API root, including the protocol and the "
        "version path (e.g. 'http://localhost:8080/3.0/').",
    )
    verify: bool = Field(default=True, description="Verify SSL certificates.")
    timeout: float = Field(default=10.0, gt=0)
    connect_timeout: float = Field(default=30.0, gt=0)
    read_timeout: float = Field(default=60.0, gt=0)
    max_connections: int = Field(default=5, ge=1)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, value: SecretStr) -> SecretStr:
        key, _, dc = value.get_secret_value().strip().rpartition("-")
        if not key or not dc:
            raise ValueError(
                "Invalid API key: expected the form '<key>-<data center>'."
            )
        return value

    @property
    def data_center(self) -> str:
        """The data center suffix of the API key (e.g. 'us6')."""
        return self.api_key.get_secret_value().strip().rpartition("-")[2]

    @property
    def api_url(self) -> str:
        """The API root all request paths are relative to."""
        url = self.base_url or BASE_URL_TEMPLATE.format(dc=self.data_center)
        if not url.endswith("/"):
            url += "/"
        return url

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "ClientConfig":
        """Build the configuration from environment variables.

        Variables from ``env_file`` (or a ``.env`` file found from the working
        directory) are loaded first without overriding the environment.

        Args:
            env_file (str | None): Path to the .env file to load.

        Raises:
            ValueError: If MAILCHIMP_API_KEY is not set.

        Returns:
            ClientConfig: The configuration.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))
        api_key = os.getenv(API_KEY_ENV)
        if not api_key:
            raise ValueError(f"Environment variable {API_KEY_ENV} is not set.")

        settings: dict = {"api_key": api_key}
        base_url = os.getenv(BASE_URL_ENV)
        if base_url:
            settings["base_url"] = base_url
        verify = os.getenv(VERIFY_ENV)
        if verify is not None:
            settings["verify"] = verify.lower() in ("true", "1", "yes")
        return cls(**settings)
