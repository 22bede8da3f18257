from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitingest_mcp.core.domain.repository import split_patterns


class Settings(BaseSettings):
    """Server settings, read from the environment or a local ``.env`` file."""

    # ── Providers ──
    github_token: SecretStr | None = Field(default=None, alias="GITHUB_TOKEN")
    github_api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    gitlab_token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")
    gitlab_base_url: str = Field(default="https://gitlab.com", alias="GITLAB_BASE_URL")
    http_timeout_seconds: float = Field(default=10.0, alias="HTTP_TIMEOUT_SECONDS", gt=0)
    user_agent: str = Field(default="GitIngest-MCP-Agent/1.0", alias="HTTP_USER_AGENT")

    # ── Tree view ──
    extra_ignore_patterns: str = Field(
        default="",
        alias="EXTRA_IGNORE_PATTERNS",
        description="Comma-separated substrings pruned in addition to the defaults",
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @property
    def extra_ignore_entries(self) -> tuple[str, ...]:
        return split_patterns(self.extra_ignore_patterns)
