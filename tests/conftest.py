import pytest

from gitingest_mcp.core.domain.repository import RepoIdentifier
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.infrastructure.configuration import Settings


@pytest.fixture
def identifier() -> RepoIdentifier:
    return RepoIdentifier(ProviderType.GITHUB, "octo", "demo")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        GITHUB_TOKEN="ghp_test_token",
        GITLAB_TOKEN="glpat-test-token",
        GITHUB_API_URL="https://api.github.example.com",
        GITLAB_BASE_URL="https://gitlab.example.com",
        EXTRA_IGNORE_PATTERNS="generated, fixtures/big",
    )
