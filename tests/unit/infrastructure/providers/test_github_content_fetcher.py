import base64

import pytest
import respx
from httpx import ConnectError, Response

from gitingest_mcp.core.domain.repository import EntryKind, RepoIdentifier
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import (
    NotFoundError,
    PathIsDirectoryError,
    ProviderError,
    RateLimitedError,
    UpstreamParseError,
)
from gitingest_mcp.infrastructure.providers.github import GitHubContentFetcher

API = "https://api.github.example.com"
REPO = RepoIdentifier(ProviderType.GITHUB, "octo", "demo")


@pytest.fixture
def fetcher() -> GitHubContentFetcher:
    return GitHubContentFetcher(api_url=API, token="ghp_test_token")


@pytest.mark.asyncio
@respx.mock
async def test_list_directory(fetcher):
    route = respx.get(f"{API}/repos/octo/demo/contents/src").mock(
        return_value=Response(
            200,
            json=[
                {"name": "main.py", "path": "src/main.py", "type": "file", "size": 42, "sha": "x"},
                {"name": "pkg", "path": "src/pkg", "type": "dir", "size": 0},
                {"name": "vendor", "path": "src/vendor", "type": "submodule"},
            ],
        )
    )

    entries = await fetcher.list_directory(REPO, "src", "dev")

    assert [(entry.path, entry.kind, entry.size) for entry in entries] == [
        ("src/main.py", EntryKind.FILE, 42),
        ("src/pkg", EntryKind.DIRECTORY, 0),
        ("src/vendor", EntryKind.FILE, None),
    ]
    request = route.calls.last.request
    assert request.url.params["ref"] == "dev"
    assert request.headers["Authorization"] == "Bearer ghp_test_token"
    assert request.headers["User-Agent"] == "GitIngest-MCP-Agent/1.0"


@pytest.mark.asyncio
@respx.mock
async def test_root_listing_without_ref_omits_parameter(fetcher):
    route = respx.get(f"{API}/repos/octo/demo/contents").mock(return_value=Response(200, json=[]))

    assert await fetcher.list_directory(REPO, "", None) == []
    assert "ref" not in route.calls.last.request.url.params


@pytest.mark.asyncio
@respx.mock
async def test_listing_a_file_path_yields_single_entry(fetcher):
    respx.get(f"{API}/repos/octo/demo/contents/README.md").mock(
        return_value=Response(200, json={"name": "README.md", "path": "README.md", "type": "file", "size": 5})
    )

    entries = await fetcher.list_directory(REPO, "README.md", None)

    assert [entry.name for entry in entries] == ["README.md"]


@pytest.mark.asyncio
@respx.mock
async def test_unexpected_listing_payload_is_a_parse_error(fetcher):
    respx.get(f"{API}/repos/octo/demo/contents").mock(return_value=Response(200, json=[{"name": 1}]))

    with pytest.raises(UpstreamParseError):
        await fetcher.list_directory(REPO, "", None)


@pytest.mark.asyncio
@respx.mock
async def test_read_file_decodes_wrapped_base64(fetcher):
    encoded = base64.b64encode(b"fn main() {}\n").decode()
    wrapped = "\n".join(encoded[index : index + 8] for index in range(0, len(encoded), 8))
    respx.get(f"{API}/repos/octo/demo/contents/src/main.rs").mock(
        return_value=Response(
            200,
            json={"name": "main.rs", "path": "src/main.rs", "type": "file", "encoding": "base64", "content": wrapped},
        )
    )

    assert await fetcher.read_file(REPO, "src/main.rs", "main") == b"fn main() {}\n"


@pytest.mark.asyncio
@respx.mock
async def test_read_file_on_directory(fetcher):
    respx.get(f"{API}/repos/octo/demo/contents/src").mock(
        return_value=Response(200, json=[{"name": "a", "path": "src/a", "type": "file"}])
    )

    with pytest.raises(PathIsDirectoryError):
        await fetcher.read_file(REPO, "src", None)


@pytest.mark.asyncio
@respx.mock
async def test_read_file_without_inline_content(fetcher):
    respx.get(f"{API}/repos/octo/demo/contents/big.bin").mock(
        return_value=Response(
            200, json={"name": "big.bin", "path": "big.bin", "type": "file", "encoding": "none", "content": ""}
        )
    )

    with pytest.raises(UpstreamParseError):
        await fetcher.read_file(REPO, "big.bin", None)


@pytest.mark.asyncio
@respx.mock
async def test_read_missing_file(fetcher):
    respx.get(f"{API}/repos/octo/demo/contents/nope.txt").mock(
        return_value=Response(404, json={"message": "Not Found"})
    )

    with pytest.raises(NotFoundError):
        await fetcher.read_file(REPO, "nope.txt", None)


@pytest.mark.asyncio
@respx.mock
async def test_default_branch(fetcher):
    respx.get(f"{API}/repos/octo/demo").mock(
        return_value=Response(200, json={"name": "demo", "default_branch": "trunk"})
    )

    assert await fetcher.get_default_branch(REPO) == "trunk"


@pytest.mark.asyncio
@respx.mock
async def test_default_branch_missing(fetcher):
    respx.get(f"{API}/repos/octo/demo").mock(return_value=Response(200, json={"name": "demo"}))

    with pytest.raises(NotFoundError, match="no default branch"):
        await fetcher.get_default_branch(REPO)


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit(fetcher):
    respx.get(f"{API}/repos/octo/demo").mock(
        return_value=Response(403, headers={"x-ratelimit-remaining": "0"}, json={"message": "API rate limit exceeded"})
    )

    with pytest.raises(RateLimitedError):
        await fetcher.get_default_branch(REPO)


@pytest.mark.asyncio
@respx.mock
async def test_transport_failure_is_a_provider_error(fetcher):
    respx.get(f"{API}/repos/octo/demo").mock(side_effect=ConnectError("connection refused"))

    with pytest.raises(ProviderError, match="failed"):
        await fetcher.get_default_branch(REPO)


@pytest.mark.asyncio
@respx.mock
async def test_search(fetcher):
    route = respx.get(f"{API}/search/repositories").mock(
        return_value=Response(
            200,
            json={
                "total_count": 2,
                "items": [
                    {"full_name": "rust-lang/rust", "description": "Rust", "stargazers_count": 90000},
                    {"full_name": "x/y", "description": None, "stargazers_count": 5},
                ],
            },
        )
    )

    results = await fetcher.search("lang:rust", 250)

    assert [(result.full_name, result.stargazers_count) for result in results] == [
        ("rust-lang/rust", 90000),
        ("x/y", 5),
    ]
    assert all(result.provider is ProviderType.GITHUB for result in results)
    params = route.calls.last.request.url.params
    assert params["q"] == "lang:rust"
    assert params["per_page"] == "100"


def test_no_authorization_header_without_token():
    fetcher = GitHubContentFetcher(api_url=API)

    assert "Authorization" not in fetcher._client._headers


@pytest.mark.asyncio
@respx.mock
async def test_metadata(fetcher):
    respx.get(f"{API}/repos/octo/demo").mock(
        return_value=Response(200, json={"name": "demo", "default_branch": "main", "id": 1})
    )

    metadata = await fetcher.get_metadata(REPO)

    assert (metadata.name, metadata.default_branch) == ("demo", "main")
    assert await fetcher.get_display_name(REPO, metadata) == "demo"
