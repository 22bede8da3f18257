import pytest
from fakes import FakeContentFetcher, dir_entry, file_entry

from gitingest_mcp.core.application.workflows import RepositoryReadWorkflow
from gitingest_mcp.core.application.workflows.repository_read_workflow import fence_content
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    PathIsDirectoryError,
)


@pytest.fixture
def github() -> FakeContentFetcher:
    return FakeContentFetcher(
        listings={"": [dir_entry("src")], "src": [file_entry("src/main.py")]},
        files={
            "src/main.py": b"print('hi')",
            "NOTES.txt": b"plain text",
            "logo.bin": b"\xff\xfe\x00",
        },
    )


@pytest.fixture
def workflow(github) -> RepositoryReadWorkflow:
    return RepositoryReadWorkflow({ProviderType.GITHUB: github})


@pytest.mark.asyncio
async def test_code_files_are_fenced(workflow, github):
    output = await workflow.execute("github:octo/demo", "src/main.py")

    assert output == "```py\nprint('hi')\n```"
    assert github.read == [("src/main.py", "main")]


@pytest.mark.asyncio
async def test_other_files_returned_verbatim(workflow):
    assert await workflow.execute("github:octo/demo", "/NOTES.txt") == "plain text"


@pytest.mark.asyncio
async def test_path_ref_is_used_for_read(workflow, github):
    await workflow.execute("github:octo/demo/blob/v2/docs", "src/main.py")

    assert github.read == [("src/main.py", "v2")]
    assert github.metadata_calls == 0


@pytest.mark.asyncio
async def test_directory_path_rejected(workflow):
    with pytest.raises(PathIsDirectoryError, match="directory: src"):
        await workflow.execute("github:octo/demo", "src")


@pytest.mark.asyncio
async def test_missing_file_propagates(workflow):
    with pytest.raises(NotFoundError):
        await workflow.execute("github:octo/demo", "nope.py", git_ref="branch:dev")


@pytest.mark.asyncio
async def test_binary_content_rejected(workflow):
    with pytest.raises(InvalidInputError, match="not UTF-8"):
        await workflow.execute("github:octo/demo", "logo.bin")


@pytest.mark.asyncio
@pytest.mark.parametrize("file_path", ["", "  ", "/"])
async def test_blank_file_path_rejected(workflow, github, file_path):
    with pytest.raises(InvalidInputError, match="Missing or invalid file path"):
        await workflow.execute("github:octo/demo", file_path)

    assert github.read == []


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("Cargo.toml", "```toml\nx\n```"),
        ("README.md", "```md\nx\n```"),
        ("Makefile", "x"),
        ("notes.txt", "x"),
    ],
)
def test_fence_content(path, expected):
    assert fence_content(path, "x") == expected
