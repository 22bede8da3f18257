import pytest

from gitingest_mcp.core.domain.repository import (
    RepoIdentifier,
    RepoLocator,
    parse_locator,
    split_qualified_identifier,
)
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import InvalidInputError


def test_split_qualified_identifier():
    assert split_qualified_identifier("GitHub:rust-lang/rust") == ("github", "rust-lang/rust")


@pytest.mark.parametrize("raw", ["rust-lang/rust", "github:rust", "github:a/b:c", ""])
def test_split_rejects_malformed_identifiers(raw):
    with pytest.raises(InvalidInputError, match="gitprovider:username/reponame"):
        split_qualified_identifier(raw)


@pytest.mark.parametrize(
    ("path", "ref", "subpath"),
    [
        ("octo/demo", None, None),
        ("/octo/demo/", None, None),
        ("octo/demo/tree/dev", "dev", None),
        ("octo/demo/blob/v1.0/src/main.py", "v1.0", "src/main.py"),
        ("octo/demo/tree/main/docs", "main", "docs"),
    ],
)
def test_parse_github_path(path, ref, subpath):
    locator = parse_locator(ProviderType.GITHUB, path)

    assert locator == RepoLocator(RepoIdentifier(ProviderType.GITHUB, "octo", "demo"), ref, subpath)


@pytest.mark.parametrize("path", ["octo", "octo/demo/issues", "octo/demo/tree"])
def test_parse_github_path_rejects_malformed(path):
    with pytest.raises(InvalidInputError):
        parse_locator(ProviderType.GITHUB, path)


def test_parse_gitlab_path_with_nested_namespace_and_ref():
    locator = parse_locator(ProviderType.GITLAB, "group/sub/project/-/tree/develop/lib")

    assert locator.identifier == RepoIdentifier(ProviderType.GITLAB, "group/sub", "project")
    assert locator.identifier.project_path == "group/sub/project"
    assert locator.ref == "develop"
    assert locator.subpath == "lib"


def test_parse_gitlab_path_without_ref():
    locator = parse_locator(ProviderType.GITLAB, "gitlab-org/gitlab")

    assert locator.identifier.owner_or_namespace == "gitlab-org"
    assert locator.identifier.repo == "gitlab"
    assert locator.ref is None
    assert locator.subpath is None


@pytest.mark.parametrize("path", ["project", "group/project/-/merge_requests/1", "group/project/-/tree"])
def test_parse_gitlab_path_rejects_malformed(path):
    with pytest.raises(InvalidInputError):
        parse_locator(ProviderType.GITLAB, path)
