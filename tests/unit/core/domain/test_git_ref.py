import pytest

from gitingest_mcp.core.domain.repository import GitRef, GitRefKind
from gitingest_mcp.core.exceptions import InvalidInputError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", GitRef.default()),
        ("   ", GitRef.default()),
        ("develop", GitRef.branch("develop")),
        ("branch:release", GitRef.branch("release")),
        ("tag:v1.2.0", GitRef.tag("v1.2.0")),
        ("commit:abc123", GitRef.commit("abc123")),
        ("feature:login", GitRef.branch("feature:login")),
        ("a:b:c", GitRef.branch("a:b:c")),
    ],
)
def test_parse_git_ref(raw, expected):
    assert GitRef.parse(raw) == expected


def test_parse_rejects_prefix_without_name():
    with pytest.raises(InvalidInputError):
        GitRef.parse("tag:")


def test_default_ref_has_no_name():
    ref = GitRef.default()

    assert ref.is_default
    assert ref.kind is GitRefKind.DEFAULT
    assert ref.name is None
    with pytest.raises(ValueError):
        GitRef(GitRefKind.DEFAULT, "main")


def test_named_refs_require_a_name():
    with pytest.raises(ValueError):
        GitRef(GitRefKind.COMMIT, "")
