from gitingest_mcp.infrastructure.observability.redaction_service import (
    redact_dict,
    redact_text,
    redaction_processor,
)

GITHUB_TOKEN = "ghp_" + "a" * 36
GITLAB_TOKEN = "glpat-" + "b" * 20


def test_redacts_bearer_credentials():
    assert redact_text("sent Bearer abc.def upstream") == "sent Bearer [REDACTED] upstream"


def test_redacts_bare_provider_tokens():
    text = redact_text(f"tokens {GITHUB_TOKEN} and {GITLAB_TOKEN}")

    assert GITHUB_TOKEN not in text
    assert GITLAB_TOKEN not in text
    assert text.count("[REDACTED]") == 2


def test_sensitive_keys_masked_recursively():
    data = {"headers": {"PRIVATE-TOKEN": "x", "Accept": "application/json"}, "paths": ["src"]}

    assert redact_dict(data) == {
        "headers": {"PRIVATE-TOKEN": "[REDACTED]", "Accept": "application/json"},
        "paths": ["src"],
    }


def test_processor_leaves_plain_events_alone():
    event = {"event": "Repository tree built", "repo": "octo/demo", "files": 3}

    assert redaction_processor(None, "info", event) == event
