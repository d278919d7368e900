import pytest

from posixopt.exceptions import UsageError
from posixopt.usage import UsageDefinition


@pytest.fixture
def usage():
    usage = UsageDefinition()
    usage.add_usage("add", ["username", "password"])
    usage.add_usage("add", ["password", "verbose"])
    return usage


def test_add_usage_appends_without_duplicates(usage):
    assert usage.get_allowed("add") == ["username", "password", "verbose"]
    assert usage.has_usage("add")
    assert "add" in usage
    assert usage.commands() == ["add"]
    assert len(usage) == 1


def test_command_without_usage_is_unrestricted(usage):
    assert usage.get_allowed("delete") is None
    assert usage.allows("delete", "anything")
    usage.validate("delete", ["anything", "else"])


def test_allows(usage):
    assert usage.allows("add", "verbose")
    assert not usage.allows("add", "force")


def test_validate_accepts_allowed_names(usage):
    usage.validate("add", ["username", "verbose", "_", "add"])


def test_validate_rejects_disallowed_option(usage):
    with pytest.raises(UsageError, match="Option 'force' is not allowed with command 'add'"):
        usage.validate("add", ["username", "force"])


def test_get_allowed_returns_copy(usage):
    usage.get_allowed("add").append("force")
    assert not usage.allows("add", "force")
