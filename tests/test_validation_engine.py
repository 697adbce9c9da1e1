import pytest

from git_deploy_tool.core import ValidationEngine
from git_deploy_tool.models import DeployerIdentity, DeployerSettings


@pytest.fixture
def validation_engine():
    return ValidationEngine()


def test_valid_settings(validation_engine, identity):
    result = validation_engine.validate_settings(DeployerSettings(identity=identity))

    assert result.is_valid


def test_required_fields(validation_engine):
    settings = DeployerSettings(identity=DeployerIdentity(), commit_message=" ")

    result = validation_engine.validate_settings(settings)

    assert set(result.get_errors()) == {
        "username", "personal_access_token", "name", "email", "commit_message"
    }
    assert result.get_errors()["username"] == ["Username cannot be blank."]


def test_unresolved_token_placeholder(validation_engine, identity, monkeypatch):
    monkeypatch.delenv("GIT_TOKEN")

    result = validation_engine.validate_settings(DeployerSettings(identity=identity))

    assert result.has_errors("personal_access_token")
    assert "does not resolve" in result.errors_for("personal_access_token")[0].message


def test_invalid_email(validation_engine, identity):
    identity.email = "deploy at example"

    result = validation_engine.validate_settings(DeployerSettings(identity=identity))

    assert result.get_errors() == {"email": ["Email is not a valid email address."]}
