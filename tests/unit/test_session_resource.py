"""Tests for session resource synthesis."""
from resource_auth.addons.user_management import create_session_resource, merge_options
from resource_auth.framework import Password, Relationship, ResourceType


def test_default_schema():
    session = create_session_resource(merge_options())

    assert session.name == "session"
    assert session.schema.attributes == {"token": str, "username": str, "password": Password}
    assert session.schema.relationships == {"user": Relationship(type="user", belongs_to=True)}


def test_custom_username_parameter():
    session = create_session_resource(merge_options({"username_request_parameter": "email"}))

    assert session.schema.attributes["email"] is str
    assert "username" not in session.schema.attributes


def test_custom_password_parameter_is_password_typed():
    session = create_session_resource(merge_options({"password_request_parameter": "passphrase"}))

    assert session.schema.attributes["passphrase"] is Password
    assert "password" not in session.schema.attributes
    assert session.schema.sensitive_attributes() == {"passphrase"}


def test_relationship_targets_configured_user_type_by_name():
    member = ResourceType(name="member")
    session = create_session_resource(merge_options({"user_resource": member}))

    relationship = session.schema.relationships["user"]
    assert relationship.type == "member"
    assert relationship.belongs_to is True


def test_colliding_names_are_accepted():
    """No uniqueness check: the password entry wins over the username entry."""
    session = create_session_resource(merge_options({
        "username_request_parameter": "login",
        "password_request_parameter": "login",
    }))

    assert session.schema.attributes == {"token": str, "login": Password}
