import pytest

from jsonsource.infer.naming import IdentifierScope, resolve, resolve_type_name


@pytest.mark.parametrize("raw, expected", [
    ("@id", "Id"),
    ("givenName", "GivenName"),
    ("name", "Name"),
    ("@context", "Context"),
    ("first-name", "First_name"),
    ("_id", "Id"),
    ("2fa", "Field2fa"),
    ("", "Field"),
    ("@", "Field"),
    ("none", "None_"),
    ("true", "True_"),
])
def test_resolve(raw, expected):
    assert resolve(raw) == expected
    assert resolve(raw).isidentifier()


@pytest.mark.parametrize("value, expected", [
    ("Person", "Person"),
    ("person", "Person"),
    ("schema:Person", "Person"),
    ("http://schema.org/Person", "Person"),
    ("https://example.org/ns#Event", "Event"),
])
def test_resolve_type_name(value, expected):
    assert resolve_type_name(value) == expected


def test_identifier_scope_is_collision_free():
    scope = IdentifierScope()
    assert scope.claim("@id") == "Id"
    assert scope.claim("id") == "Id_2"
    assert scope.claim("Id") == "Id_3"
    assert scope.claim("ID") == "ID"


def test_identifier_scope_skips_taken_suffix():
    scope = IdentifierScope()
    assert scope.claim("id_2") == "Id_2"
    assert scope.claim("id") == "Id"
    assert scope.claim("@id") == "Id_3"
