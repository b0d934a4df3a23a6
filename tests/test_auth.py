"""
Tests for credential storage.
"""

from theo_sdk.auth import Credential, CredentialStore, ProtectionSpace, REQUEST_REALM


def test_protection_space_default_ports():
    assert ProtectionSpace.for_url("http://example.com/db/data").port == 80
    assert ProtectionSpace.for_url("https://example.com/db/data").port == 443
    assert ProtectionSpace.for_url("https://Example.com:7473/").host == "example.com"


def test_protection_space_realm():
    space = ProtectionSpace.for_url("http://localhost:7474/db/data/")
    assert space.realm == REQUEST_REALM == "neo4j graphdb"
    assert space.authentication_method == "Basic"


def test_credential_lookup_matches_host_port_scheme():
    store = CredentialStore()
    credential = Credential(username="neo4j", password="secret")
    store.set_credential(credential, ProtectionSpace.for_url("http://localhost:7474/db/data/"))

    assert store.credential_for("http://localhost:7474/db/data/node/5") == credential
    assert store.credential_for("http://localhost:7475/db/data/") is None
    assert store.credential_for("https://localhost:7474/db/data/") is None
    assert store.credential_for("http://otherhost:7474/db/data/") is None
    assert len(store) == 1


def test_password_hidden_from_repr():
    assert "secret" not in repr(Credential(username="neo4j", password="secret"))


def test_authorization_header():
    credential = Credential(username="neo4j", password="secret")
    assert credential.authorization_header() == "Basic bmVvNGo6c2VjcmV0"
