import pytest
from pydantic import ValidationError

from cred_core.credentials.models import CredentialBase
from tests.provisioners import AwsCredential, AzureCredential


def test_base_reads_only_the_discriminator():
    base = CredentialBase()
    base.populate({"provisioner": "aws", "access_key": "A", "secret_key": "B"})

    assert base.provisioner_name() == "aws"
    assert "access_key" not in base.model_dump()


def test_base_without_discriminator_is_empty():
    base = CredentialBase()
    base.populate({"access_key": "A"})
    assert base.provisioner_name() == ""


def test_populate_fills_concrete_credential_in_place():
    cred = AwsCredential()
    cred.populate({"access_key": "A", "secret_key": "B"})

    assert cred.provisioner_name() == "aws"
    assert (cred.access_key, cred.secret_key) == ("A", "B")


def test_populate_rejects_foreign_discriminator_and_keeps_state():
    cred = AwsCredential(access_key="keep")
    with pytest.raises(ValidationError):
        cred.populate({"provisioner": "azure", "access_key": "other"})
    assert cred.access_key == "keep"


def test_populate_resets_fields_missing_from_payload():
    cred = AzureCredential(tenant_id="t", subscriptions=["s1"])
    cred.populate({"client_id": "c"})
    assert cred.tenant_id == ""
    assert cred.subscriptions == []
    assert cred.client_id == "c"


def test_repr_hides_secret_fields():
    cred = AwsCredential(access_key="AKIA", secret_key="very-secret")
    assert "very-secret" not in repr(cred)
    assert "very-secret" not in str(cred)
    assert "aws" in repr(cred)


def test_equality_by_value():
    assert AwsCredential(access_key="A") == AwsCredential(access_key="A")
    assert AwsCredential(access_key="A") != AwsCredential(access_key="B")
