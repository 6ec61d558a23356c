import json

import pytest

from anoncreds_validation.core.exceptions import ValidationError
from anoncreds_validation.core.models import (
    AnonCredsSchema,
    CredentialDefinition,
    load_validated,
)

LEGACY_ISSUER = "NcYxiDXkpYi6ov5FcYDi1e"

SCHEMA = {
    "issuerId": "did:indy:sovrin:NcYxiDXkpYi6ov5FcYDi1e",
    "name": "gvt",
    "version": "1.0",
    "attrNames": ["name", "age", "sex", "height"],
}

CRED_DEF = {
    "schemaId": "did:indy:sovrin:NcYxiDXkpYi6ov5FcYDi1e/anoncreds/v0/SCHEMA/gvt/1.0",
    "issuerId": LEGACY_ISSUER,
    "tag": "default",
    "type": "CL",
    "value": {"primary": {}},
}


def test_schema_from_json_is_valid():
    schema = load_validated(AnonCredsSchema, json.dumps(SCHEMA))
    assert schema.issuer_id == SCHEMA["issuerId"]
    assert schema.attr_names == ["name", "age", "sex", "height"]


def test_schema_accepts_legacy_issuer():
    schema = AnonCredsSchema(issuer_id=LEGACY_ISSUER, name="gvt", version="1.0", attr_names=["a"])
    assert schema.validate() is None


def test_schema_rejects_bad_issuer():
    schema = AnonCredsSchema.model_validate({**SCHEMA, "issuerId": "not-a-uri"})
    err = schema.validate()
    assert err is not None
    assert err.message == "Invalid issuer id: not-a-uri"


@pytest.mark.parametrize("attrs, expected", [
    ([], "Schema must declare at least one attribute"),
    (["age", "age"], "Duplicate attribute names in schema gvt"),
])
def test_schema_rejects_bad_attributes(attrs, expected):
    schema = AnonCredsSchema.model_validate({**SCHEMA, "attrNames": attrs})
    assert schema.validate().message == expected


def test_cred_def_from_mapping_is_valid():
    cred_def = load_validated(CredentialDefinition, CRED_DEF)
    assert cred_def.issuer_id == LEGACY_ISSUER
    assert cred_def.is_valid()


def test_cred_def_type_defaults_to_cl():
    raw = dict(CRED_DEF)
    del raw["type"]
    assert load_validated(CredentialDefinition, raw).type == "CL"


def test_cred_def_rejects_unknown_signature_type():
    with pytest.raises(ValidationError, match="Unsupported signature type: BBS"):
        load_validated(CredentialDefinition, {**CRED_DEF, "type": "BBS"})


def test_cred_def_rejects_bad_schema_id():
    with pytest.raises(ValidationError, match="Invalid schema id"):
        load_validated(CredentialDefinition, {**CRED_DEF, "schemaId": "schema-1"})


def test_load_validated_wraps_parse_errors():
    with pytest.raises(ValidationError, match="Could not parse AnonCredsSchema"):
        load_validated(AnonCredsSchema, '{"name": "gvt"}')
    with pytest.raises(ValidationError):
        load_validated(AnonCredsSchema, b"not json")


def test_models_serialize_with_camel_case():
    schema = AnonCredsSchema.model_validate(SCHEMA)
    assert schema.model_dump(by_alias=True) == SCHEMA
