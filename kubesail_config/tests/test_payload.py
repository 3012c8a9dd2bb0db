import json
from urllib.parse import quote

import pytest

from kubesail_config.errors import PayloadIncomplete, PayloadMalformed
from kubesail_config.payload import CredentialPayload, parse, parse_callback, validate


def _query(data):
    return "data=" + quote(json.dumps(data), safe="")


def test_parse_decodes_data_parameter(alice):
    assert parse(_query(alice)) == alice


def test_parse_accepts_leading_question_mark_and_other_params(alice):
    assert parse("?foo=bar&" + _query(alice)) == alice


def test_parse_keeps_plus_signs():
    # base64 certificates contain '+'
    raw = 'data={"cert":"ab+cd/ef=="}'
    assert parse(raw) == {"cert": "ab+cd/ef=="}


@pytest.mark.parametrize("raw_query", [
    "",
    "foo=bar",
    "data=",
    "data=not-json",
    "data=" + quote("[1, 2]"),
])
def test_parse_rejects_malformed_data(raw_query):
    with pytest.raises(PayloadMalformed):
        parse(raw_query)


def test_validate_builds_payload(alice):
    payload = validate(alice)

    assert isinstance(payload, CredentialPayload)
    assert payload.username == "alice"
    assert payload.cluster_address == "https://a.example:6443"


def test_validate_ignores_extra_fields(alice):
    payload = validate(dict(alice, email="alice@example.com"))
    assert payload.token == "t1"


def test_validate_names_every_missing_field(alice):
    data = dict(alice)
    del data["token"]
    data["namespace"] = ""

    with pytest.raises(PayloadIncomplete) as excinfo:
        validate(data)

    assert excinfo.value.missing == ["token", "namespace"]
    assert "token, namespace" in str(excinfo.value)


def test_validate_rejects_non_string_values(alice):
    with pytest.raises(PayloadIncomplete) as excinfo:
        validate(dict(alice, cert=None, clusterAddress=6443))
    assert excinfo.value.missing == ["cert", "clusterAddress"]


def test_parse_callback_runs_both_steps(alice):
    assert parse_callback(_query(alice)).namespace == "default"

    with pytest.raises(PayloadIncomplete):
        parse_callback(_query({"username": "alice"}))


def test_parse_rejects_invalid_utf8_escapes(alice):
    encoded = quote(json.dumps(dict(alice, cert="CERT")), safe="")
    raw_query = "data=" + encoded.replace("CERT", "%FF%FE")

    with pytest.raises(PayloadMalformed):
        parse_callback(raw_query)


def test_parse_decodes_utf8_escapes(alice):
    assert parse(_query(dict(alice, namespace="équipe")))["namespace"] == "équipe"
