from app.mappers.body_decoder import DecodeStatus, decode_body


def test_none_is_empty():
    result = decode_body(None)
    assert result.status == DecodeStatus.empty
    assert result.payload is None
    assert result.is_benign_test


def test_mapping_returned_as_is():
    body = {"country_code": "US", "fields": {"prompt": "x"}}
    result = decode_body(body)
    assert result.status == DecodeStatus.decoded
    assert result.payload == body
    assert not result.is_benign_test


def test_json_bytes():
    result = decode_body(b'  {"country_code": "FR"}\n')
    assert result.status == DecodeStatus.decoded
    assert result.payload == {"country_code": "FR"}


def test_whitespace_bytes_are_empty():
    assert decode_body(b"   \n\t").status == DecodeStatus.empty


def test_empty_string_is_empty():
    assert decode_body("").status == DecodeStatus.empty


def test_invalid_utf8_is_malformed():
    assert decode_body(b"\xff\xfe\xfa").status == DecodeStatus.malformed


def test_json_text():
    result = decode_body('{"contact_id": 42}')
    assert result.payload == {"contact_id": 42}


def test_url_encoded_form():
    result = decode_body(b"country_code=DE&prompt=Name+it&contact_id=7")
    assert result.status == DecodeStatus.decoded
    assert result.payload == {"country_code": "DE", "prompt": "Name it", "contact_id": "7"}


def test_url_encoded_repeated_key_last_wins():
    result = decode_body("country_code=DE&country_code=AT")
    assert result.payload == {"country_code": "AT"}


def test_broken_json_is_malformed():
    result = decode_body(b'{"country_code": "FR"')
    assert result.status == DecodeStatus.malformed
    assert result.payload is None
    assert result.is_benign_test


def test_plain_text_is_malformed():
    assert decode_body("hello world").status == DecodeStatus.malformed


def test_json_array_is_malformed():
    assert decode_body("[1, 2, 3]").status == DecodeStatus.malformed


def test_json_scalar_is_malformed():
    assert decode_body("42").status == DecodeStatus.malformed


def test_unsupported_type_is_malformed():
    assert decode_body(12345).status == DecodeStatus.malformed


def test_deeply_nested_json_is_malformed():
    body = b'{"a": ' + b"[" * 100000 + b"]" * 100000 + b"}"
    result = decode_body(body)
    assert result.status == DecodeStatus.malformed
    assert result.is_benign_test


def test_mapping_with_non_string_keys():
    result = decode_body({1: "x", "country_code": "FR"})
    assert result.status == DecodeStatus.decoded
    assert result.payload == {1: "x", "country_code": "FR"}


def test_url_encoded_trailing_ampersand():
    result = decode_body("country_code=FR&contact_id=42&")
    assert result.status == DecodeStatus.decoded
    assert result.payload == {"country_code": "FR", "contact_id": "42"}


def test_url_encoded_key_without_value():
    result = decode_body(b"country_code=FR&flag")
    assert result.status == DecodeStatus.decoded
    assert result.payload == {"country_code": "FR", "flag": ""}
