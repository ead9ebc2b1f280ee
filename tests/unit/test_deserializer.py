"""Tests for response deserialization."""

import json
from datetime import UTC, date, datetime

import pytest

from openapi_client_runtime.deserializer import Deserializer
from openapi_client_runtime.errors import ParseError, TypeMismatchError, UnknownModelError
from openapi_client_runtime.testing import create_mock_response
from openapi_client_runtime.transport import ApiResponse


@pytest.fixture
def deserializer(registry):
    return Deserializer(registry)


def json_response(body: str, content_type: str | None = "application/json"):
    return create_mock_response(body=body, content_type=content_type)


class TestHashes:
    """Test Hash<String, T> descriptors."""

    def test_handles_hash_of_strings(self, deserializer):
        data = deserializer.deserialize(json_response('{"message": "Hello"}'), "Hash<String, String>")

        assert isinstance(data, dict)
        assert data == {"message": "Hello"}

    def test_handles_hash_of_models(self, deserializer, models):
        data = deserializer.deserialize(json_response('{"pet": {"id": 1}}'), "Hash<String, Pet>")

        assert list(data.keys()) == ["pet"]
        pet = data["pet"]
        assert isinstance(pet, models.Pet)
        assert pet.id == 1

    def test_preserves_key_order(self, deserializer):
        body = json.dumps({"z": 1, "a": 2, "m": 3})

        data = deserializer.deserialize(json_response(body), "Hash<String, Integer>")

        assert list(data) == ["z", "a", "m"]

    def test_hash_applied_to_array(self, deserializer):
        with pytest.raises(TypeMismatchError) as exc_info:
            deserializer.deserialize(json_response("[1, 2]"), "Hash<String, Integer>")

        assert exc_info.value.value == [1, 2]


class TestArrays:
    """Test Array<T> descriptors."""

    def test_array_of_models_in_order(self, deserializer, models):
        body = json.dumps([{"id": 3, "name": "c"}, {"id": 1, "name": "a"}])

        tags = deserializer.deserialize(json_response(body), "Array<Tag>")

        assert tags == [models.Tag(id=3, name="c"), models.Tag(id=1, name="a")]

    def test_array_applied_to_object(self, deserializer):
        with pytest.raises(TypeMismatchError):
            deserializer.deserialize(json_response('{"id": 1}'), "Array<Pet>")

    def test_nested_containers(self, deserializer):
        body = json.dumps({"evens": [2, 4], "odds": [1]})

        data = deserializer.deserialize(json_response(body), "Hash<String, Array<Integer>>")

        assert data == {"evens": [2, 4], "odds": [1]}


class TestModels:
    """Test model construction from JSON objects."""

    def test_builds_nested_models(self, deserializer, models):
        body = json.dumps(
            {
                "id": 10,
                "category": {"id": 2, "name": "dogs"},
                "name": "rex",
                "photoUrls": ["a.png", "b.png"],
                "tags": [{"id": 5, "name": "good"}],
                "status": "available",
            }
        )

        pet = deserializer.deserialize(json_response(body), "Pet")

        assert pet == models.Pet(
            id=10,
            category=models.Category(id=2, name="dogs"),
            name="rex",
            photo_urls=["a.png", "b.png"],
            tags=[models.Tag(id=5, name="good")],
            status="available",
        )

    def test_unknown_keys_ignored_and_missing_keys_default(self, deserializer):
        pet = deserializer.deserialize(json_response('{"id": 1, "colour": "brown"}'), "Pet")

        assert pet.id == 1
        assert pet.name is None
        assert pet.nickname == "unnamed"
        assert not hasattr(pet, "colour")

    def test_null_values_keep_defaults(self, deserializer):
        pet = deserializer.deserialize(json_response('{"id": 1, "nickname": null}'), "Pet")

        assert pet.nickname == "unnamed"

    def test_attribute_name_is_not_a_json_key(self, deserializer):
        """Test that only the declared JSON key populates a renamed field."""
        pet = deserializer.deserialize(json_response('{"photo_urls": ["x.png"]}'), "Pet")

        assert pet.photo_urls is None

    def test_field_types_are_applied(self, deserializer):
        body = json.dumps(
            {
                "id": "42",
                "petId": 7,
                "shipDate": "2015-06-01T10:20:30Z",
                "complete": "true",
                "metadata": {"gift": True, "notes": ["wrap"]},
            }
        )

        order = deserializer.deserialize(json_response(body), "Order")

        assert order.id == 42
        assert order.pet_id == 7
        assert order.ship_date == datetime(2015, 6, 1, 10, 20, 30, tzinfo=UTC)
        assert order.complete is True
        assert order.metadata == {"gift": True, "notes": ["wrap"]}

    def test_fresh_instance_per_call(self, deserializer):
        first = deserializer.deserialize(json_response('{"id": 1}'), "Pet")
        second = deserializer.deserialize(json_response('{"id": 1}'), "Pet")

        assert first == second
        assert first is not second

    def test_model_applied_to_scalar(self, deserializer):
        with pytest.raises(TypeMismatchError):
            deserializer.deserialize(json_response("3"), "Pet")

    def test_unknown_model(self, deserializer):
        with pytest.raises(UnknownModelError):
            deserializer.deserialize(json_response("{}"), "Unicorn")


class TestPrimitives:
    """Test scalar conversions."""

    @pytest.mark.parametrize(
        ("data", "descriptor", "expected"),
        [
            ("abc", "String", "abc"),
            (12, "String", "12"),
            (True, "String", "true"),
            ("12", "Integer", 12),
            (12.9, "Integer", 12),
            ("1.5", "Float", 1.5),
            (3, "Float", 3.0),
            (True, "Boolean", True),
            ("FALSE", "Boolean", False),
            ("yes", "BOOLEAN", True),
            (0, "Boolean", False),
            ("2015-06-01", "Date", date(2015, 6, 1)),
            ("2015-06-01T10:20:30Z", "Date", date(2015, 6, 1)),
            ("2015-06-01T10:20:30+02:00", "DateTime", datetime.fromisoformat("2015-06-01T10:20:30+02:00")),
            ({"any": ["thing"]}, "Object", {"any": ["thing"]}),
        ],
    )
    def test_convert(self, deserializer, data, descriptor, expected):
        assert deserializer.convert(data, descriptor) == expected

    @pytest.mark.parametrize(
        ("data", "descriptor"),
        [
            ("abc", "Integer"),
            (True, "Integer"),
            ("n/a", "Float"),
            ("maybe", "Boolean"),
            (7, "Boolean"),
            ("yesterday", "Date"),
            (20150601, "DateTime"),
            ({"a": 1}, "String"),
        ],
    )
    def test_convert_mismatch(self, deserializer, data, descriptor):
        with pytest.raises(TypeMismatchError) as exc_info:
            deserializer.convert(data, descriptor)

        assert str(exc_info.value.descriptor) == descriptor

    def test_none_converts_to_none(self, deserializer):
        assert deserializer.convert(None, "Pet") is None


class TestBodies:
    """Test body decoding by content type."""

    def test_malformed_json_raises_parse_error(self, deserializer):
        with pytest.raises(ParseError) as exc_info:
            deserializer.deserialize(json_response('{"message": '), "Hash<String, String>")

        assert exc_info.value.body == '{"message": '
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_malformed_json_for_string_returns_body(self, deserializer):
        assert deserializer.deserialize(json_response("plain words"), "String") == "plain words"

    def test_non_json_content_type_is_text(self, deserializer):
        response = json_response("<pet><id>1</id></pet>", content_type="application/xml")

        assert deserializer.deserialize(response, "String") == "<pet><id>1</id></pet>"

    def test_json_string_for_string(self, deserializer):
        assert deserializer.deserialize(json_response('"quoted"'), "String") == "quoted"

    def test_missing_content_type_defaults_to_json(self, deserializer):
        response = json_response('{"id": 4}', content_type=None)

        assert deserializer.deserialize(response, "Pet").id == 4

    def test_charset_parameter_is_json(self, deserializer):
        response = json_response("[1, 2]", content_type="application/json; charset=UTF-8")

        assert deserializer.deserialize(response, "Array<Integer>") == [1, 2]

    def test_file_returns_raw_bytes(self, deserializer):
        response = json_response('{"not": "parsed"}')

        assert deserializer.deserialize(response, "File") == b'{"not": "parsed"}'

    def test_binary_bytes_are_not_decoded(self, deserializer):
        raw = b"\x89PNG\r\n\x1a\n\xff\xfe\x00\x01"
        response = ApiResponse(
            status_code=200,
            headers={"Content-Type": "application/octet-stream"},
            body=raw.decode("utf-8", errors="replace"),
            content=raw,
        )

        assert deserializer.deserialize(response, "Binary") == raw

    def test_empty_file_is_empty_bytes(self, deserializer):
        assert deserializer.deserialize(json_response(""), "File") == b""

    def test_empty_body(self, deserializer):
        assert deserializer.deserialize(json_response(""), "Pet") is None

    def test_response_is_not_mutated(self, deserializer):
        response = json_response('{"id": 1}')

        deserializer.deserialize(response, "Pet")

        assert response.body == '{"id": 1}'
        assert response.headers["content-type"] == "application/json"
