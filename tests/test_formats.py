"""Tests for the YAML and TOML strategies."""

import json
import tomllib

import pytest
import yaml

from packio import (
    DecodeError,
    EncodeError,
    SerdeType,
    Serializer,
    TomlWrapper,
    YamlWrapper,
    new,
    new_toml,
    new_yaml,
)
from tests.models import Aliased, Listing, Product, full_product


UNICODE_PRODUCT = Product(
    name="Café",
    description="šĕęćīàł 你好",
    categories=[],
    price=12.5,
    features=[],
)


# ──────────────────────────── YAML ────────────────────────────


class TestYamlWrapper:
    def test_round_trip(self):
        data = new(full_product(), SerdeType.YAML).serialize()
        assert yaml.safe_load(data)["name"] == "Microwave Vertex Marble"

        target = new(Product(), SerdeType.YAML)
        target.deserialize(data)
        assert target.get() == full_product()

    def test_round_trip_unicode_and_empty_lists(self):
        data = new_yaml(UNICODE_PRODUCT).serialize()
        assert "你好" in data.decode("utf-8")

        target = new_yaml(Product())
        target.deserialize(data)
        assert target.get() == UNICODE_PRODUCT

    def test_aliases(self):
        data = new_yaml(Aliased(display_name="Ana")).serialize()
        assert yaml.safe_load(data) == {"displayName": "Ana", "tags": []}

    def test_invalid_syntax(self):
        w = new_yaml(Product())
        with pytest.raises(DecodeError) as exc_info:
            w.deserialize(b"name: [unterminated")
        assert isinstance(exc_info.value.cause, yaml.YAMLError)
        assert exc_info.value.format is SerdeType.YAML

    def test_type_mismatch(self):
        w = new_yaml(Product())
        with pytest.raises(DecodeError):
            w.deserialize(b"price: free\n")

    def test_empty_mapping(self):
        w = new_yaml(full_product())
        w.deserialize(b"{}")
        assert w.get() == Product()

    def test_empty_document_is_null(self):
        w = new_yaml(Product())
        with pytest.raises(DecodeError):
            w.deserialize(b"")

    def test_clone_deep_copy(self):
        w = new_yaml(Product(categories=["a", "b"]))
        clone = w.clone(False)
        w.get().categories[0] = "x"

        assert clone.get().categories[0] == "a"
        assert isinstance(clone, YamlWrapper)

    def test_clone_empty(self):
        clone = new_yaml(full_product()).clone(True)
        assert clone.get() == Product()
        assert clone.format is SerdeType.YAML

    def test_implements_protocol(self):
        assert isinstance(new_yaml(Product()), Serializer)


# ──────────────────────────── TOML ────────────────────────────


class TestTomlWrapper:
    def test_round_trip(self):
        data = new(full_product(), SerdeType.TOML).serialize()
        assert tomllib.loads(data.decode("utf-8"))["color"] == "navy"

        target = new(Product(), SerdeType.TOML)
        target.deserialize(data)
        assert target.get() == full_product()

    def test_round_trip_unicode_and_empty_lists(self):
        target = new_toml(Product())
        target.deserialize(new_toml(UNICODE_PRODUCT).serialize())
        assert target.get() == UNICODE_PRODUCT

    def test_invalid_syntax(self):
        w = new_toml(Product())
        with pytest.raises(DecodeError) as exc_info:
            w.deserialize(b'name = "unterminated')
        assert isinstance(exc_info.value.cause, tomllib.TOMLDecodeError)

    def test_type_mismatch(self):
        w = new_toml(Product())
        with pytest.raises(DecodeError):
            w.deserialize(b'price = "free"\n')

    def test_empty_document(self):
        w = new_toml(full_product())
        w.deserialize(b"")
        assert w.get() == Product()

    def test_non_table_top_level(self):
        w = new_toml(["a", "b"])
        with pytest.raises(EncodeError) as exc_info:
            w.serialize()
        assert "must be a table" in str(exc_info.value)
        assert exc_info.value.format is SerdeType.TOML

    def test_none_field_is_not_encodable(self):
        w = new_toml(Listing(title="promo", discount=None))
        with pytest.raises(EncodeError):
            w.serialize()

    def test_optional_field_set(self):
        target = new_toml(Listing())
        target.deserialize(new_toml(Listing(title="promo", discount=0.2)).serialize())
        assert target.get() == Listing(title="promo", discount=0.2)

    def test_clone_deep_copy(self):
        w = new_toml(Product(categories=["a", "b"]))
        clone = w.clone(False)
        w.get().categories[0] = "x"

        assert clone.get().categories[0] == "a"
        assert isinstance(clone, TomlWrapper)

    def test_implements_protocol(self):
        assert isinstance(new_toml(Product()), Serializer)


# ──────────────────────────── Cross-format ────────────────────────────


class TestFormatIndependence:
    @pytest.mark.parametrize("fmt", list(SerdeType))
    def test_same_value_round_trips_in_each_format(self, fmt):
        source = new(full_product(), fmt)
        target = new(Product(), fmt)
        target.deserialize(source.serialize())
        assert target.get() == full_product()
        assert target.format is fmt

    def test_bytes_differ_between_formats(self):
        outputs = {fmt: new(full_product(), fmt).serialize() for fmt in SerdeType}
        assert len(set(outputs.values())) == 3

    def test_yaml_bytes_are_not_json(self):
        data = new_yaml(full_product()).serialize()
        with pytest.raises(json.JSONDecodeError):
            json.loads(data)


# ──────────────────────────── Strict decoding ────────────────────────────


NUMERIC_STRING_PRICE = {
    SerdeType.JSON: b'{"price": "12"}',
    SerdeType.YAML: b'price: "12"\n',
    SerdeType.TOML: b'price = "12"\n',
}


class TestStrictDecoding:
    @pytest.mark.parametrize("fmt", list(SerdeType))
    def test_numeric_string_is_rejected(self, fmt):
        w = new(Product(), fmt)
        with pytest.raises(DecodeError) as exc_info:
            w.deserialize(NUMERIC_STRING_PRICE[fmt])
        assert exc_info.value.format is fmt
        assert w.get() == Product()

    @pytest.mark.parametrize("fmt", list(SerdeType))
    def test_integer_is_accepted_for_float(self, fmt):
        doc = {
            SerdeType.JSON: b'{"price": 12}',
            SerdeType.YAML: b"price: 12\n",
            SerdeType.TOML: b"price = 12\n",
        }[fmt]
        w = new(Product(), fmt)
        w.deserialize(doc)
        assert w.get().price == 12.0

    @pytest.mark.parametrize(
        "fmt, doc",
        [
            (SerdeType.JSON, b"[" * 100000),
            (SerdeType.YAML, b"[" * 100000),
            (SerdeType.TOML, b"x = " + b"[" * 100000),
        ],
    )
    def test_deeply_nested_document(self, fmt, doc):
        w = new(None, fmt)
        with pytest.raises(DecodeError) as exc_info:
            w.deserialize(doc)
        assert exc_info.value.format is fmt

    def test_yaml_null_values_leave_zero_value(self):
        w = new_yaml(full_product())
        w.deserialize(b"name: null\nprice: ~\ncategories: [a]\n")
        assert w.get() == Product(categories=["a"])

    def test_yaml_nan_is_valid_yaml(self):
        data = new_yaml(Product(price=float("nan"))).serialize()
        assert ".nan" in data.decode("utf-8")
