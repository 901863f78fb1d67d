"""Unit tests for JSON decoding."""

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from apitemplate.client.decoder import DecodeOptions, JsonDecoder


class Item(BaseModel):
    """Sample result type."""

    id: int
    name: str


class StrictItem(BaseModel):
    """Result type that opts into strict validation."""

    model_config = ConfigDict(strict=True)

    id: int


class TestJsonDecoder:
    """Tests for JsonDecoder."""

    def test_decodes_model(self) -> None:
        """JSON objects decode into models."""
        decoder: JsonDecoder[Item] = JsonDecoder(Item)
        assert decoder.decode(b'{"id": 1, "name": "a"}') == Item(id=1, name="a")

    def test_decodes_list(self) -> None:
        """Generic annotations are supported."""
        decoder: JsonDecoder[list[Item]] = JsonDecoder(list[Item])
        result = decoder.decode(b'[{"id": 1, "name": "a"}, {"id": 2, "name": "b"}]')
        assert [item.id for item in result] == [1, 2]

    def test_lax_by_default(self) -> None:
        """Coercion is allowed unless strict."""
        decoder: JsonDecoder[Item] = JsonDecoder(Item)
        assert decoder.decode(b'{"id": "1", "name": "a"}').id == 1

    def test_strict_option(self) -> None:
        """Per-call strict option disables coercion."""
        decoder: JsonDecoder[Item] = JsonDecoder(Item)
        with pytest.raises(ValidationError):
            decoder.decode(b'{"id": "1", "name": "a"}', DecodeOptions(strict=True))

    def test_strict_default_overridden(self) -> None:
        """Options override the decoder's default strictness."""
        decoder: JsonDecoder[Item] = JsonDecoder(Item, strict=True)
        result = decoder.decode(b'{"id": "1", "name": "a"}', DecodeOptions(strict=False))
        assert result.id == 1

    def test_malformed_json_raises(self) -> None:
        """Invalid JSON propagates as a validation error."""
        decoder: JsonDecoder[Item] = JsonDecoder(Item)
        with pytest.raises(ValidationError):
            decoder.decode(b"{not json")

    def test_model_strict_config_respected(self) -> None:
        """Without an explicit strictness the model's own config applies."""
        decoder: JsonDecoder[StrictItem] = JsonDecoder(StrictItem)
        with pytest.raises(ValidationError):
            decoder.decode(b'{"id": "7"}')

    def test_explicit_lax_overrides_model(self) -> None:
        """strict=False deliberately relaxes a strict model."""
        decoder: JsonDecoder[StrictItem] = JsonDecoder(StrictItem, strict=False)
        assert decoder.decode(b'{"id": "7"}').id == 7
