"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
secret masking in ``repr`` and the merged shape record.
"""

from __future__ import annotations

import dataclasses

import pytest

from crystallize_setup.core.models import (
    Credentials,
    SelectedShape,
    Settings,
    Shape,
    ShapeComponent,
)


def _shape(**overrides: object) -> Shape:
    defaults: dict[str, object] = {
        "id": "shape-1",
        "type": "product",
        "name": "Chair",
        "components": (ShapeComponent(id="description", type="richText"),),
    }
    defaults.update(overrides)
    return Shape(**defaults)  # type: ignore[arg-type]


class TestCredentials:
    def test_complete_has_no_missing_fields(self) -> None:
        assert Credentials("id", "secret").missing_fields() == ()

    def test_each_field_checked_independently(self) -> None:
        assert Credentials("id", "").missing_fields() == ("token secret",)
        assert Credentials("", "secret").missing_fields() == ("token id",)
        assert Credentials("", "").missing_fields() == ("token id", "token secret")

    def test_secret_not_in_repr(self) -> None:
        assert "hunter2" not in repr(Credentials("id", "hunter2"))

    def test_frozen(self) -> None:
        creds = Credentials("id", "secret")
        with pytest.raises(dataclasses.FrozenInstanceError):
            creds.token_id = "other"  # type: ignore[misc]


class TestSettings:
    def test_defaults_are_none(self) -> None:
        settings = Settings()
        assert settings.tenant_identifier is None
        assert settings.token_id is None
        assert settings.token_secret is None
        assert settings.api_url is None

    def test_secret_not_in_repr(self) -> None:
        assert "hunter2" not in repr(Settings(token_secret="hunter2"))


class TestSelectedShape:
    def test_shape_id_matches_shape(self) -> None:
        selected = SelectedShape(shape=_shape(id="abc"), root_item_id="root")
        assert selected.shape_id == "abc"

    def test_as_dict_merges_shape_and_root_item(self) -> None:
        selected = SelectedShape(shape=_shape(), root_item_id="root-1")
        assert selected.as_dict() == {
            "shapeId": "shape-1",
            "id": "shape-1",
            "type": "product",
            "name": "Chair",
            "components": [{"id": "description", "type": "richText"}],
            "rootItemId": "root-1",
        }

    def test_shape_without_components(self) -> None:
        assert _shape(components=()).as_dict()["components"] == []
