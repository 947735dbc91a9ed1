import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.core.locale_context import locale_scope
from app.services import lookup_service


def test_translate_returns_value(session, add_translation):
    add_translation("common", "hello", "fr", "Bonjour")

    assert lookup_service.translate(session, "common", "hello", "fr") == "Bonjour"


def test_translate_falls_back_to_key(session, add_translation):
    add_translation("common", "hello", "en", "Hello")

    assert lookup_service.translate(session, "common", "hello", "fr") == "hello"
    assert lookup_service.translate(session, "common", "missing", "en") == "missing"


def test_translate_empty_value_falls_back_to_key(session, add_translation):
    add_translation("common", "hello", "en", "")

    assert lookup_service.translate(session, "common", "hello", "en") == "hello"


def test_translate_uses_request_locale(session, add_translation):
    add_translation("common", "hello", "en", "Hello")
    add_translation("common", "hello", "de", "Hallo")

    assert lookup_service.translate(session, "common", "hello") == "Hello"
    with locale_scope("de"):
        assert lookup_service.translate(session, "common", "hello") == "Hallo"


@pytest.mark.parametrize("group, key", [("", "hello"), ("common", ""), ("  ", "hello")])
def test_translate_requires_group_and_key(session, group, key):
    with pytest.raises(ValidationError):
        lookup_service.translate(session, group, key, "en")


def test_translate_group_key_matches_value_case_insensitively(session, add_translation):
    add_translation("status", "active", "en", "Currently Active")
    add_translation("status", "active", "fr", "Actif")

    found = lookup_service.translate_group_key(session, "status", "currently active", "en")

    assert found is not None
    assert found.key == "active"
    assert lookup_service.translate_group_key(session, "status", "inactive", "en") is None
    assert lookup_service.translate_group_key(session, "status", "Currently", "fr") is None


def test_translate_group_key_treats_pattern_literally(session, add_translation):
    add_translation("status", "done", "en", "Done")

    assert lookup_service.translate_group_key(session, "status", "D%", "en") is None


def test_application_bundle(session, add_translation):
    add_translation("common", "hello", "fr", "Bonjour")
    add_translation("menu", "save", "fr", "Enregistrer")
    add_translation("menu", "save", "en", "Save")

    rows = lookup_service.translate_application_bundle(session, "fr")

    assert len(rows) == 2
    assert lookup_service.build_bundle(rows) == {
        "common": {"hello": "Bonjour"},
        "menu": {"save": "Enregistrer"},
    }


def test_application_bundle_for_unseeded_locale(session, add_translation):
    add_translation("common", "hello", "en", "Hello")

    with pytest.raises(NotFoundError):
        lookup_service.translate_application_bundle(session, "ja")
    with pytest.raises(ValidationError):
        lookup_service.translate_application_bundle(session, "")
