import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.services import combination_service, translation_service


def test_get_combination_lists_every_known_language(session, languages, add_translation):
    add_translation("common", "hello", "fr", "Bonjour")
    add_translation("common", "hello", "en", "Hello")

    combination = combination_service.get_combination(session, "common", "hello")

    assert combination == [{"en": "Hello"}, {"fr": "Bonjour"}, {"de": ""}]


def test_get_combination_without_rows(session, languages):
    assert combination_service.get_combination(session, "common", "nothing") == [
        {"en": ""}, {"fr": ""}, {"de": ""}
    ]


def test_get_combination_ignores_rows_for_unknown_languages(session, languages, add_translation):
    add_translation("common", "hello", "ja", "Konnichiwa")

    combination = combination_service.get_combination(session, "common", "hello")

    assert [list(entry) for entry in combination] == [["en"], ["fr"], ["de"]]


def test_update_combination_writes_and_deletes(session, languages, add_translation):
    add_translation("common", "hello", "fr", "Salut")
    add_translation("common", "hello", "de", "Hallo")

    result = combination_service.update_combination(
        session, "common", "hello", {"en": "Hello", "fr": "", "de": "Guten Tag", "es": None}
    )

    assert result.ok
    assert result.updated == ["en", "de"]
    assert result.deleted == ["fr"]
    assert result.unchanged == ["es"]
    assert translation_service.find_translation(session, "common", "hello", "en").value == "Hello"
    assert translation_service.find_translation(session, "common", "hello", "fr") is None
    assert translation_service.find_translation(session, "common", "hello", "de").value == "Guten Tag"


def test_update_combination_is_best_effort(session, languages):
    result = combination_service.update_combination(
        session, "common", "hello", {"en": "Hello", "EN!": "Broken", "fr": "Bonjour"}
    )

    assert not result.ok
    assert list(result.failed) == ["EN!"]
    assert result.updated == ["en", "fr"]
    assert translation_service.count_translations(session, group="common", key="hello") == 2


def test_update_combination_requires_group_and_key(session):
    with pytest.raises(ValidationError):
        combination_service.update_combination(session, "", "hello", {"en": "Hello"})


def test_delete_combination(session, add_translation):
    add_translation("common", "hello", "en")
    add_translation("common", "hello", "fr")
    add_translation("common", "bye", "en")

    assert combination_service.delete_combination(session, "common", "hello") == 2
    assert translation_service.count_translations(session) == 1


def test_delete_missing_combination_not_found(session):
    with pytest.raises(NotFoundError) as exc_info:
        combination_service.delete_combination(session, "g", "missing-key")

    assert exc_info.value.value == "g.missing-key"


@pytest.mark.parametrize("group, key", [("ab", "hello"), ("common", "hi"), ("g" * 51, "hello")])
def test_update_combination_rejects_out_of_bounds_group_or_key(session, group, key):
    with pytest.raises(ValidationError):
        combination_service.update_combination(session, group, key, {"en": "Hello", "fr": "Salut"})

    assert translation_service.count_translations(session) == 0


def test_update_combination_reports_invalid_code_for_empty_value(session):
    result = combination_service.update_combination(session, "common", "hello", {"EN!": "", "fr": None})

    assert list(result.failed) == ["EN!"]
    assert result.unchanged == ["fr"]
