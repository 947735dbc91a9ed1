import pytest

from app.core.exceptions import ValidationError
from app.services import language_service, listing_service


def test_pages_do_not_overlap(session, add_translation):
    add_translation("ggg", "key2", "en")
    add_translation("ggg", "key1", "en")

    first, total = listing_service.list_translations(session, take=1, skip=0)
    second, total_again = listing_service.list_translations(session, take=1, skip=1)

    assert total == total_again == 2
    assert [(r.group, r.key) for r in first] == [("ggg", "key1")]
    assert [(r.group, r.key) for r in second] == [("ggg", "key2")]


def test_records_group_languages_per_pair(session, add_translation):
    add_translation("menu", "save", "fr")
    add_translation("common", "hello", "fr")
    add_translation("common", "hello", "en")
    add_translation("common", "hello", "de")

    records, total = listing_service.list_translations(session, take=10, skip=0)

    assert total == 2
    assert [(r.group, r.key, r.languages) for r in records] == [
        ("common", "hello", ["de", "en", "fr"]),
        ("menu", "save", ["fr"]),
    ]


def test_search_matches_group_or_key(session, add_translation):
    add_translation("common", "hello", "en")
    add_translation("common", "hello", "fr")
    add_translation("menu", "save", "en")
    add_translation("settings", "menu_title", "en")

    records, total = listing_service.list_translations(session, take=10, skip=0, search="MENU")

    assert total == 2
    assert [(r.group, r.key) for r in records] == [("menu", "save"), ("settings", "menu_title")]


def test_page_past_the_end_is_empty(session, add_translation):
    add_translation("common", "hello", "en")

    records, total = listing_service.list_translations(session, take=5, skip=5)

    assert records == []
    assert total == 1


@pytest.mark.parametrize("take, skip", [(0, 0), (-1, 0), (5, -1)])
def test_rejects_bad_pagination(session, take, skip):
    with pytest.raises(ValidationError):
        listing_service.list_translations(session, take=take, skip=skip)


def test_translation_stats(session, add_translation):
    add_translation("common", "hello", "en")
    add_translation("common", "hello", "fr")
    add_translation("common", "bye", "en")
    add_translation("menu", "save", "en")

    stats = listing_service.get_translation_stats(session)

    assert stats.total_translations == 4
    assert stats.total_groups == 2
    assert stats.total_keys == 3
    assert stats.language_distribution == {"en": 3, "fr": 1}


def test_orphaned_language_codes(session, languages, add_translation):
    add_translation("common", "hello", "en")
    add_translation("common", "hello", "ja")
    assert listing_service.list_orphaned_language_codes(session) == ["ja"]

    language_service.delete_language(session, languages[1].id)
    add_translation("common", "bye", "fr")

    assert listing_service.list_orphaned_language_codes(session) == ["fr", "ja"]
