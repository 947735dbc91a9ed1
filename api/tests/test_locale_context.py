import asyncio

from app.core import locale_context
from app.core.locale_context import get_locale, locale_scope, normalize_locale, reset_locale, set_locale


def test_default_locale_when_unset():
    assert get_locale() == "en"


def test_set_and_reset_locale():
    token = set_locale("fr")
    try:
        assert get_locale() == "fr"
    finally:
        reset_locale(token)

    assert get_locale() == "en"


def test_locale_scope_restores_previous_value():
    with locale_scope("de"):
        with locale_scope("fr") as inner:
            assert inner == "fr"
        assert get_locale() == "de"
    assert get_locale() == "en"


def test_normalize_locale():
    assert normalize_locale("en-US") == "en"
    assert normalize_locale(" FR_ca ") == "fr"
    assert normalize_locale("") == "en"
    assert normalize_locale(None) == "en"
    assert normalize_locale("1x") == "en"
    assert normalize_locale("??", default="de") == "de"


def test_get_locale_never_raises(monkeypatch):
    class BrokenVar:
        def get(self):
            raise RuntimeError("context unavailable")

    monkeypatch.setattr(locale_context, "_current_locale", BrokenVar())

    assert get_locale() == "en"


def test_concurrent_tasks_do_not_share_locale():
    async def handle(locale, results):
        set_locale(locale)
        await asyncio.sleep(0.01)
        results[locale] = get_locale()

    async def main():
        results = {}
        await asyncio.gather(*(handle(code, results) for code in ("fr", "de", "es")))
        return results

    results = asyncio.run(main())

    assert results == {"fr": "fr", "de": "de", "es": "es"}
    assert get_locale() == "en"

