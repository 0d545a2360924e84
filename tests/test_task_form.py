"""
Tests for task form validation and translations.
"""

import pytest

from taskglitch.i18n import get_language, set_language, tr
from taskglitch.i18n.translations import TRANSLATIONS
from taskglitch.ui.task_dialogs import title_markup, validate_title

EXISTING = ["Product demo", "Renewal call"]


class TestValidateTitle:

    @pytest.mark.parametrize("title", ["", "   "])
    def test_title_is_required(self, title):
        assert validate_title(title, EXISTING) == "form.error_title_required"

    def test_duplicate_is_rejected_ignoring_case(self):
        assert validate_title(" product DEMO ", EXISTING) == "form.error_title_duplicate"

    def test_new_title_is_accepted(self):
        assert validate_title("Pricing review", EXISTING) is None

    def test_edited_task_may_keep_its_title(self):
        assert validate_title("Product demo", EXISTING, current_title="Product demo") is None

    def test_edited_task_may_not_take_another_title(self):
        result = validate_title("Renewal call", EXISTING, current_title="Product demo")
        assert result == "form.error_title_duplicate"


def test_title_markup_escapes_rich_text():
    assert title_markup("Q3 <draft> & co") == "<b>Q3 &lt;draft&gt; &amp; co</b>"


class TestTranslations:

    def test_languages_have_the_same_keys(self):
        assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["de"])

    def test_tr_formats_and_falls_back_to_key(self):
        previous = get_language()
        try:
            set_language("de")
            assert tr("app.welcome", name="Dana") == "Willkommen, Dana."
            assert tr("no.such.key") == "no.such.key"
        finally:
            set_language(previous)

    def test_unknown_language_falls_back_to_english(self):
        previous = get_language()
        try:
            set_language("fr")
            assert get_language() == "en"
        finally:
            set_language(previous)
