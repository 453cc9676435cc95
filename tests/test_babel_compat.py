"""Tests for babel_compat module - centralized Babel dependency handling."""

import pytest

from droidstrings.core import babel_compat
from droidstrings.core.babel_compat import (
    BabelImportError,
    get_unknown_locale_error,
    require_babel,
)
from droidstrings.locale_utils import get_babel_locale, normalize_locale


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_require_babel_when_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """require_babel raises BabelImportError naming the feature."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(BabelImportError, match="plural check"):
            require_babel("plural check")

    def test_require_babel_when_available(self) -> None:
        pytest.importorskip("babel")
        require_babel("plural check")


class TestBabelImportError:
    """Test BabelImportError exception class."""

    def test_message_includes_install_instructions(self) -> None:
        error = BabelImportError("test_feature")
        assert "pip install droidstrings[babel]" in str(error)

    def test_stores_feature(self) -> None:
        assert BabelImportError("my_feature").feature == "my_feature"

    def test_is_import_error(self) -> None:
        assert isinstance(BabelImportError("x"), ImportError)


class TestLocaleHelpers:
    """Locale normalization and Babel lookup."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [("pt-BR", "pt_BR"), ("en", "en"), (" zh-Hant-TW ", "zh_Hant_TW")],
    )
    def test_normalize_locale(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected

    def test_get_unknown_locale_error(self) -> None:
        pytest.importorskip("babel")
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        assert get_unknown_locale_error() is UnknownLocaleError

    def test_get_babel_locale_is_cached(self) -> None:
        pytest.importorskip("babel")
        locale = get_babel_locale("pt-BR")
        assert str(locale) == "pt_BR"
        assert get_babel_locale("pt-BR") is locale
