"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path

import pytest
from mvnpurge.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.header == "#69B9A1"
        assert colors.deleted == "#c1ff62"
        assert colors.pending == "#0e8ac8"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts valid hex color codes."""
        colors = ThemeColors(text="#AABBCC", muted="#abc")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    def test_strips_whitespace(self) -> None:
        """Surrounding whitespace is removed from colors."""
        assert ThemeColors(text="  #123456 ").text == "#123456"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(deleted="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(pending="#gggggg")

    def test_non_string_rejected(self) -> None:
        """ThemeColors rejects non-string values."""
        with pytest.raises(ValueError, match="color must be a string"):
            ThemeColors(text=123)  # type: ignore[arg-type]

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\ndeleted = "#aabbcc"\n')

        result = _load_toml_colors(theme_file)

        assert result == {"text": "#000000", "deleted": "#aabbcc"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_returns_none_for_non_table_colors(self, tmp_path: Path) -> None:
        """Returns None when colors is not a table."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert _load_toml_colors(theme_file) is None

    def test_returns_empty_dict_for_missing_colors_section(self, tmp_path: Path) -> None:
        """Returns empty dict when colors section is missing."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[other]\nkey = "value"\n')

        assert _load_toml_colors(theme_file) == {}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_exists(self) -> None:
        """The bundled theme ships with the package."""
        assert Path(get_bundled_theme_path()).is_file()

    def test_loads_bundled_theme(self) -> None:
        """Loads theme from bundled data file."""
        colors = load_theme()

        assert colors.text == "#ffffff"
        assert colors.deleted == "#c1ff62"

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ndeleted = "#ff0000"\n')

        colors = load_theme(user_theme)

        assert colors.deleted == "#ff0000"
        assert colors.success == "#03b971"

    def test_graceful_fallback_on_invalid_user_theme(self, tmp_path: Path) -> None:
        """Falls back to bundled theme when user theme is invalid TOML."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text("invalid toml [[[")

        colors = load_theme(user_theme)

        assert colors.header == "#69B9A1"

    def test_falls_back_to_defaults_on_bad_color(self, tmp_path: Path) -> None:
        """An invalid color value falls back to the default palette."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nerror = "red"\n')

        colors = load_theme(user_theme)

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_returns_rich_theme(self) -> None:
        """Returns a Rich Theme instance."""
        assert isinstance(get_rich_theme(), Theme)

    def test_includes_styles(self) -> None:
        """Theme includes base, semantic and sweep styles."""
        theme = get_rich_theme(ThemeColors())

        for name in ("text", "muted", "header", "success", "warning", "error", "info"):
            assert name in theme.styles
        assert "deleted" in theme.styles
        assert "pending" in theme.styles
        assert "bold_header" in theme.styles
        assert "dim" in theme.styles

    def test_derived_styles_follow_palette(self) -> None:
        """Derived styles take their color from the palette entry they extend."""
        theme = get_rich_theme(ThemeColors(header="#112233", muted="#445566"))

        assert theme.styles["bold_header"].bold is True
        assert theme.styles["bold_header"].color.name == "#112233"
        assert not theme.styles["dim"].bold
        assert theme.styles["dim"].color.name == "#445566"
        assert theme.styles["error"].bold is True


class TestGetTheme:
    """Tests for get_theme caching function."""

    def test_caches_theme(self) -> None:
        """get_theme returns cached instance on subsequent calls."""
        get_theme.cache_clear()

        theme1 = get_theme()
        theme2 = get_theme()

        assert isinstance(theme1, Theme)
        assert theme1 is theme2
