"""Tests for WebBinder field marker and field default conventions."""

from dataclasses import dataclass, field

from formbind.binding.results import BindingResultKind
from formbind.binding.web import WebBinder
from formbind.config.settings import BinderSettings


@dataclass
class Preferences:
    newsletter: bool = True
    colours: list[str] = field(default_factory=lambda: ["red"])
    nickname: str | None = "anon"
    theme: str = "light"
    page_size: int = 20


class TestCreateUserValues:
    def test_plain_fields_pass_through(self) -> None:
        values = WebBinder(Preferences()).create_user_values({"theme": "dark"})
        assert values.properties() == ["theme"]
        assert values[0].value == "dark"

    def test_marker_for_absent_field(self) -> None:
        values = WebBinder(Preferences()).create_user_values({"_newsletter": "visible"})
        assert values.properties() == ["newsletter"]
        assert values.get("newsletter").value == ""

    def test_marker_ignored_when_field_present(self) -> None:
        values = WebBinder(Preferences()).create_user_values(
            {"newsletter": "on", "_newsletter": "visible"}
        )
        assert values.properties() == ["newsletter"]
        assert values[0].value == "on"

    def test_default_for_absent_field(self) -> None:
        values = WebBinder(Preferences()).create_user_values({"!theme": "sepia"})
        assert values.get("theme").value == "sepia"

    def test_default_beats_marker(self) -> None:
        values = WebBinder(Preferences()).create_user_values(
            {"_theme": "1", "!theme": "sepia"}
        )
        assert len(values) == 1
        assert values[0].value == "sepia"

    def test_order_is_fields_then_defaults_then_markers(self) -> None:
        values = WebBinder(Preferences()).create_user_values(
            {"_newsletter": "1", "!theme": "sepia", "page_size": "50"}
        )
        assert values.properties() == ["page_size", "theme", "newsletter"]

    def test_custom_prefixes(self) -> None:
        binder = WebBinder(Preferences(), field_marker_prefix="~", field_default_prefix="$")
        values = binder.create_user_values({"~newsletter": "1", "$theme": "dark", "_x": "y"})
        assert values.properties() == ["_x", "theme", "newsletter"]


class TestBind:
    def test_unchecked_checkbox_clears(self) -> None:
        prefs = Preferences()
        binder = WebBinder(prefs)
        results = binder.bind(binder.create_user_values({"_newsletter": "visible"}))
        assert results[0].ok
        assert prefs.newsletter is False

    def test_empty_multi_select_clears(self) -> None:
        prefs = Preferences()
        binder = WebBinder(prefs)
        binder.bind(binder.create_user_values({"_colours": "1"}))
        assert prefs.colours == []

    def test_optional_text_becomes_empty_string(self) -> None:
        prefs = Preferences()
        binder = WebBinder(prefs)
        binder.bind(binder.create_user_values({"_nickname": "1"}))
        assert prefs.nickname == ""

    def test_marker_on_required_number_fails(self) -> None:
        prefs = Preferences()
        binder = WebBinder(prefs)
        results = binder.bind(binder.create_user_values({"_page_size": "1"}))
        assert results[0].kind is BindingResultKind.CONVERSION
        assert prefs.page_size == 20

    def test_default_value_is_converted(self) -> None:
        prefs = Preferences()
        binder = WebBinder(prefs)
        binder.bind(binder.create_user_values({"!page_size": "10"}))
        assert prefs.page_size == 10

    def test_from_settings_uses_prefixes(self) -> None:
        settings = BinderSettings(
            binder={"field_marker_prefix": "__", "field_default_prefix": "def_"}
        )
        binder = WebBinder.from_settings(Preferences(), settings)
        assert isinstance(binder, WebBinder)
        assert binder.field_marker_prefix == "__"
        assert binder.field_default_prefix == "def_"
