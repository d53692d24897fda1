"""Tests for naming, type mapping and platform helpers."""

from dataclasses import dataclass

import pytest

from gql_polygen.core.ir import Platform
from gql_polygen.core.utils import (
    DEFAULT_TYPE_MAPPINGS,
    constant_to_camel_case,
    doc_comment,
    filter_by_platform,
    is_platform_named,
    map_type,
    section_header,
    should_include_for_platform,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)


class TestCaseConversion:
    """Tests for identifier case helpers."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("createdAt", "created_at"),
            ("DeviceInfo", "device_info"),
            ("HTTPRequest", "http_request"),
        ],
    )
    def test_snake_case(self, name, expected):
        assert to_snake_case(name) == expected

    def test_pascal_and_camel(self):
        assert to_pascal_case("device_info") == "DeviceInfo"
        assert to_pascal_case("device-info") == "DeviceInfo"
        assert to_camel_case("DeviceInfo") == "deviceInfo"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("ACTIVE", "active"),
            ("DISABLED_BY_USER", "disabledByUser"),
            ("LEVEL_2", "level2"),
        ],
    )
    def test_constant_to_camel(self, value, expected):
        assert constant_to_camel_case(value) == expected

    def test_section_header(self):
        header = section_header("ENUMS")
        lines = header.split("\n")
        assert lines[1] == "// ENUMS"
        assert lines[0] == lines[2] == "// " + "=" * 44


class TestDocComment:
    """Tests for documentation comment rendering."""

    def test_empty(self):
        assert doc_comment(None) == ""

    def test_kdoc_single_line(self):
        assert doc_comment("A user") == "/** A user */"

    def test_kdoc_multi_line(self):
        assert doc_comment("A user\nof the app", "kdoc") == "/**\n * A user\n * of the app\n */"

    def test_triple_slash_styles(self):
        assert doc_comment("A user\nof the app", "swift") == "/// A user\n/// of the app"
        assert doc_comment("A user", "dartdoc") == "/// A user"


class TestMapType:
    """Tests for scalar and alias mapping."""

    def test_scalars(self):
        assert map_type("Float", DEFAULT_TYPE_MAPPINGS["kotlin"]) == "Double"
        assert map_type("Boolean", DEFAULT_TYPE_MAPPINGS["swift"]) == "Bool"
        assert map_type("Int", DEFAULT_TYPE_MAPPINGS["dart"]) == "int"
        assert map_type("ID", DEFAULT_TYPE_MAPPINGS["swift"]) == "String"

    def test_unknown_passes_through(self):
        assert map_type("Profile", DEFAULT_TYPE_MAPPINGS["kotlin"]) == "Profile"

    def test_alias_applied_before_mapping(self):
        mapping = DEFAULT_TYPE_MAPPINGS["dart"]
        assert map_type("DateTime", mapping, {"DateTime": "String"}) == "String"
        assert map_type("Count", mapping, {"Count": "Int"}) == "int"

    def test_alias_to_custom_type(self):
        assert map_type("JSON", {}, {"JSON": "JsonObject"}) == "JsonObject"


class TestPlatformFilter:
    """Tests for the platform inclusion rule."""

    @pytest.mark.parametrize(
        "item, target, expected",
        [
            (None, None, True),
            (Platform.ANDROID, None, True),
            (None, Platform.IOS, True),
            (Platform.IOS, Platform.IOS, True),
            (Platform.ANDROID, Platform.IOS, False),
            (Platform.WEB, Platform.ANDROID, False),
        ],
    )
    def test_truth_table(self, item, target, expected):
        assert should_include_for_platform(item, target) is expected

    def test_filter_by_platform(self):
        @dataclass
        class Item:
            name: str
            platform: Platform | None

        items = [Item("a", None), Item("b", Platform.ANDROID), Item("c", Platform.IOS)]
        assert [i.name for i in filter_by_platform(items, Platform.ANDROID)] == ["a", "b"]
        assert len(filter_by_platform(items, None)) == 3


class TestPlatformNamed:
    """Tests for the type naming convention."""

    @pytest.mark.parametrize(
        "name, platform",
        [
            ("DeviceInfoAndroid", Platform.ANDROID),
            ("AndroidConfig", Platform.ANDROID),
            ("DeviceInfoIOS", Platform.IOS),
            ("IOSSettings", Platform.IOS),
            ("PushConfigIos", Platform.IOS),
            ("BrowserWeb", Platform.WEB),
            ("WebSession", Platform.WEB),
            ("Android", Platform.ANDROID),
        ],
    )
    def test_platform_named(self, name, platform):
        assert is_platform_named(name, platform)

    @pytest.mark.parametrize(
        "name, platform",
        [
            ("Webhook", Platform.WEB),
            ("BIOS", Platform.IOS),
            ("Profile", Platform.ANDROID),
            ("Cobweb", Platform.WEB),
        ],
    )
    def test_not_platform_named(self, name, platform):
        assert not is_platform_named(name, platform)
