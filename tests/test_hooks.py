"""Tests for generation hooks."""

from dataclasses import replace

import pytest

from gql_polygen.core.hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from gql_polygen.core.ir import EnumDef, InputTypeDef, ObjectTypeDef, SchemaIR, UnionDef


@pytest.fixture
def sample_ir():
    """Create a sample IR schema for testing."""
    return SchemaIR(
        enums=(
            EnumDef(name="Status"),
            EnumDef(name="_Internal"),
        ),
        types=(
            ObjectTypeDef(name="User"),
            ObjectTypeDef(name="_Meta"),
            ObjectTypeDef(name="Product"),
        ),
        inputs=(
            InputTypeDef(name="CreateUserInput"),
            InputTypeDef(name="_DebugInput"),
        ),
        unions=(
            UnionDef(name="SearchResult", members=("User", "Product")),
            UnionDef(name="_Any", members=("_Meta",)),
        ),
    )


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_adds_header(self):
        hook = AddHeaderHook("// Auto-generated")
        result = hook.post_generate("Types.kt", "data class User(val id: String)")
        assert result.startswith("// Auto-generated\n\n")

    def test_preserves_content(self):
        hook = AddHeaderHook("// Header")
        content = "struct User {}"
        result = hook.post_generate("Types.swift", content)
        assert content in result

    def test_handles_header_with_newline(self):
        hook = AddHeaderHook("// Header\n")
        result = hook.post_generate("types.dart", "code")
        # Should not double-up newlines
        assert result == "// Header\n\ncode"


class TestFilterTypesHook:
    """Tests for FilterTypesHook."""

    def test_exclude_prefix(self, sample_ir):
        hook = FilterTypesHook(exclude_prefix="_")
        result = hook.pre_generate(sample_ir)

        type_names = [t.name for t in result.types]
        assert "User" in type_names
        assert "Product" in type_names
        assert "_Meta" not in type_names

    def test_exclude_suffix(self, sample_ir):
        hook = FilterTypesHook(exclude_suffix="Input")
        result = hook.pre_generate(sample_ir)

        assert result.inputs == ()  # All inputs end with "Input"

    def test_include_prefix(self, sample_ir):
        hook = FilterTypesHook(include_prefix="Create")
        result = hook.pre_generate(sample_ir)

        input_names = [i.name for i in result.inputs]
        assert "CreateUserInput" in input_names
        assert "_DebugInput" not in input_names

    def test_filters_enums_and_unions(self, sample_ir):
        hook = FilterTypesHook(exclude_prefix="_")
        result = hook.pre_generate(sample_ir)

        assert [e.name for e in result.enums] == ["Status"]
        assert [u.name for u in result.unions] == ["SearchResult"]

    def test_leaves_input_ir_untouched(self, sample_ir):
        FilterTypesHook(exclude_prefix="_").pre_generate(sample_ir)
        assert len(sample_ir.types) == 3


class TestHookRunner:
    """Tests for HookRunner."""

    def test_run_pre_hooks(self, sample_ir):
        runner = HookRunner()
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))

        result = runner.run_pre_hooks(sample_ir)
        type_names = [t.name for t in result.types]
        assert "_Meta" not in type_names

    def test_run_post_hooks(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// Header"))

        result = runner.run_post_hooks("Types.kt", "code")
        assert result.startswith("// Header")

    def test_multiple_pre_hooks(self, sample_ir):
        runner = HookRunner()
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))

        class DropProductHook:
            def pre_generate(self, schema):
                return replace(
                    schema, types=tuple(t for t in schema.types if t.name != "Product")
                )

        runner.add_pre_hook(DropProductHook())

        result = runner.run_pre_hooks(sample_ir)
        assert [t.name for t in result.types] == ["User"]

    def test_multiple_post_hooks(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// Line 1"))
        runner.add_post_hook(AddHeaderHook("// Line 0"))

        result = runner.run_post_hooks("Types.kt", "code")
        # Second header wraps the first
        assert result.index("// Line 0") < result.index("// Line 1")


class TestProtocolCompliance:
    """Tests for protocol compliance."""

    def test_add_header_is_post_hook(self):
        assert isinstance(AddHeaderHook("header"), PostGenerateHook)

    def test_filter_types_is_pre_hook(self):
        assert isinstance(FilterTypesHook(), PreGenerateHook)

    def test_custom_pre_hook(self):
        class CustomPreHook:
            def pre_generate(self, schema):
                return schema

        assert isinstance(CustomPreHook(), PreGenerateHook)

    def test_custom_post_hook(self):
        class CustomPostHook:
            def post_generate(self, filename, content):
                return content

        assert isinstance(CustomPostHook(), PostGenerateHook)
