"""Extension points around emitter runs.

A pre-generate hook sees the SchemaIR once, before any backend renders, and
hands back the IR the backends should use. A post-generate hook sees each
backend's rendered text, keyed by its output path, and hands back the text
to write.

    from dataclasses import replace

    class DropPrivateTypes:
        def pre_generate(self, schema):
            kept = tuple(t for t in schema.types if not t.name.startswith("_"))
            return replace(schema, types=kept)

    hooks = HookRunner()
    hooks.add_pre_hook(DropPrivateTypes())
    hooks.add_post_hook(AddHeaderHook("// Copyright Example Inc."))
"""

from dataclasses import replace
from typing import Protocol, runtime_checkable

from .ir import SchemaIR


@runtime_checkable
class PreGenerateHook(Protocol):
    """Rewrites the IR before emission.

    SchemaIR is frozen; return a rebuilt copy (``dataclasses.replace``).
    """

    def pre_generate(self, schema: SchemaIR) -> SchemaIR:
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Rewrites one backend's rendered source before it is written."""

    def post_generate(self, filename: str, content: str) -> str:
        ...


class AddHeaderHook:
    """Prepend a fixed banner, separated from the code by one blank line."""

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        separator = "\n" if self.header.endswith("\n") else "\n\n"
        return self.header + separator + content


class FilterTypesHook:
    """Keep or drop enums, object types, inputs and unions by name affix.

    Exclusions win over inclusions. Operations are left alone.

        FilterTypesHook(exclude_prefix="_")
        FilterTypesHook(include_suffix="Input")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def keeps(self, name: str) -> bool:
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, schema: SchemaIR) -> SchemaIR:
        return replace(
            schema,
            enums=tuple(e for e in schema.enums if self.keeps(e.name)),
            types=tuple(t for t in schema.types if self.keeps(t.name)),
            inputs=tuple(i for i in schema.inputs if self.keeps(i.name)),
            unions=tuple(u for u in schema.unions if self.keeps(u.name)),
        )


class HookRunner:
    """Ordered pre and post hook chains; each hook gets the previous output."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, schema: SchemaIR) -> SchemaIR:
        for hook in self.pre_hooks:
            schema = hook.pre_generate(schema)
        return schema

    def run_post_hooks(self, filename: str, content: str) -> str:
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
