"""Command-line interface for gql-polygen."""

import logging
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

import click

from .core.errors import CodegenError
from .core.parser import filter_parsed_files, parse_schema_files
from .core.pipeline import PluginRun, generate_from_ir, load_config
from .core.pipeline import generate as run_pipeline
from .core.plugins import available_plugins, get_plugin
from .core.transformer import transform_to_ir


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    if archive_path.suffix == ".zip":
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif archive_path.name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            try:
                # Members resolving outside temp_dir are rejected
                tar_ref.extractall(temp_dir, filter="data")
            except tarfile.FilterError:
                shutil.rmtree(temp_dir)
                raise
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


def _parse_pairs(ctx, param, values) -> dict[str, str]:
    """Parse repeated NAME=VALUE options into a dict."""
    pairs = {}
    for value in values:
        name, sep, target = value.partition("=")
        if not sep or not name or not target:
            raise click.BadParameter(f"expected NAME=VALUE, got {value!r}", ctx=ctx, param=param)
        pairs[name] = target
    return pairs


def _write(path: Path, code: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(code)


@click.group()
@click.version_option(package_name="gql-polygen")
def main():
    """Multi-target GraphQL code generator.

    Generate Kotlin, Swift and Dart types from GraphQL schemas.
    """
    pass


@main.command()
def targets():
    """List the available backends."""
    for name in available_plugins():
        plugin = get_plugin(name)
        filename = getattr(plugin, "default_filename", "")
        click.echo(f"{name:<10} {plugin.language:<10} {filename}")


@main.command()
@click.option(
    "--schema",
    "-s",
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, or archive (.zip, .tar.gz, .tgz).",
)
@click.option(
    "--output-dir",
    "-o",
    default="generated",
    show_default=True,
    type=click.Path(),
    help="Directory the backend files are written to.",
)
@click.option(
    "--target",
    "-t",
    "target_names",
    multiple=True,
    help="Backend to run (repeatable). Runs all backends when omitted.",
)
@click.option(
    "--package-name",
    default="generated",
    show_default=True,
    help="Package/module name for module-scoped backends (Kotlin).",
)
@click.option(
    "--type-alias",
    multiple=True,
    callback=_parse_pairs,
    help="Substitute a type name before mapping, as NAME=TARGET (repeatable).",
)
@click.option(
    "--type-mapping",
    multiple=True,
    callback=_parse_pairs,
    help="Override a scalar mapping, as SCALAR=NATIVE (repeatable).",
)
@click.option("--no-resolvers", is_flag=True, help="Skip resolver interfaces.")
@click.option("--no-constructors", is_flag=True, help="Skip constructors/initializers.")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON run configuration; replaces the other options.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str | None,
    output_dir: str,
    target_names: tuple[str, ...],
    package_name: str,
    type_alias: dict[str, str],
    type_mapping: dict[str, str],
    no_resolvers: bool,
    no_constructors: bool,
    config_file: str | None,
    verbose: bool,
):
    """Generate typed sources from GraphQL schema.

    Examples:

        gql-polygen generate --schema ./schema --output-dir ./generated

        gql-polygen generate -s ./schema -t kotlin -t swift --package-name com.example

        gql-polygen generate -s ./schema.tgz -o ./generated

        gql-polygen generate --config ./codegen.json
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        if config_file:
            _generate_from_config(config_file, verbose)
            return
        if not schema:
            raise click.UsageError("Either --schema or --config is required.")
        _generate_targets(
            schema=schema,
            output_dir=output_dir,
            target_names=target_names,
            plugin_options={
                "package_name": package_name,
                "type_aliases": type_alias,
                "type_mapping": type_mapping,
                "generate_resolvers": not no_resolvers,
                "generate_constructors": not no_constructors,
            },
            verbose=verbose,
        )
    except CodegenError as e:
        raise click.ClickException(str(e)) from e


def _generate_targets(
    schema: str,
    output_dir: str,
    target_names: tuple[str, ...],
    plugin_options: dict,
    verbose: bool,
):
    # Resolve every backend before touching the filesystem
    plugins = [get_plugin(name) for name in (target_names or available_plugins())]

    schema_path = Path(schema).resolve()
    output_path = Path(output_dir).resolve()
    temp_dir = None

    try:
        # Handle archives
        actual_schema_path = schema_path
        if schema_path.is_file() and schema_path.name.lower().endswith(
            (".zip", ".tar.gz", ".tgz")
        ):
            click.echo(f"Extracting archive {schema_path.name}...")
            temp_dir = extract_archive(schema_path)
            actual_schema_path = Path(temp_dir)
            if verbose:
                click.echo(f"  Extracted to: {temp_dir}")

        if verbose:
            click.echo(f"Schema: {actual_schema_path}")
            click.echo(f"Output: {output_path}")

        # Parse once, then let each backend drop the files it excludes
        click.echo("Parsing schema...")
        # Archives usually wrap the schema in a top-level folder
        parsed = parse_schema_files(str(actual_schema_path), recursive=temp_dir is not None)
        click.echo(f"Parsed {len(parsed)} GraphQL files")

        failures = []
        for plugin in plugins:
            click.echo(f"\nGenerating {plugin.language} types...")
            files = filter_parsed_files(parsed, getattr(plugin, "default_exclude_patterns", ()))
            ir = transform_to_ir(files)

            if verbose:
                click.echo(f"  Enums: {len(ir.enums)}")
                click.echo(f"  Types: {len(ir.types)}")
                click.echo(f"  Inputs: {len(ir.inputs)}")
                click.echo(f"  Unions: {len(ir.unions)}")
                click.echo(f"  Queries: {len(ir.queries)}")
                click.echo(f"  Mutations: {len(ir.mutations)}")
                click.echo(f"  Subscriptions: {len(ir.subscriptions)}")

            target_file = output_path / getattr(plugin, "default_filename", plugin.name)
            run = PluginRun(
                plugin=plugin.name,
                config={"output_path": str(target_file), **plugin_options},
            )
            (result,) = generate_from_ir(ir, [run])
            if not result.ok:
                click.echo(f"  Failed: {result.error}", err=True)
                failures.append(plugin.name)
                continue
            _write(target_file, result.code)
            click.echo(f"  Generated: {target_file}")
    finally:
        # Clean up temp directory
        if temp_dir:
            shutil.rmtree(temp_dir)

    if failures:
        raise click.ClickException(f"Generation failed for: {', '.join(failures)}")
    click.echo("\nDone!")


def _generate_from_config(config_file: str, verbose: bool):
    config = load_config(config_file)
    if verbose:
        click.echo(f"Schema: {config.schema_dir}")
        click.echo(f"Backends: {', '.join(run.plugin for run in config.plugins)}")

    click.echo("Generating...")
    results = run_pipeline(config)

    failures = []
    for result in results:
        if not result.ok:
            click.echo(f"  {result.plugin} failed: {result.error}", err=True)
            failures.append(result.plugin)
            continue
        _write(Path(result.output_path), result.code)
        click.echo(f"  Generated: {result.output_path}")

    if failures:
        raise click.ClickException(f"Generation failed for: {', '.join(failures)}")
    click.echo("Done!")


if __name__ == "__main__":
    main()
