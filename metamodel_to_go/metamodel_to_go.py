import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import GeneratorConfig, GeneratorError, PipelineGenerator, ScopingMode, load_metamodel


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--templates",
    "-t",
    default=None,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory of render targets (*.jinja2), one output file per template",
)
@click.option("--package", "-p", default=None, type=str, help="Go package name of the generated files")
@click.option("--scoping", default=None, type=click.Choice([m.value for m in ScopingMode]))
@click.option("--no-format", is_flag=True, default=False, help="Do not run gofmt on the output")
@click.option(
    "--keep-going",
    is_flag=True,
    default=False,
    help="Skip render targets that fail instead of aborting the run",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", default=".", type=click.Path(file_okay=False, resolve_path=True))
def metamodel_to_go(config, templates, package, scoping, no_format, keep_going, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            try:
                config = GeneratorConfig.from_dict(json.load(f))
            except (json.JSONDecodeError, TypeError, ValueError) as e:
                raise click.ClickException(f"invalid config file: {e}") from e
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    if package is not None:
        config.package_name = package
    if scoping is not None:
        config.scoping = ScopingMode(scoping)
    if no_format:
        config.formatter.enabled = False
    if keep_going:
        config.strict = False

    try:
        model = load_metamodel(path)
        codegen = PipelineGenerator(
            model,
            config,
            template_dir=Path(templates) if templates else None,
            command_line=reconstruct_command_line(metamodel_to_go),
        )
        report = codegen.generate(Path(output))
    except (GeneratorError, OSError) as e:
        raise click.ClickException(str(e)) from e

    for result in report.results:
        if result.error is not None:
            click.echo(f"{result.name}: error: {result.error}", err=True)
        elif result.warning is not None:
            click.echo(str(result.warning), err=True)
        else:
            click.echo(f"{result.path} ({result.bytes_written} bytes)")

    if not report.ok:
        click.get_current_context().exit(1)
