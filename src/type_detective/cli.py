import json
import pathlib
from typing import Any, Optional

import click
from tqdm import tqdm

from type_detective.config import ArrayStyle, IndentType, Mode
from type_detective.detective import TypeDetective


@click.group()
def cli():
    pass


@cli.command()
@click.argument(
    "inputs",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, readable=True),
)
@click.option("--output-file", default=None, help="File to write generated type declaration to, '-' for stdout")
@click.option("--type-name", default="DetectedType", help="Generated type's name")
@click.option(
    "--spread",
    default=False,
    is_flag=True,
    help="If set, each input file is expected to contain a JSON list, and its items are treated as separate samples",
)
@click.option("--mode", type=click.Choice([m.value for m in Mode]), default=None)
@click.option("--indent", type=click.IntRange(min=1), default=None)
@click.option("--indent-type", type=click.Choice([it.value for it in IndentType]), default=None)
@click.option("--array-style", type=click.Choice([s.value for s in ArrayStyle]), default=None)
@click.pass_context
def infer(
    ctx: click.Context,
    inputs: list[str],
    output_file: Optional[str],
    type_name: str,
    spread: bool,
    mode: Optional[str],
    indent: Optional[int],
    indent_type: Optional[str],
    array_style: Optional[str],
) -> None:
    """Infers a TypeScript type from JSON samples

    A single document is typed as is; several documents (or items of --spread files) are typed as an array of samples.
    """
    output_path = pathlib.Path(output_file or type_name + ".ts")
    if output_file != "-" and output_path.exists():
        click.secho(f"File already exists: {output_path.resolve()}", fg="red")
        ctx.exit(1)

    samples: list[Any] = []
    input_paths = [pathlib.Path(input_) for input_ in inputs]
    for input_path in tqdm(input_paths, disable=len(input_paths) < 2):
        try:
            data = json.loads(input_path.read_text())
        except Exception as e:
            click.secho(f"Error parsing data from {input_path}, ignoring: {e!r}", fg="red")
            continue
        if spread:
            if not isinstance(data, list):
                click.secho(f"Expected a JSON list in {input_path}, ignoring", fg="red")
                continue
            samples.extend(data)
        else:
            samples.append(data)

    if not samples:
        click.secho("No samples to infer a type from", fg="red")
        ctx.exit(1)

    options = {"mode": mode, "indent": indent, "indent_type": indent_type, "array_style": array_style}
    detective = TypeDetective(**{name: value for name, value in options.items() if value is not None})
    value = samples[0] if len(samples) == 1 and not spread else samples
    if output_file == "-":
        click.echo(detective.generate_type_definition(value, type_name), nl=False)
    else:
        detective.write_type_definition(output_path, type_name, value)
        click.secho(f"Type definition written to {output_path}", fg="green")
