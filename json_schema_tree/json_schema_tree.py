import json
import logging

import click

from .config import ParserConfig
from .document import SchemaDocument
from .errors import SchemaError
from .render import render_tree


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True))
@click.option("--show-refs", is_flag=True, default=False, help="Show the reference in scope for each node")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log document fetches and $ref resolution")
@click.argument("reference", type=str)
def json_schema_tree(config, output, show_refs, verbose, reference):
    """Parse the schema at REFERENCE (a path or URL) and print its tree."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = ParserConfig.from_dict(json.load(f))
    else:
        config = ParserConfig()

    try:
        document = SchemaDocument(reference, config=config)
    except SchemaError as e:
        raise click.ClickException(str(e)) from e

    out = render_tree(document.root_schema, show_refs=show_refs)
    if output is None:
        click.echo(out)
    else:
        with open(output, "w") as f:
            f.write(out)
