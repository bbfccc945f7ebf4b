#!/usr/bin/env python3

import collections

import click

from templategen.errors import TemplateGenError
from templategen import utils

Params = collections.namedtuple("Params", ["input", "output"])


def parse_args(paths):
	if len(paths) == 1:
		return Params(input=paths[0], output=utils.make_output_path(paths[0]))
	elif len(paths) == 2:
		return Params(input=paths[0], output=paths[1])
	else:
		raise click.UsageError(f"invalid number of arguments: expected 1 or 2, got {len(paths)}")


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("paths", nargs=-1, metavar="INPUT [OUTPUT]")
def main(paths):
	"""
	Renders markdown document with YAML metadata block into an HTML page.

	When OUTPUT is omitted, the page is written to the current directory
	under INPUT base name with .html suffix appended.
	"""
	params = parse_args(paths)
	try:
		utils.generate(params.input, params.output)
	except (OSError, TemplateGenError) as ex:
		raise click.ClickException(str(ex)) from ex


if __name__ == "__main__":
	main()
