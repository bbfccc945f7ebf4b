import codecs
import logging
import os
import os.path
import tempfile

from templategen.config import config
from templategen import article
from templategen import markdown as md
from templategen import template
from templategen.errors import RenderError


def read_file(path):
	with open(path, "rb") as input_file:
		data = input_file.read()
	#trimming utf-8 byte order mark
	if data.startswith(codecs.BOM_UTF8):
		return data[len(codecs.BOM_UTF8):]
	return data


def current_umask():
	umask = os.umask(0)
	os.umask(umask)
	return umask


def write_file_atomic(path, data):
	"""
	Writes data to a temporary file next to path, then moves it into place.
	The target is left untouched if anything fails
	"""
	dirname = os.path.dirname(os.path.abspath(path))
	fd, tmp_path = tempfile.mkstemp(
		dir=dirname,
		prefix=f".{os.path.basename(path)}.",
		suffix=".tmp"
	)
	try:
		with os.fdopen(fd, "wb") as output_file:
			output_file.write(data)
		#mkstemp creates files readable by owner only
		os.chmod(tmp_path, 0o666 & ~current_umask())
		os.replace(tmp_path, path)
	except BaseException:
		os.unlink(tmp_path)
		raise


def make_output_path(input_path):
	"""
	Derives output path from input file name,
	placing the result into current directory
	"""
	return os.path.basename(input_path) + config.output.suffix


def build_html(data, renderer=None):
	"""
	Converts raw document bytes into the final page bytes
	"""
	if renderer is None:
		renderer = md.make_article_renderer()
	parsed = article.parse_article(data, renderer)
	logging.debug(f"Parsed article {parsed.title!r} by {parsed.author!r}")
	page = template.render_article(parsed)
	try:
		return page.encode(config.output.encoding)
	except UnicodeEncodeError as ex:
		raise RenderError(f"Page can not be encoded as {config.output.encoding}: {ex}") from ex


def generate(input_path, output_path):
	data = read_file(input_path)
	output = build_html(data)
	write_file_atomic(output_path, output)
	logging.info(f"Written {len(output)} bytes to {output_path}")
