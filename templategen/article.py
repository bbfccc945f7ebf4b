import collections
import datetime
import logging

import markupsafe
import yaml

from templategen.config import config
from templategen import const
from templategen.errors import FormatError, MetadataError, MissingDelimiterError


Metadata = collections.namedtuple("Metadata", ["title", "author"])

#Fully built document record.
#content holds markup rendered from the markdown body
Article = collections.namedtuple("Article", ["title", "author", "content"])

SCALAR_TYPES = (str, int, float, bool, datetime.date)


def split_document(data):
	"""
	Splits raw document into (metadata, body) byte strings.

	Metadata is everything strictly between the first two delimiters,
	body is everything after the second one.
	Text preceding the first delimiter is dropped.
	"""
	delimiter = const.METADATA_DELIMITER
	start = data.find(delimiter)
	if start == -1:
		raise MissingDelimiterError("yaml separator not found")
	metadata_start = start + len(delimiter)
	end = data.find(delimiter, metadata_start)
	if end == -1:
		raise MissingDelimiterError("closing yaml separator not found")
	return (data[metadata_start:end], data[end + len(delimiter):])


def _to_text(key, value):
	if value is None:
		return ""
	if not isinstance(value, SCALAR_TYPES):
		raise MetadataError(f"Metadata field {key!r} should be a text value, got {type(value).__name__}")
	return str(value)


def parse_metadata(raw):
	"""
	Decodes YAML metadata block into Metadata.

	Unknown keys are ignored, missing keys are left empty
	unless listed in config.metadata.required_fields
	"""
	if isinstance(raw, bytes):
		try:
			raw = raw.decode("utf-8")
		except UnicodeDecodeError as ex:
			raise MetadataError(f"Metadata block is not valid UTF-8: {ex}") from ex
	try:
		parsed = yaml.safe_load(raw)
	except yaml.YAMLError as ex:
		raise MetadataError(f"Failed to parse metadata block: {ex}") from ex

	if parsed is None:
		#empty or comment-only block
		parsed = {}
	if not isinstance(parsed, dict):
		raise MetadataError(f"Metadata block should be a mapping, got {type(parsed).__name__}")

	fields = {}
	for key in const.METADATA_KEYS:
		value = _to_text(key, parsed.get(key))
		if not value:
			if key in config.metadata.required_fields:
				raise MetadataError(f"Required metadata field {key!r} is missing")
			logging.warning(f"Metadata field {key!r} is missing, leaving it empty")
		fields[key] = value
	return Metadata(**fields)


def parse_article(data, renderer):
	"""
	Builds an Article from the raw document bytes,
	rendering markdown body with the given renderer
	"""
	raw_metadata, raw_body = split_document(data)
	metadata = parse_metadata(raw_metadata)
	try:
		body = raw_body.decode("utf-8")
	except UnicodeDecodeError as ex:
		raise FormatError(f"Document body is not valid UTF-8: {ex}") from ex
	content = renderer.convert(body)
	logging.debug(f"Rendered content: {content}")
	return Article(
		title=metadata.title,
		author=metadata.author,
		content=markupsafe.Markup(content),
	)
