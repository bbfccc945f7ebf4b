class TemplateGenError(Exception):
	"""
	Base class for all errors aborting page generation
	"""
	pass


class FormatError(TemplateGenError):
	"""
	Input document does not follow the metadata + body layout
	"""
	pass


class MissingDelimiterError(FormatError):
	pass


class MetadataError(FormatError):
	pass


class RenderError(TemplateGenError):
	"""
	Raised when markdown or template rendering fails
	"""
	pass
