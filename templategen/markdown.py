import logging
import xml.etree.ElementTree as xml

import markdown

from templategen.config import config
from templategen import const
from templategen.errors import RenderError


class _ArticleRenderer:
	"""
	Wraps markdown.Markdown object, resetting its state between conversions
	"""
	def __init__(self, md_renderer):
		self._renderer = md_renderer

	def convert(self, markup):
		self._renderer.reset()
		try:
			return self._renderer.convert(markup)
		except Exception as ex:
			logging.error(f"Markdown conversion failed: {ex!r}")
			raise RenderError(f"Failed to render markdown: {ex}") from ex


def make_article_renderer(extensions=None, output_format=None):
	renderer = markdown.Markdown(
		extensions=(config.markdown.extensions if extensions is None else extensions),
		output_format=(output_format or config.markdown.output_format)
	)
	#math should be matched after code spans, but before escapes and emphasis
	renderer.inlinePatterns.register(MarkdownDisplayMath(), name="display_math", priority=187)
	renderer.inlinePatterns.register(MarkdownInlineMath(), name="inline_math", priority=186)
	#bare urls should be matched after links and inline html are consumed
	renderer.inlinePatterns.register(MarkdownAutolink(), name="bare_autolink", priority=85)
	renderer.inlinePatterns.register(MarkdownBackslashLineBreak(), name="backslash_linebreak", priority=99)
	renderer.inlinePatterns.register(MarkdownStrikethrough(), name="strikethrough", priority=-1)
	#\$ produces a literal dollar sign instead of starting a formula
	renderer.ESCAPED_CHARS.append("$")
	return _ArticleRenderer(renderer)


class MarkdownStrikethrough(markdown.inlinepatterns.Pattern):
	"""
	Marks the text enclosed into doubled tildas as deleted,
	thus emulating the syntax of github flavoured markdown:
	https://help.github.com/articles/basic-writing-and-formatting-syntax/
	"""
	def __init__(self):
		super().__init__(r"\~\~(?P<strikethrough>[^\~]+)\~\~")

	def handleMatch(self, m):
		element = xml.Element("del")
		element.text = m.group("strikethrough")
		return element


class MarkdownDisplayMath(markdown.inlinepatterns.Pattern):
	"""
	Passes $$formula$$ to MathJax as display math.
	Formula source is kept intact
	"""
	def __init__(self):
		super().__init__(r"(?<!\\)\$\$(?P<math>[^\$]+)\$\$")

	def handleMatch(self, m):
		span = xml.Element("span")
		span.set("class", const.CSS_CLASS_MATH_DISPLAY)
		span.text = markdown.util.AtomicString(r"\[" + m.group("math") + r"\]")
		return span


class MarkdownInlineMath(markdown.inlinepatterns.Pattern):
	"""
	Passes $formula$ to MathJax as inline math
	"""
	def __init__(self):
		super().__init__(r"(?<!\\)\$(?P<math>[^\$\n]+)(?<!\\)\$")

	def handleMatch(self, m):
		span = xml.Element("span")
		span.set("class", const.CSS_CLASS_MATH_INLINE)
		span.text = markdown.util.AtomicString(r"\(" + m.group("math") + r"\)")
		return span


class MarkdownAutolink(markdown.inlinepatterns.Pattern):
	"""
	Turns bare urls like https://example.com into links.
	Trailing punctuation is left out of the link
	"""
	def __init__(self):
		super().__init__(r"(?P<url>(?:https?|ftp)://[^\s<>\"]*[^\s<>\".,;:!?')\]])")

	def handleMatch(self, m):
		url = m.group("url")
		a = xml.Element("a")
		a.set("href", url)
		a.text = markdown.util.AtomicString(url)
		return a


class MarkdownBackslashLineBreak(markdown.inlinepatterns.Pattern):
	"""
	Renders backslash at the end of a line as a hard line break
	"""
	def __init__(self):
		super().__init__(r"\\\n")

	def handleMatch(self, m):
		return xml.Element("br")
