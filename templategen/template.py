import functools
import logging

import jinja2

from templategen.errors import RenderError

#Page skeleton with three substitution points: title, author and content.
#title and author are escaped, content is expected to be markupsafe.Markup
ARTICLE_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta http-equiv="X-UA-Compatible" content="IE=edge">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>
	.max-width-md {
		max-width: 768px;
	}
	.article img {
		display: block;
		margin: auto;
		height: 100%;
		width: 100%;
		object-fit: cover;
	}
	.article blockquote {
		padding: 0 1em;
		color: gray;
		border-left: .25em solid gray;
	}
	code.has-jax {
		font: inherit;
		font-size: 100%;
		background: inherit;
		border: inherit;
		color: #515151;
	}
	</style>
	<link href="https://cdn.jsdelivr.net/npm/bootstrap@5.1.3/dist/css/bootstrap.min.css" rel="stylesheet"
		integrity="sha384-1BmE4kWBq78iYhFldvKuhfTAU6auU8tT94WrHftjDbrCEXSU1oBoqyl2QvZ6jIW3" crossorigin="anonymous">
	<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bootstrap-icons@1.8.1/font/bootstrap-icons.css">
	<script src="https://polyfill.io/v3/polyfill.min.js?features=es6"></script>
	<script id="MathJax-script" async src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"></script>
	<script id="MathJax-script" type="text/javascript">
	MathJax = {
		tex: {
			inlineMath: [
				["$", "$"],
				["\\(", "\\)"],
			],
		},
		svg: {
			fontCache: "global",
		},
	};
	</script>
	<script type="text/javascript" id="MathJax-script" async
		src="https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-svg.js"></script>
</head>
<header
	class="container d-flex flex-wrap align-items-center justify-content-center justify-content-md-between py-3 mb-4 border-bottom">
	<a href="/" class="d-flex align-items-center col-md-3 mb-2 mb-md-0 text-dark text-decoration-none">
		<svg xmlns="http://www.w3.org/2000/svg" width="32" height="32" fill="currentColor"
			class="bi bi-bootstrap-fill" viewBox="0 0 16 16">
			<path
				d="M6.375 7.125V4.658h1.78c.973 0 1.542.457 1.542 1.237 0 .802-.604 1.23-1.764 1.23H6.375zm0 3.762h1.898c1.184 0 1.81-.48 1.81-1.377 0-.885-.65-1.348-1.886-1.348H6.375v2.725z" />
			<path
				d="M4.002 0a4 4 0 0 0-4 4v8a4 4 0 0 0 4 4h8a4 4 0 0 0 4-4V4a4 4 0 0 0-4-4h-8zm1.06 12V3.545h3.399c1.587 0 2.543.809 2.543 2.11 0 .884-.65 1.675-1.483 1.816v.1c1.143.117 1.904.931 1.904 2.033 0 1.488-1.084 2.396-2.888 2.396H5.062z" />
		</svg>
	</a>

	<ul class="nav col-12 col-md-auto mb-2 justify-content-center mb-md-0">
		<li><a href="/courses" class="nav-link px-2 link-dark">
				<i class="bi bi-book"></i> Курси</a></li>
		<li><a href="/guides" class="nav-link px-2 link-dark">
				<i class="bi bi-question-circle"></i> Як допомогти</a></li>
		<li><a href="/about" class="nav-link px-2 link-dark">
				<i class="bi bi-people-fill"></i>
				Про нас</a></li>
	</ul>
</header>
<div class="article container-fluid max-width-md">
<h1 class="title">{{ title }}</h1>
<div class="author">
	<a href="#" class="btn">
		<i class="bi bi-person-circle"></i>
		{{ author }}
	</a>
</div>
<hr />
<p class="text-justify">{{ content }}</p>
</div>
<footer class="container d-flex justify-content-between align-items-center py-3 my-4 border-top">
    <div class="col-md-4 d-flex align-items-center">
        <a href="/" class="mb-3 me-2 mb-md-0 text-muted text-decoration-none lh-1">
            <svg class="bi" width="30" height="24">
                <use xlink:href="#bootstrap"></use>
            </svg>
        </a>
        <span class="text-muted">© 2021 Company, Inc</span>
    </div>

    <ul class="nav col-md-4 justify-content-end list-unstyled d-flex">
        <li class="ms-3">
            <a class="text-muted" href="#">
                <i class="bi bi-github"></i>
            </a>
        </li>
    </ul>
</footer>
</html>
"""


def make_environment():
	env = jinja2.Environment(
		autoescape=True,
		undefined=jinja2.StrictUndefined,
	)
	env.trim_blocks = True
	env.lstrip_blocks = True
	env.keep_trailing_newline = True
	return env


@functools.lru_cache(maxsize=None)
def get_article_template():
	"""
	Compiles ARTICLE_TEMPLATE once.
	The skeleton is a constant, so compilation errors are not expected at runtime
	"""
	return make_environment().from_string(ARTICLE_TEMPLATE)


def render_article(article):
	"""
	Substitutes Article fields into the page skeleton
	"""
	template = get_article_template()
	try:
		return template.render(
			title=article.title,
			author=article.author,
			content=article.content,
		)
	except jinja2.TemplateError as ex:
		logging.error(f"Template rendering failed: {ex!r}")
		raise RenderError(f"Failed to render page template: {ex}") from ex
