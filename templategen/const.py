#Literal marker opening and closing the metadata block.
#Searched as a plain substring, not anchored to line starts.
METADATA_DELIMITER = b"---"

DEFAULT_OUTPUT_SUFFIX = ".html"

ENV_CONFIG = "TEMPLATEGEN_CONFIG"
ENV_LOGGING_CONFIG = "TEMPLATEGEN_LOGGING_CONFIG"

#recognized metadata keys
METADATA_TITLE = "title"
METADATA_AUTHOR = "author"
METADATA_KEYS = (METADATA_TITLE, METADATA_AUTHOR)

CSS_CLASS_MATH_INLINE = "math inline"
CSS_CLASS_MATH_DISPLAY = "math display"
