import logging.config
import os

import pyjson5

from templategen import const

class MarkdownConfig:
	def __init__(self, params):
		#python-markdown builtin extension names
		self.extensions = list(params["extensions"])
		self.output_format = params["output_format"]


class MetadataConfig:
	def __init__(self, params):
		self.required_fields = set(params["required_fields"])
		unknown_fields = self.required_fields - set(const.METADATA_KEYS)
		if unknown_fields:
			raise ValueError(f"Unknown required metadata fields: {sorted(unknown_fields)}")


class OutputConfig:
	def __init__(self, params):
		self.suffix = params.get("suffix", const.DEFAULT_OUTPUT_SUFFIX)
		self.encoding = params["encoding"]


class Config:
	def __init__(self, path):
		with open(path, "rt") as config_file:
			json_config = pyjson5.load(config_file)

		self.markdown = MarkdownConfig(json_config["markdown"])
		self.metadata = MetadataConfig(json_config["metadata"])
		self.output = OutputConfig(json_config["output"])


def setup_logging(config_path):
	logging.config.fileConfig(config_path, disable_existing_loggers=False)

PACKAGE_ROOT = os.path.dirname(os.path.abspath(__file__))

DEFAULT_CONFIG_PATH = os.path.join(PACKAGE_ROOT, "configs/templategen.json")
config_path = os.environ.get(const.ENV_CONFIG, DEFAULT_CONFIG_PATH)
config = Config(config_path)

DEFAULT_LOGGING_PATH = os.path.join(PACKAGE_ROOT, "configs/logger.development.conf")
logging_config_path = os.environ.get(const.ENV_LOGGING_CONFIG, DEFAULT_LOGGING_PATH)
setup_logging(logging_config_path)
