"""Quiz configuration loaded from YAML.

Example ``config.yaml``::

    quiz:
      questions: 10
      scales_path: scales.csv
      results_path: results.csv
      difficulty: 2        # 0 = Easy, 1 = Medium, 2 = Hard
      choices: 4
      naming: german       # english, german or french
      seed: 42

Every key is optional. Command line flags override the file.
"""

import dataclasses
import logging
import os
import typing

import yaml


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"


@dataclasses.dataclass
class QuizConfig:

	"""
	Settings for a quiz session.
	"""

	questions: int = 5
	scales_path: str = "scales.csv"
	results_path: str = "results.csv"
	difficulty: int = 1
	choices: int = 4
	naming: str = "english"
	seed: typing.Optional[int] = None


	def with_overrides (self, **overrides: typing.Any) -> "QuizConfig":

		"""Return a copy with every non-``None`` override applied."""

		return dataclasses.replace(self, **{key: value for key, value in overrides.items() if value is not None})


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> QuizConfig:

	"""Load quiz settings from the ``quiz:`` section of a YAML file.

	A missing file is not an error: a warning is logged and the defaults
	are returned. Unknown keys are logged and ignored.

	Raises:
		ValueError: If the file or its ``quiz`` section is not a mapping.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return QuizConfig()

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f) or {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping")

	section = data.get('quiz', {}) or {}

	if not isinstance(section, dict):
		raise ValueError(f"'quiz' section of {config_path} must be a mapping")

	known = {field.name for field in dataclasses.fields(QuizConfig)}

	for key in sorted(set(section) - known):
		logger.warning(f"Ignoring unknown config key 'quiz.{key}' in {config_path}")

	return QuizConfig(**{key: value for key, value in section.items() if key in known})
