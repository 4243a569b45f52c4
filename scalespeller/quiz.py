"""Multiple-choice scale recognition quiz.

Each question shows the notes of a realised scale ("D,E,F,G,A,Bb,C") and
asks which catalogue scale it is. The correct name is mixed with other,
distinct names from the catalogue. Answers are recorded and can be written
as result rows::

    D Natural minor;0;CORRECT
    F# Lydian;1;INCORRECT
"""

import dataclasses
import logging
import random
import typing

import scalespeller.catalogue
import scalespeller.errors
import scalespeller.naming


logger = logging.getLogger(__name__)

RESULT_SEPARATOR = ";"
CORRECT = "CORRECT"
INCORRECT = "INCORRECT"


@dataclasses.dataclass
class Question:

	"""
	One quiz question.

	Attributes:
		entry: The realised scale being asked about.
		options: Scale names offered to the user, in display order.
		correct_index: 0-based index of the right answer in ``options``.
		answered_correctly: ``None`` until answered.
	"""

	entry: scalespeller.catalogue.RealisedEntry
	options: typing.List[str]
	correct_index: int
	answered_correctly: typing.Optional[bool] = None


class QuizSession:

	"""A sequence of questions drawn from a catalogue, answered one at a time."""


	def __init__ (
		self,
		catalogue: scalespeller.catalogue.ScaleCatalogue,
		choices: int = 4,
		rng: typing.Optional[random.Random] = None,
		style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH,
	) -> None:

		"""Prepare an empty session; call :meth:`generate` to add questions.

		Parameters:
			catalogue: Source of scales and option names.
			choices: Options per question, including the correct one. Fewer
				are shown when the catalogue has fewer distinct names.
			rng: Random source. Pass ``random.Random(seed)`` for a
				repeatable session.
			style: Naming style used to display notes and write results.
		"""

		if choices < 1:
			raise ValueError("choices must be at least 1")

		self.catalogue = catalogue
		self.choices = choices
		self.style = style
		self._rng: random.Random = rng or random.Random()

		self.questions: typing.List[Question] = []
		self.position = 0


	def generate (self, count: int, difficulty: scalespeller.catalogue.Difficulty) -> None:

		"""Append ``count`` questions sampled up to ``difficulty``.

		Raises:
			QuizError: If the catalogue is empty.
		"""

		if len(self.catalogue) == 0:
			raise scalespeller.errors.QuizError("No scales found while generating session! Load a catalogue first.")

		try:
			realised = self.catalogue.generate_questions(count, difficulty, self._rng)
		except scalespeller.errors.CatalogueError as exc:
			raise scalespeller.errors.QuizError(str(exc)) from exc

		all_names = list(dict.fromkeys(self.catalogue.names))

		for entry in realised:

			others = [name for name in all_names if name != entry.name]
			wrong = self._rng.sample(others, min(self.choices - 1, len(others)))

			options = [entry.name] + wrong
			self._rng.shuffle(options)

			self.questions.append(Question(entry, options, options.index(entry.name)))

		logger.info(f"Generated {count} questions at difficulty {difficulty.name}")


	@property
	def finished (self) -> bool:

		return self.position >= len(self.questions)


	@property
	def current (self) -> Question:

		if self.finished:
			raise scalespeller.errors.QuizError("Tried to get the next question when there are none left!")

		return self.questions[self.position]


	@property
	def correct_count (self) -> int:

		return sum(1 for question in self.questions if question.answered_correctly)


	def header (self) -> str:

		return f"On question {self.position + 1}/{len(self.questions)}"


	def prompt (self) -> str:

		"""
		Return the current question as display text: the notes, then numbered options.
		"""

		question = self.current
		lines = [question.entry.realised.render(self.style)]
		lines.extend(f"{i}: {option}" for i, option in enumerate(question.options, start=1))

		return "\n".join(lines)


	def answer (self, choice: int) -> bool:

		"""Answer the current question with a 1-based option number and advance.

		Returns:
			Whether the answer was correct.

		Raises:
			QuizError: If the session is finished or ``choice`` is not an option.
		"""

		question = self.current

		if not 1 <= choice <= len(question.options):
			raise scalespeller.errors.QuizError(f"Choice must be between 1 and {len(question.options)}, got {choice}")

		question.answered_correctly = (choice - 1) == question.correct_index
		self.position += 1

		return question.answered_correctly


	def result_lines (self) -> typing.List[str]:

		"""Return one result row per answered question.

		Format: ``<root> <scale name>;<difficulty code>;CORRECT|INCORRECT``.
		"""

		lines: typing.List[str] = []

		for question in self.questions:

			if question.answered_correctly is None:
				continue

			entry = question.entry
			verdict = CORRECT if question.answered_correctly else INCORRECT

			lines.append(RESULT_SEPARATOR.join((
				f"{entry.realised.root.name(self.style)} {entry.name}",
				str(int(entry.difficulty)),
				verdict,
			)))

		return lines


	def save_results (self, path: str) -> None:

		"""
		Write :meth:`result_lines` to ``path``, one row per line.

		Raises:
			QuizError: If the file cannot be written.
		"""

		try:
			with open(path, "w", encoding="utf-8") as f:
				for line in self.result_lines():
					f.write(line + "\n")

		except OSError as exc:
			raise scalespeller.errors.QuizError(f"Unable to write results to {path}: {exc}") from exc

		logger.info(f"Saved results to {path}: {self.correct_count}/{len(self.questions)} correct")
