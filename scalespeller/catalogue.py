"""Scale library loading and difficulty-weighted sampling.

A catalogue file is ``;``-separated text with a header row and three
columns - scale name, difficulty and degree shorthand::

    Name;Difficulty;Degrees
    Major;Easy;1,2,3,4,5,6,7
    Natural minor;Easy;1,2,b3,4,5,b6,b7
    Lydian;Medium;1,2,3,#4,5,6,7

Sampling draws scales and roots for quiz questions. Harder sessions mix in
harder scales and roots with more accidentals, and every draw goes through
an injected ``random.Random`` so sessions can be reproduced from a seed.
"""

import dataclasses
import enum
import logging
import random
import typing

import scalespeller.errors
import scalespeller.note
import scalespeller.realised_scale
import scalespeller.scale


logger = logging.getLogger(__name__)

CATALOGUE_SEPARATOR = ";"
CATALOGUE_COLUMNS = 3


class Difficulty (enum.IntEnum):

	EASY = 0
	MEDIUM = 1
	HARD = 2


	@classmethod
	def parse (cls, text: str) -> "Difficulty":

		"""Parse ``"Easy"``, ``"Medium"`` or ``"Hard"`` (case-insensitive)."""

		key = text.strip().upper()

		if key not in cls.__members__:
			raise ValueError(f"Unknown difficulty '{text}'. Expected Easy, Medium or Hard.")

		return cls[key]


	@classmethod
	def clamp (cls, value: int) -> "Difficulty":

		"""Convert an integer code to a difficulty, capping out-of-range values."""

		return cls(max(cls.EASY, min(cls.HARD, value)))


@dataclasses.dataclass(frozen=True)
class ScaleEntry:

	"""
	A named scale from the catalogue.
	"""

	name: str
	difficulty: Difficulty
	scale: scalespeller.scale.Scale


@dataclasses.dataclass(frozen=True)
class RealisedEntry:

	"""
	A catalogue scale realised on a root - the subject of one quiz question.
	"""

	name: str
	difficulty: Difficulty
	realised: scalespeller.realised_scale.RealisedScale


# Common tonics spelled from middle C. Rare enharmonics (Fb, Cb, E#, ...) are left out.
ROOT_DEGREES: typing.Tuple[typing.Tuple[int, int], ...] = (
	(1, 0), (2, -1), (2, 0), (3, -1), (3, 0), (4, 0), (4, 1),
	(5, -1), (5, 0), (6, -1), (6, 0), (7, -1), (7, 0),
)

_MIDDLE_C = scalespeller.note.Note()

POSSIBLE_ROOTS: typing.Tuple[scalespeller.note.Note, ...] = tuple(
	scalespeller.note.Note.from_scale_degree(_MIDDLE_C, degree, accidental)
	for degree, accidental in ROOT_DEGREES
)

# Relative weight of each entry of POSSIBLE_ROOTS per difficulty.
# Roots with many accidentals only appear once the difficulty is raised.
ROOT_WEIGHTS: typing.Dict[Difficulty, typing.Tuple[float, ...]] = {
	Difficulty.EASY:   (1, 0, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 0),
	Difficulty.MEDIUM: (1, 0, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 0),
	Difficulty.HARD:   (2, 1, 2, 2, 2, 2, 1, 1, 2, 1, 2, 2, 1),
}


class ScaleCatalogue:

	"""A library of named scales grouped by difficulty."""


	def __init__ (self, entries: typing.Optional[typing.Iterable[ScaleEntry]] = None) -> None:

		self._entries: typing.List[ScaleEntry] = list(entries) if entries is not None else []
		self._by_difficulty: typing.Dict[Difficulty, typing.List[ScaleEntry]] = {level: [] for level in Difficulty}

		for entry in self._entries:
			self._by_difficulty[entry.difficulty].append(entry)


	@classmethod
	def from_lines (cls, lines: typing.Iterable[str]) -> "ScaleCatalogue":

		"""Parse catalogue text, one row per line, skipping the header row.

		Blank lines are ignored. Rows are numbered from 1 for the first row
		after the header in error messages.

		Raises:
			CatalogueError: On a wrong column count, an unknown difficulty, an
				unparsable or empty degree list, or a degree below 1.
		"""

		entries: typing.List[ScaleEntry] = []

		for row, line in enumerate(lines):

			if row == 0 or not line.strip():
				continue

			columns = line.rstrip("\r\n").split(CATALOGUE_SEPARATOR)

			if len(columns) != CATALOGUE_COLUMNS:
				raise scalespeller.errors.CatalogueError(
					f"Row {row}: expected {CATALOGUE_COLUMNS} columns separated by "
					f"'{CATALOGUE_SEPARATOR}', found {len(columns)}"
				)

			name, difficulty_text, degrees_text = columns

			try:
				difficulty = Difficulty.parse(difficulty_text)
			except ValueError as exc:
				raise scalespeller.errors.CatalogueError(f"Row {row}, column 2: {exc}") from exc

			try:
				scale = scalespeller.scale.Scale.parse(degrees_text)
			except scalespeller.errors.ScaleParseError as exc:
				raise scalespeller.errors.CatalogueError(f"Row {row}: failed parsing scale: {exc}") from exc

			if len(scale) == 0:
				raise scalespeller.errors.CatalogueError(f"Row {row}: scale '{name.strip()}' has no degrees")

			for degree in scale:
				if degree.degree < 1:
					raise scalespeller.errors.CatalogueError(
						f"Row {row}: scale degree {degree.degree} is out of range. Degrees start at 1 (1 = tonic)."
					)

			entries.append(ScaleEntry(name.strip(), difficulty, scale))

		return cls(entries)


	@classmethod
	def load (cls, path: str) -> "ScaleCatalogue":

		"""
		Load a catalogue file.

		Raises:
			CatalogueError: If the file cannot be read or is malformed.
		"""

		try:
			with open(path, "r", encoding="utf-8") as f:
				catalogue = cls.from_lines(f)

		except OSError as exc:
			raise scalespeller.errors.CatalogueError(f"Unable to open scale catalogue {path}: {exc}") from exc

		logger.info(f"Loaded {len(catalogue)} scales from {path}")

		return catalogue


	@property
	def entries (self) -> typing.List[ScaleEntry]:

		return list(self._entries)


	@property
	def names (self) -> typing.List[str]:

		return [entry.name for entry in self._entries]


	def by_difficulty (self, difficulty: Difficulty) -> typing.List[ScaleEntry]:

		return list(self._by_difficulty[difficulty])


	def __len__ (self) -> int:

		return len(self._entries)


	# ── Sampling ─────────────────────────────────────────────────────

	def sample_random_entries (self, count: int, rng: random.Random) -> typing.List[ScaleEntry]:

		"""
		Draw ``count`` distinct entries regardless of difficulty.
		"""

		if count > len(self._entries):
			raise scalespeller.errors.CatalogueError(
				f"Too many samples requested: {count} from a catalogue of {len(self._entries)}"
			)

		return rng.sample(self._entries, count)


	def sample_entries (self, count: int, difficulty: Difficulty, rng: random.Random) -> typing.List[ScaleEntry]:

		"""Draw ``count`` entries (with repetition) up to a difficulty.

		Each draw first picks a difficulty level uniformly from the levels
		at or below ``difficulty`` that contain scales, then a scale
		uniformly within that level. Easy scales therefore keep appearing in
		hard sessions.
		"""

		if not self._entries:
			raise scalespeller.errors.CatalogueError("No scales loaded")

		levels = [level for level in Difficulty if level <= difficulty and self._by_difficulty[level]]

		if not levels:
			raise scalespeller.errors.CatalogueError(f"No scales at or below difficulty {difficulty.name}")

		return [rng.choice(self._by_difficulty[rng.choice(levels)]) for _ in range(count)]


	def sample_roots (self, count: int, difficulty: Difficulty, rng: random.Random) -> typing.List[scalespeller.note.Note]:

		"""
		Draw ``count`` root notes weighted by difficulty.
		"""

		return rng.choices(POSSIBLE_ROOTS, weights=ROOT_WEIGHTS[difficulty], k=count)


	def generate_questions (self, count: int, difficulty: Difficulty, rng: random.Random) -> typing.List[RealisedEntry]:

		"""Sample scales and roots and realise each pair.

		Example:
			```python
			catalogue = ScaleCatalogue.load("scales.csv")
			for entry in catalogue.generate_questions(3, Difficulty.MEDIUM, random.Random(1)):
				print(entry.realised, "->", entry.name)
			```
		"""

		entries = self.sample_entries(count, difficulty, rng)
		roots = self.sample_roots(count, difficulty, rng)

		return [
			RealisedEntry(entry.name, entry.difficulty, scalespeller.realised_scale.RealisedScale(root, entry.scale))
			for entry, root in zip(entries, roots)
		]
