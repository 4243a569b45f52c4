"""The Note value type and the pitch-spelling algorithm.

A :class:`Note` is either a concrete pitch (``60``), an abstract spelled
note (``"Eb"``), or both at once (``"Eb4"`` = 63). A note built from a bare
pitch can carry several spellings at the same time (61 is both ``C#`` and
``Db``), because a pitch alone does not say which one is meant.

:meth:`Note.from_scale_degree` is the heart of the library. Given a root
note, a 1-based scale degree and an accidental it returns the note that sits
on that degree, choosing the letter from the degree (the third of C is
always some kind of E) and letting the accidental absorb whatever chromatic
alteration is needed. This is what turns ``1,2,b3,4,5,b6,b7`` on ``F#`` into
``F#, G#, A, B, C#, D, E`` rather than an arbitrary mix of sharps and flats.

Notes are immutable; "changing" a note means building a new one.
"""

import dataclasses
import typing

import scalespeller.errors
import scalespeller.naming
import scalespeller.pitch_map


Naming = scalespeller.naming.Naming


@dataclasses.dataclass(frozen=True)
class PitchInfo:

	"""
	Absolute pitch of a note plus the octave it is written in.

	The octave is stored rather than derived because a spelled note keeps
	the octave of its letter: ``B#3`` sounds as 60 but is written in octave 3.
	"""

	pitch: int
	octave: int

	@classmethod
	def from_pitch (cls, pitch: int) -> "PitchInfo":

		"""Build pitch information using the octave implied by the pitch alone."""

		return cls(pitch, scalespeller.pitch_map.octave_of(pitch))


class Note:

	"""A musical note with an optional pitch and zero or more spellings."""


	def __init__ (
		self,
		value: typing.Union[int, str, None] = None,
		generate_names: bool = True,
		style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH,
	) -> None:

		"""Create a note from a pitch value, a name string, or nothing (middle C).

		Parameters:
			value: ``None`` for middle C (pitch 60, named C), an integer pitch
				value, or a note name such as ``"Bb4"`` or ``"F#"``.
			generate_names: When ``value`` is a pitch, also store every
				single-accidental spelling of it. Ignored otherwise.
			style: Naming style used to parse ``value`` when it is a string.

		Example:
			```python
			Note()          # C4 (60)
			Note(61)        # C#4 (61), also spelled Db
			Note(61, False) # 61, no spelling
			Note("Bb4")     # Bb4 (70)
			Note("F#")      # F#, no pitch
			```
		"""

		if value is None:
			pitch_info: typing.Optional[PitchInfo] = PitchInfo(
				scalespeller.pitch_map.MIDDLE_C_PITCH,
				scalespeller.pitch_map.MIDDLE_C_OCTAVE,
			)
			namings: typing.Tuple[Naming, ...] = (Naming(0, 0),)

		# bool is an int subclass but is never a meaningful pitch.
		elif isinstance(value, bool):
			raise TypeError("Note value must be a pitch (int), a name (str) or None")

		elif isinstance(value, int):
			pitch_info, namings = self._parts_from_pitch(value, generate_names)

		elif isinstance(value, str):
			pitch_info, namings = self._parts_from_name(value, style)

		else:
			raise TypeError(f"Note value must be a pitch (int), a name (str) or None, not {type(value).__name__}")

		self._pitch_info = pitch_info
		self._namings = namings
		self._name_cache: typing.Dict[scalespeller.naming.NamingStyle, str] = {}


	# ── Construction ─────────────────────────────────────────────────

	@classmethod
	def _from_parts (cls, pitch_info: typing.Optional[PitchInfo], namings: typing.Iterable[Naming]) -> "Note":

		note = cls.__new__(cls)
		note._pitch_info = pitch_info
		note._namings = tuple(namings)
		note._name_cache = {}

		return note


	@classmethod
	def from_pitch (cls, pitch: int, generate_names: bool = True) -> "Note":

		"""
		Create a note from a pitch value, optionally with every spelling of it.
		"""

		return cls._from_parts(*cls._parts_from_pitch(pitch, generate_names))


	@classmethod
	def from_name (cls, name: str, style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH) -> "Note":

		"""Create a note from a name such as ``"Db5"`` or ``"G"``.

		A pitch is stored only when the name carries an octave number.

		Raises:
			InvalidName: If the name does not follow the note name grammar.
		"""

		return cls._from_parts(*cls._parts_from_name(name, style))


	@classmethod
	def from_scale_degree (cls, root: "Note", degree: int, accidental: int = 0) -> "Note":

		"""Create the note on a scale degree of ``root``, spelled correctly.

		If the root has a pitch the result has a pitch; if the root has
		exactly one spelling the result has a spelling. The letter of the
		result is always ``degree - 1`` letters above the root's letter, so
		degree 3 of any C is some E and degree 7 of F# is some E.

		A root carrying several spellings (``Note(61)`` is C# and Db) is
		rejected even when it has a pitch. A pitch-only result could be
		computed, but it would silently drop the spelling the caller asked
		for. Build the root from a name, or from a pitch with
		``generate_names=False`` to get pitch-only results on purpose.

		Parameters:
			root: The tonic to measure from.
			degree: 1-based scale degree (1 = tonic, 8 = octave, 10 = tenth).
			accidental: Chromatic alteration relative to the major-scale
				degree (``-1`` for a flat third, ``+1`` for a sharp fourth).

		Raises:
			InvalidScaleDegree: If ``degree`` is 0 or negative.
			AmbiguousRoot: If the root has more than one spelling.
			NoInformation: If the root has neither a pitch nor a spelling.

		Example:
			```python
			c4 = Note("C4")
			Note.from_scale_degree(c4, 3)       # E4 (64)
			Note.from_scale_degree(c4, 3, -1)   # Eb4 (63)
			Note.from_scale_degree(Note("F#"), 7, -1)  # E
			```
		"""

		if degree < 1:
			raise scalespeller.errors.InvalidScaleDegree(
				f"No such thing as scale degree {degree}. Use 1-based indexing (1 = tonic)."
			)

		if not root.has_pitch and not root._namings:
			raise scalespeller.errors.NoInformation("Scale degree root has no pitch or name information")

		# A root spelled several ways (61 = C#/Db) gives no basis for choosing letters.
		if len(root._namings) > 1:
			raise scalespeller.errors.AmbiguousRoot(
				f"Cannot spell scale degree {degree} from a root with "
				f"{len(root._namings)} possible names ({root.enharmonic_names()}). "
				f"Build the root from a single name, or from a pitch with generate_names=False."
			)

		zero_based = degree - 1

		naming: typing.Optional[Naming] = None
		if len(root._namings) == 1:
			naming = _spell_degree(root._namings[0], zero_based, accidental)

		pitch_info: typing.Optional[PitchInfo] = None
		if root._pitch_info is not None:
			pitch = root._pitch_info.pitch + scalespeller.pitch_map.degree_offset(zero_based) + accidental

			if naming is not None:
				# Octave follows the written letter, so B#4 is not promoted to octave 5.
				pitch_info = PitchInfo(pitch, scalespeller.pitch_map.octave_of(pitch - naming.accidental))

			else:
				pitch_info = PitchInfo.from_pitch(pitch)

		return cls._from_parts(pitch_info, (naming,) if naming is not None else ())


	@staticmethod
	def _parts_from_pitch (pitch: int, generate_names: bool) -> typing.Tuple[PitchInfo, typing.Tuple[Naming, ...]]:

		namings: typing.Tuple[Naming, ...] = ()

		if generate_names:
			namings = tuple(
				Naming(letter, accidental)
				for letter, accidental in scalespeller.pitch_map.namings_for_pitch(pitch)
			)

		return PitchInfo.from_pitch(pitch), namings


	@staticmethod
	def _parts_from_name (name: str, style: scalespeller.naming.NamingStyle) -> typing.Tuple[typing.Optional[PitchInfo], typing.Tuple[Naming, ...]]:

		naming, octave = scalespeller.naming.parse_name(name, style)

		pitch_info: typing.Optional[PitchInfo] = None
		if octave is not None:
			pitch = scalespeller.pitch_map.pitch_from_spelling(naming.letter, naming.accidental, octave)
			pitch_info = PitchInfo(pitch, octave)

		return pitch_info, (naming,)


	# ── Accessors ────────────────────────────────────────────────────

	@property
	def has_pitch (self) -> bool:

		return self._pitch_info is not None


	@property
	def has_name (self) -> bool:

		return len(self._namings) > 0


	@property
	def namings (self) -> typing.Tuple[Naming, ...]:

		"""Every spelling of this note, in the order they were generated."""

		return self._namings


	@property
	def pitch (self) -> int:

		"""The absolute pitch value (60 = C4).

		Raises:
			NoPitchInformation: If the note was built without a pitch.
		"""

		if self._pitch_info is None:
			raise scalespeller.errors.NoPitchInformation("Trying to get the pitch of a Note without pitch information")

		return self._pitch_info.pitch


	@property
	def octave (self) -> int:

		"""
		The written octave (C4 = middle C).
		"""

		if self._pitch_info is None:
			raise scalespeller.errors.NoPitchInformation("Trying to get the octave of a Note without pitch information")

		return self._pitch_info.octave


	def name (self, style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH) -> str:

		"""Return the first spelling as ``<letter><accidentals>`` (e.g. ``"Eb"``).

		Raises:
			NoNameInformation: If the note has no spelling.
		"""

		if not self._namings:
			raise scalespeller.errors.NoNameInformation("Trying to get the name of a Note without name information")

		if style not in self._name_cache:
			self._name_cache[style] = scalespeller.naming.render_naming(self._namings[0], style)

		return self._name_cache[style]


	def enharmonic_names (self, style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH) -> str:

		"""
		Return every spelling joined with ``/`` (e.g. ``"C#/Db"``).
		"""

		if not self._namings:
			raise scalespeller.errors.NoNameInformation("Trying to get the names of a Note without name information")

		return "/".join(scalespeller.naming.render_naming(naming, style) for naming in self._namings)


	def complex_name (self, style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH) -> str:

		"""Return name, octave and pitch, e.g. ``"C4 (60)"``.

		Raises:
			MissingInformation: Unless the note has both a pitch and a name.
		"""

		if self._pitch_info is None or not self._namings:
			raise scalespeller.errors.MissingInformation(
				"Trying to get the name and pitch of a Note without information for both"
			)

		return f"{self.name(style)}{self._pitch_info.octave} ({self._pitch_info.pitch})"


	def render (self, style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH) -> str:

		"""Return the most detailed text available.

		Prefers the complex name, then the plain name, then the bare pitch.

		Raises:
			NoInformation: If the note has neither a pitch nor a name.
		"""

		if self._pitch_info is not None and self._namings:
			return self.complex_name(style)

		if self._namings:
			return self.name(style)

		if self._pitch_info is not None:
			return str(self._pitch_info.pitch)

		raise scalespeller.errors.NoInformation("This Note has no pitch or name information")


	def __str__ (self) -> str:

		return self.render()


	def __repr__ (self) -> str:

		pitch = self._pitch_info.pitch if self._pitch_info is not None else None
		names = [scalespeller.naming.render_naming(naming) for naming in self._namings]

		return f"Note(pitch={pitch!r}, names={names!r})"


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self._pitch_info == other._pitch_info and self._namings == other._namings


	def __hash__ (self) -> int:

		return hash((self._pitch_info, self._namings))


def _spell_degree (root: Naming, zero_based_degree: int, accidental: int) -> Naming:

	"""Spell the note ``zero_based_degree`` letters above a spelled root.

	The expected interval is the major-scale distance of the degree (within
	one octave) plus the requested accidental. The natural letter distance
	is measured upwards from the root's letter (0-11 semitones), and the
	new accidental is whatever closes the gap, taking the root's own
	accidental into account. Octave-crossing degrees reduce to the same
	letter and interval as their simple counterparts (10 behaves as 3).
	"""

	step = zero_based_degree % scalespeller.pitch_map.LETTERS_PER_OCTAVE
	letter = (root.letter + step) % scalespeller.pitch_map.LETTERS_PER_OCTAVE

	expected = scalespeller.pitch_map.LETTER_TO_OFFSET[step] + accidental
	letter_distance = (
		scalespeller.pitch_map.LETTER_TO_OFFSET[letter] - scalespeller.pitch_map.LETTER_TO_OFFSET[root.letter]
	) % scalespeller.pitch_map.NOTES_PER_OCTAVE

	return Naming(letter, expected - letter_distance + root.accidental)
