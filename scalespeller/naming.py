"""Note naming styles and the letter/accidental text grammar.

A :class:`Naming` is one way of spelling a pitch: a letter index (0 = C ...
6 = B) plus a signed accidental count (negative = flats, positive = sharps).
How that pair is written depends on a :class:`NamingStyle`:

- `ENGLISH`: ``C D E F G A B`` with ``b`` and ``#``.
- `GERMAN`: ``C D E F G A H`` with ``b`` and ``#``; B-flat is written ``B``.
- `FRENCH`: ``Do Re Mi Fa Sol La Si`` with `` bemol`` and `` diese``.

Styles are plain immutable values passed to the parsing and rendering
functions, so several styles can be used side by side. Parsing always
accepts the ASCII ``b`` and ``#`` symbols as well as the style's own tokens.
"""

import dataclasses
import re
import typing

import scalespeller.errors
import scalespeller.pitch_map


@dataclasses.dataclass(frozen=True)
class Naming:

	"""
	A single spelling of a note: letter index 0-6 and signed accidental count.
	"""

	letter: int
	accidental: int = 0

	def __post_init__ (self) -> None:

		if not 0 <= self.letter < scalespeller.pitch_map.LETTERS_PER_OCTAVE:
			raise ValueError(f"Naming letter must be 0-6, got {self.letter}")


	@property
	def offset (self) -> int:

		"""Semitone offset of this spelling above the letter C (may fall outside 0-11)."""

		return scalespeller.pitch_map.LETTER_TO_OFFSET[self.letter] + self.accidental


@dataclasses.dataclass(frozen=True)
class NamingStyle:

	"""
	A set of letter names and accidental tokens used to write a Naming as text.

	Attributes:
		name: Short identifier used in configuration files (e.g. ``"english"``).
		letters: Seven letter names, indexed like :class:`Naming` letters.
		flat: Token repeated once per flat.
		sharp: Token repeated once per sharp.
		flat_seventh: Optional single name for the flattened seventh letter
			(German ``B``), which absorbs one flat.
	"""

	name: str
	letters: typing.Tuple[str, ...]
	flat: str
	sharp: str
	flat_seventh: typing.Optional[str] = None


ENGLISH = NamingStyle(
	name="english",
	letters=("C", "D", "E", "F", "G", "A", "B"),
	flat="b",
	sharp="#",
)

GERMAN = NamingStyle(
	name="german",
	letters=("C", "D", "E", "F", "G", "A", "H"),
	flat="b",
	sharp="#",
	flat_seventh="B",
)

FRENCH = NamingStyle(
	name="french",
	letters=("Do", "Re", "Mi", "Fa", "Sol", "La", "Si"),
	flat=" bemol",
	sharp=" diese",
)

STYLES: typing.Dict[str, NamingStyle] = {
	style.name: style for style in (ENGLISH, GERMAN, FRENCH)
}

_ASCII_FLAT = "b"
_ASCII_SHARP = "#"
_SEVENTH_LETTER = 6


def get_style (name: str) -> NamingStyle:

	"""Return a naming style by name (case-insensitive).

	Raises:
		ValueError: If the style is not one of ``english``, ``german``, ``french``.
	"""

	key = name.strip().lower()

	if key not in STYLES:
		raise ValueError(f"Unknown naming style '{name}'. Available: {sorted(STYLES)}")

	return STYLES[key]


def accidental_symbols (accidental: int, style: NamingStyle = ENGLISH, ascii_only: bool = False) -> str:

	"""Return the accidental token repeated ``abs(accidental)`` times.

	Parameters:
		accidental: Signed accidental count.
		style: Style providing the flat and sharp tokens.
		ascii_only: Use ``b`` and ``#`` regardless of the style (for the
			scale-degree shorthand, which is style independent).
	"""

	if accidental < 0:
		token = _ASCII_FLAT if ascii_only else style.flat
		return token * -accidental

	token = _ASCII_SHARP if ascii_only else style.sharp
	return token * accidental


def render_naming (naming: Naming, style: NamingStyle = ENGLISH) -> str:

	"""Write a Naming as ``<letter><accidentals>``.

	Example:
		```python
		render_naming(Naming(6, -1))          # → "Bb"
		render_naming(Naming(6, -1), GERMAN)  # → "B"
		render_naming(Naming(3, 1), FRENCH)   # → "Fa diese"
		```
	"""

	letter = style.letters[naming.letter]
	accidental = naming.accidental

	if style.flat_seventh is not None and naming.letter == _SEVENTH_LETTER and accidental < 0:
		letter = style.flat_seventh
		accidental += 1

	return letter + accidental_symbols(accidental, style)


def _alternation (tokens: typing.Iterable[str]) -> str:

	# Longest first so that e.g. "Sol" is tried before "S..." prefixes.
	ordered = sorted(set(tokens), key=len, reverse=True)
	return "|".join(re.escape(token) for token in ordered)


def _name_pattern (style: NamingStyle) -> "re.Pattern[str]":

	letters = list(style.letters)
	if style.flat_seventh is not None:
		letters.append(style.flat_seventh)

	flats = _alternation((_ASCII_FLAT, style.flat))
	sharps = _alternation((_ASCII_SHARP, style.sharp))

	return re.compile(
		rf"(?P<letter>{_alternation(letters)})"
		rf"(?P<flats>(?:{flats})*)"
		rf"(?P<sharps>(?:{sharps})*)"
		r"(?P<octave>[+-]?\d+)?"
	)


def parse_name (text: str, style: NamingStyle = ENGLISH) -> typing.Tuple[Naming, typing.Optional[int]]:

	"""Parse a note name such as ``"Bb4"``, ``"F#"`` or ``"C-1"``.

	Grammar: ``<letter><flats><sharps><optional signed octave>``. The whole
	string (ignoring surrounding whitespace) must match.

	Returns:
		A ``(naming, octave)`` tuple; ``octave`` is ``None`` when absent.

	Raises:
		InvalidName: Unknown letter, both flats and sharps, or trailing text.
	"""

	stripped = text.strip()
	match = _name_pattern(style).fullmatch(stripped)

	if match is None:
		raise scalespeller.errors.InvalidName(
			f"Invalid note name {text!r}. Expected one of {list(style.letters)} "
			f"followed by flats or sharps and an optional octave, e.g. 'Bb4'."
		)

	flats = len(re.findall(_alternation((_ASCII_FLAT, style.flat)), match.group("flats")))
	sharps = len(re.findall(_alternation((_ASCII_SHARP, style.sharp)), match.group("sharps")))

	if flats and sharps:
		raise scalespeller.errors.InvalidName(f"Note name {text!r} has both flats and sharps")

	letter_text = match.group("letter")
	accidental = sharps - flats

	if style.flat_seventh is not None and letter_text == style.flat_seventh:
		if sharps:
			raise scalespeller.errors.InvalidName(f"Note name {text!r} sharpens a flattened letter")
		letter = _SEVENTH_LETTER
		accidental -= 1

	else:
		letter = style.letters.index(letter_text)

	octave_text = match.group("octave")
	octave = int(octave_text) if octave_text is not None else None

	return Naming(letter, accidental), octave
