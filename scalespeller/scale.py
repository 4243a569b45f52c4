"""Abstract scales written as scale-degree shorthand.

A :class:`Scale` is an interval pattern that is not tied to a key: the
natural minor scale is ``1,2,b3,4,5,b6,b7`` whatever its tonic. Each entry
is a :class:`ScaleDegree` - a 1-based degree number measured against the
major scale plus a signed accidental.

Degrees past 7 continue into the next octave (9 = ninth), and entries are
kept in the order written, so repeated or descending degrees are allowed.
Combine a Scale with a root :class:`~scalespeller.note.Note` through
:class:`~scalespeller.realised_scale.RealisedScale` to get concrete notes.
"""

import dataclasses
import re
import typing

import scalespeller.errors
import scalespeller.naming


SCALE_DEGREE_SEPARATOR = ","

_DEGREE_TOKEN = re.compile(r"(?P<flats>b*)(?P<sharps>#*)(?P<degree>\d*)")


@dataclasses.dataclass(frozen=True)
class ScaleDegree:

	"""
	One entry of a scale: a 1-based degree and a signed accidental.
	"""

	degree: int
	accidental: int = 0


	@classmethod
	def parse (cls, token: str) -> "ScaleDegree":

		"""Parse a shorthand token such as ``"3"``, ``"b7"`` or ``"##4"``.

		Raises:
			ConflictingAccidentals: If the token has both flats and sharps.
			MissingDegree: If the token has no degree number.
			ScaleParseError: For any other malformed token.
		"""

		stripped = token.strip()
		match = _DEGREE_TOKEN.fullmatch(stripped)

		if match is None:

			if "b" in stripped and "#" in stripped:
				raise scalespeller.errors.ConflictingAccidentals(f"Scale degree {token!r} has both flats and sharps")

			raise scalespeller.errors.ScaleParseError(
				f"Invalid scale degree {token!r}. Expected flats or sharps followed by a number, e.g. 'b3'."
			)

		flats = len(match.group("flats"))
		sharps = len(match.group("sharps"))

		if flats and sharps:
			raise scalespeller.errors.ConflictingAccidentals(f"Scale degree {token!r} has both flats and sharps")

		if not match.group("degree"):
			raise scalespeller.errors.MissingDegree(f"No scale degree number in {token!r}")

		return cls(int(match.group("degree")), sharps - flats)


	def __str__ (self) -> str:

		return scalespeller.naming.accidental_symbols(self.accidental, ascii_only=True) + str(self.degree)


class Scale:

	"""An ordered list of scale degrees, e.g. the major scale ``1,2,3,4,5,6,7``."""


	def __init__ (self, degrees: typing.Optional[typing.Iterable[ScaleDegree]] = None) -> None:

		"""
		Create a scale from scale degrees (or ``(degree, accidental)`` pairs).
		"""

		self._degrees: typing.List[ScaleDegree] = []

		if degrees is not None:
			self._degrees = [
				degree if isinstance(degree, ScaleDegree) else ScaleDegree(*degree)
				for degree in degrees
			]


	@classmethod
	def parse (cls, text: str) -> "Scale":

		"""Parse comma-separated shorthand into a new scale.

		Example:
			```python
			minor = Scale.parse("1,2,b3,4,5,b6,b7")
			len(minor)   # → 7
			minor[2]     # → ScaleDegree(degree=3, accidental=-1)
			```
		"""

		scale = cls()
		scale.read(text)

		return scale


	def read (self, text: str) -> None:

		"""Replace the contents of this scale with parsed shorthand.

		Whitespace around tokens is ignored and an empty string gives an
		empty scale. On error the scale is left unchanged.
		"""

		if not text.strip():
			self._degrees = []
			return

		self._degrees = [ScaleDegree.parse(token) for token in text.split(SCALE_DEGREE_SEPARATOR)]


	def clear (self) -> None:

		self._degrees.clear()


	@property
	def degrees (self) -> typing.List[ScaleDegree]:

		return list(self._degrees)


	def __str__ (self) -> str:

		return SCALE_DEGREE_SEPARATOR.join(str(degree) for degree in self._degrees)


	def __repr__ (self) -> str:

		return f"Scale({str(self)!r})"


	def __len__ (self) -> int:

		return len(self._degrees)


	def __iter__ (self) -> typing.Iterator[ScaleDegree]:

		return iter(self._degrees)


	def __getitem__ (self, index: int) -> ScaleDegree:

		return self._degrees[index]


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Scale):
			return NotImplemented

		return self._degrees == other._degrees
