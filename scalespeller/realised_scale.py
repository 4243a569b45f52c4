"""A scale realised on a concrete root, e.g. "Eb natural minor"."""

import typing

import scalespeller.naming
import scalespeller.note
import scalespeller.scale


class RealisedScale:

	"""
	The notes of a :class:`~scalespeller.scale.Scale` built on a root note.

	Notes are index-aligned with the scale's degrees. Degree 1 entries are
	the root itself (kept exactly as passed, including any enharmonic
	ambiguity); every other degree is spelled with
	:meth:`~scalespeller.note.Note.from_scale_degree`, so any error from
	that method propagates and no partial scale is produced.

	Example:
		```python
		root = Note("Eb4")
		minor = Scale.parse("1,2,b3,4,5,b6,b7")
		str(RealisedScale(root, minor))  # → "Eb,F,Gb,Ab,Bb,Cb,Db"
		```
	"""


	def __init__ (self, root: scalespeller.note.Note, scale: scalespeller.scale.Scale) -> None:

		self._root = root
		self._notes: typing.List[scalespeller.note.Note] = [
			root if entry.degree == 1 else scalespeller.note.Note.from_scale_degree(root, entry.degree, entry.accidental)
			for entry in scale
		]


	@property
	def root (self) -> scalespeller.note.Note:

		"""
		The note the scale was realised on, whatever degree the scale starts with.
		"""

		return self._root


	@property
	def notes (self) -> typing.List[scalespeller.note.Note]:

		return list(self._notes)


	def names (self, style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH) -> typing.List[str]:

		"""
		Return the simple name of every note.
		"""

		return [note.name(style) for note in self._notes]


	def render (self, style: scalespeller.naming.NamingStyle = scalespeller.naming.ENGLISH) -> str:

		return scalespeller.scale.SCALE_DEGREE_SEPARATOR.join(self.names(style))


	def __str__ (self) -> str:

		return self.render()


	def __repr__ (self) -> str:

		return f"RealisedScale({self._notes!r})"


	def __len__ (self) -> int:

		return len(self._notes)


	def __iter__ (self) -> typing.Iterator[scalespeller.note.Note]:

		return iter(self._notes)


	def __getitem__ (self, index: int) -> scalespeller.note.Note:

		return self._notes[index]
