"""Exception hierarchy for scalespeller.

Every failure raised by the library derives from :class:`ScaleSpellerError`.
Errors caused by bad input values also derive from ``ValueError`` and errors
caused by asking a :class:`~scalespeller.note.Note` for information it does
not carry derive from ``LookupError``, so callers can catch either the
library-specific class or the built-in one.
"""


class ScaleSpellerError (Exception):
	pass


# ── Missing information on a Note ────────────────────────────────────

class MissingInformation (ScaleSpellerError, LookupError):

	"""A Note lacks the pitch and/or name needed by an accessor."""


class NoPitchInformation (MissingInformation):
	pass


class NoNameInformation (MissingInformation):
	pass


class NoInformation (MissingInformation):

	"""A Note carries neither a pitch nor a name."""


# ── Bad input ────────────────────────────────────────────────────────

class InvalidName (ScaleSpellerError, ValueError):
	pass


class InvalidScaleDegree (ScaleSpellerError, ValueError):
	pass


class AmbiguousRoot (ScaleSpellerError, ValueError):

	"""Pitch spelling was requested against a root spelled more than one way."""


class ScaleParseError (ScaleSpellerError, ValueError):
	pass


class ConflictingAccidentals (ScaleParseError):
	pass


class MissingDegree (ScaleParseError):
	pass


# ── Application layer ────────────────────────────────────────────────

class CatalogueError (ScaleSpellerError):
	pass


class QuizError (ScaleSpellerError):
	pass
