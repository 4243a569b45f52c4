"""
scalespeller - symbolic pitches, scales and correct pitch spelling.

Converts between pitch values (60 = middle C), note names with accidentals
("Bb4", "F#") and scale-degree shorthand ("1,2,b3,4,5,b6,b7"), and spells
the notes of any scale on any root the way common-practice notation does:
one letter per degree, with the accidental absorbing the alteration.

- **Notes.** ``Note(61)`` knows it could be C# or Db; ``Note("Db4")`` knows
  which. A note can be a pitch, a name, or both.
- **Pitch spelling.** ``Note.from_scale_degree(root, 3, -1)`` returns the
  flat third of ``root`` spelled on the right letter (Eb over C, Gb over Eb,
  A over F#).
- **Scales.** ``Scale.parse("1,2,b3,4,5,b6,b7")`` is an abstract pattern;
  ``RealisedScale(root, scale)`` makes it concrete.
- **Naming styles.** English, German (H / B) and French (Do Re Mi) names.
- **Quiz.** ``python -m scalespeller`` runs a multiple-choice scale
  recognition quiz from a catalogue file.

Minimal example:

    ```python
    import scalespeller

    root = scalespeller.Note("F#4")
    minor = scalespeller.Scale.parse("1,2,b3,4,5,b6,b7")

    print(scalespeller.RealisedScale(root, minor))  # F#,G#,A,B,C#,D,E
    ```

Package-level exports: ``Note``, ``Scale``, ``ScaleDegree``, ``RealisedScale``.
"""

import scalespeller.note
import scalespeller.realised_scale
import scalespeller.scale


Note = scalespeller.note.Note
Scale = scalespeller.scale.Scale
ScaleDegree = scalespeller.scale.ScaleDegree
RealisedScale = scalespeller.realised_scale.RealisedScale
