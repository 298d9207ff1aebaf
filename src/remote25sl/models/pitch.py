"""Note number to letter + octave conversion."""

from enum import Enum
from functools import lru_cache

from pydantic import BaseModel, ConfigDict


class Letter(str, Enum):
    """Pitch classes, spelled with sharps."""

    C = "C"
    C_SHARP = "C#"
    D = "D"
    D_SHARP = "D#"
    E = "E"
    F = "F"
    F_SHARP = "F#"
    G = "G"
    G_SHARP = "G#"
    A = "A"
    A_SHARP = "A#"
    B = "B"


# Definition order is chromatic order, starting at C
LETTERS: tuple[Letter, ...] = tuple(Letter)


class LetterOctave(BaseModel):
    """A musical pitch as a letter and an octave number."""

    model_config = ConfigDict(frozen=True)

    letter: Letter
    octave: int

    @property
    def step(self) -> int:
        """The note number this pitch was derived from."""
        return self.octave * 12 + LETTERS.index(self.letter)

    def __str__(self) -> str:
        return f"{self.letter.value}{self.octave}"


@lru_cache(maxsize=256)
def pitch_of(note: int) -> LetterOctave:
    """
    Convert a raw MIDI note number to a letter and octave.

    Octaves are counted from note 0, so note 0 is C0 and note 60 is C5.

    Args:
        note: MIDI note number

    Returns:
        LetterOctave for the note

    Example:
        >>> str(pitch_of(61))
        'C#5'
    """
    return LetterOctave(letter=LETTERS[note % 12], octave=note // 12)
