"""Built-in character pairs.

``NUMBER_ROW_PAIRS`` follows a US keyboard; override it through the
``number_row_pairs`` config key for other layouts.
"""

from __future__ import annotations

CharacterPair = tuple[str, str]

NUMBER_ROW_PAIRS: tuple[CharacterPair, ...] = (
    ("1", "!"), ("2", "@"), ("3", "#"), ("4", "$"), ("5", "%"),
    ("6", "^"), ("7", "&"), ("8", "*"), ("9", "("), ("0", ")"),
)

# Well-known punctuation pairs offered as one-call helpers.
UNDERSCORE_DASH: CharacterPair = ("_", "-")
COLON_SEMICOLON: CharacterPair = (":", ";")
TILDE_BACKTICK: CharacterPair = ("~", "`")
DOUBLE_SINGLE_QUOTES: CharacterPair = ('"', "'")
SQUARE_CURLY_BRACKETS: tuple[CharacterPair, ...] = (("[", "{"), ("]", "}"))
PIPE_BACKSLASH: CharacterPair = ("|", "\\")
QUESTION_MARK_SLASH: CharacterPair = ("?", "/")
