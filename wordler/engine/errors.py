"""
Exception types raised by the wordler core.

Only genuine input/usage problems are exceptions. Running out of candidates
or running out of turns are ordinary session outcomes (see
`wordler.harness.core.SessionState`) and never raise.
"""


class WordlerError(Exception):
    """Base class for every error raised by this package."""


class MalformedFeedbackError(WordlerError, ValueError):
    """
    Feedback could not be applied: wrong length, unknown outcome symbol,
    or a guessed word that is not WORD_LENGTH letters A-Z.

    Raised before the model is touched, so a rejected update never leaves
    a half-applied board behind.
    """


class DictionaryLoadError(WordlerError):
    """The word -> frequency source is missing or unreadable."""


class SessionFinishedError(WordlerError):
    """A session in a terminal state was asked to keep playing."""
