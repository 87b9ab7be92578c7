from .constraints import ConstraintModel, Fixed, Open
from .errors import DictionaryLoadError, MalformedFeedbackError, SessionFinishedError, WordlerError
from .feedback import SOLVED_PATTERN, Feedback, Outcome, parse_outcomes
from .scoring import score
from .validation import ALPHABET, WORD_LENGTH, validate_guess

__all__ = [
    "ConstraintModel", "Fixed", "Open",
    "Feedback", "Outcome", "parse_outcomes", "SOLVED_PATTERN",
    "score", "validate_guess", "WORD_LENGTH", "ALPHABET",
    "WordlerError", "MalformedFeedbackError", "DictionaryLoadError", "SessionFinishedError",
]
