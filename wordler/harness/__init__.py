from .core import WORDLE_MAX_TURNS, Session, SessionState, run_batch, run_case
from .io import summarize, write_csv, write_manifest

__all__ = [
    "Session", "SessionState", "WORDLE_MAX_TURNS",
    "run_case", "run_batch", "write_csv", "write_manifest", "summarize",
]
