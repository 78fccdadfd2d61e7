from .core import MAX_TURNS, run_case, run_batch
from .io import write_csv, write_manifest, summarize

__all__ = ["MAX_TURNS", "run_case", "run_batch", "write_csv", "write_manifest", "summarize"]
