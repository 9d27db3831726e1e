from dataclasses import dataclass
from typing import Optional

from tools.models import SearchResult

INITIAL = "initial"
LOADING = "loading"
ERROR = "error"
RESULTS = "results"


@dataclass
class SearchState:
    """
    What the results area shows. Exactly one of initial/loading/error/results.
    Whichever search resolves last overwrites the previous outcome.
    """
    status: str = INITIAL
    result: Optional[SearchResult] = None
    error: Optional[str] = None

    def begin(self):
        self.status = LOADING
        self.result = None
        self.error = None

    def succeed(self, result: SearchResult):
        self.status = RESULTS
        self.result = result
        self.error = None

    def fail(self, message: str):
        self.status = ERROR
        self.result = None
        self.error = message
