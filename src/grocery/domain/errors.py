"""Error types for the grocery app."""
from typing import Optional, List, Dict, Any


class GroceryError(Exception):
    """Base class for grocery app errors."""
    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.metadata = metadata or {}
        super().__init__(message)


class ExportCancelled(GroceryError):
    """The export was cancelled before the file was saved."""
    pass


class WrongThreadError(GroceryError):
    """UI work was run from a thread that does not own the UI."""
    pass
