"""Base service class with common functionality."""
from typing import TypeVar, Generic, Optional, List
from datetime import datetime, UTC
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from grocery.utils.logger import get_logger
from grocery.db.session import TransactionManager
from grocery.domain.types import ClientId

# Generic type for service results
T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Generic result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: str = ""
    suggestions: List[str] = []
    metadata: dict = {}

    # Allow arbitrary types (like SQLAlchemy models)
    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, data: T, **metadata) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def fail(cls, error: str, suggestions: Optional[List[str]] = None) -> 'Result[T]':
        """Create a failed result."""
        return cls(success=False, error=error or "Onbekende fout", suggestions=suggestions or [])


class BaseService:
    """Base class for all services."""

    def __init__(self, session: Session, client_id: Optional[ClientId] = None):
        """
        Initialize the service.

        Args:
            session: Database session
            client_id: ID of the current client, if the service is client-scoped
        """
        self.session = session
        self.client_id = client_id
        self.logger = get_logger(self.__class__.__name__)
        self.transaction = TransactionManager(session)

    def _log_action(
        self,
        action: str,
        status: str = "success",
        **kwargs
    ) -> None:
        """
        Log a service action.

        Args:
            action: Name of the action
            status: Status of the action
            **kwargs: Additional log data
        """
        self.logger.info(
            f"{action}: {status}",
            client_id=self.client_id,
            **kwargs
        )

    def _get_now(self) -> datetime:
        """Get current UTC datetime."""
        return datetime.now(UTC)
