"""
Twitter API — Repository Base
===============================

What:  Shared plumbing for the SQLAlchemy repositories.
How:   Holds the request's AsyncSession, exposes commit/rollback for the few
       service operations that manage their own transaction boundaries, and
       translates SQLAlchemy exceptions into application exceptions.

Error translation:
    IntegrityError  → ConflictError (when the caller names the conflict)
                    → DatabaseError (otherwise)
    SQLAlchemyError → DatabaseError (generic 500; details logged only)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from twitter_api.exceptions import ConflictError, DatabaseError

logger = logging.getLogger(__name__)


class SqlAlchemyRepository:
    """Base class for repositories bound to one request-scoped session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self) -> None:
        async with self._translate_errors("commit"):
            await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    @asynccontextmanager
    async def _translate_errors(
        self,
        operation: str,
        conflict_message: Optional[str] = None,
    ) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            context = {"operation": operation, "error_type": type(e).__name__}
            if conflict_message is not None:
                logger.info("Integrity conflict during %s: %s", operation, e.orig)
                raise ConflictError(message=conflict_message, context=context) from e
            logger.error("Integrity error during %s: %s", operation, str(e))
            raise DatabaseError(context=context) from e
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s", operation, str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": operation, "error_type": type(e).__name__},
            ) from e
