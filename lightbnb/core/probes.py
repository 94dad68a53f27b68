"""
Health probe functions for dependency checks.

Each probe function:
- Returns bool (True = healthy, False = unhealthy)
- Handles exceptions gracefully
- Includes an appropriate timeout
"""

import asyncio
import logging

from sqlalchemy import text

from lightbnb.core.database import async_session_maker

logger = logging.getLogger(__name__)


async def check_database(timeout_seconds: float = 2.0) -> bool:
    """
    Check database connectivity.

    Executes a simple SELECT 1 query to verify the database is reachable
    and responding. Includes timeout to prevent hanging on unreachable DB.

    Args:
        timeout_seconds: Maximum time to wait for response (default: 2.0)

    Returns:
        True if database is reachable and healthy, False otherwise

    Example:
        >>> is_healthy = await check_database()
        >>> if not is_healthy:
        ...     raise SystemExit("Database unavailable")
    """
    try:
        async with asyncio.timeout(timeout_seconds):
            async with async_session_maker() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
                return True

    except asyncio.TimeoutError:
        logger.warning("Database probe timed out", extra={"timeout_seconds": timeout_seconds})
        return False
    except Exception:
        logger.warning("Database probe failed", exc_info=True)
        return False
