"""
Tests for the database health probe.
"""

from unittest.mock import patch

import pytest

from lightbnb.core.probes import check_database


class TestCheckDatabase:

    @pytest.mark.anyio
    async def test_healthy_database(self, db_session):
        assert await check_database() is True

    @pytest.mark.anyio
    async def test_failing_session_reports_unhealthy(self):
        """
        Test probe swallows connection errors and reports False.

        Arrange: Session factory that raises on entry
        Act: Run probe
        Assert: Returns False instead of raising
        """
        # Arrange
        def broken_session_maker():
            raise ConnectionError("database is down")

        # Act
        with patch("lightbnb.core.probes.async_session_maker", broken_session_maker):
            healthy = await check_database(timeout_seconds=0.5)

        # Assert
        assert healthy is False
