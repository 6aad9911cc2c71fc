"""Basic sanity tests for the Vid2Blog backend."""

from fastapi.testclient import TestClient


class TestBasic:
    """Runtime requirements."""

    def test_python_version(self) -> None:
        """Verify Python version is 3.11+."""
        import sys

        assert sys.version_info >= (3, 11)


class TestHealth:
    """Health endpoint."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "app": "Vid2Blog"}
