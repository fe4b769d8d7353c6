"""HTTP client for the ProjectBoard API."""

from typing import Any, Dict, List, Optional

import pydantic
import requests

from projectboard.models import Project


class APIError(Exception):
    """Raised when an API call fails or returns an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProjectClient:
    """Issues List/Create/Update/Delete calls against a ProjectBoard server."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        """Initialize the client.

        Args:
            base_url: Server URL, e.g. http://localhost:3000
            session: Session to send requests through (created if omitted)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Content-Type": "application/json"})
        return self._session

    def _make_request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            **kwargs: Additional request parameters

        Returns:
            Decoded JSON response

        Raises:
            APIError: If the request fails, or the response is an error or not JSON
        """
        url = f"{self.base_url}{endpoint}"
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise APIError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise APIError(
                f"API Error ({response.status_code}): {self._error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                f"Invalid JSON from {url}: {e}", status_code=response.status_code
            ) from e

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("error"):
            return str(payload["error"])
        return response.text or "Unknown error"

    @staticmethod
    def _to_project(row: Any) -> Project:
        """Validate one project row from a response body."""
        if not isinstance(row, dict):
            raise APIError(f"Expected a project object, got {type(row).__name__}")
        try:
            return Project(**row)
        except pydantic.ValidationError as e:
            raise APIError(f"Invalid project in response: {e}") from e

    def list_projects(self) -> List[Project]:
        """GET /projects."""
        result = self._make_request("GET", "/projects")
        if not isinstance(result, list):
            raise APIError(f"Expected a list of projects, got {type(result).__name__}")
        return [self._to_project(row) for row in result]

    def create_project(self, data: Dict[str, Any]) -> Project:
        """POST /projects."""
        return self._to_project(self._make_request("POST", "/projects", json=data))

    def update_project(self, project_id: int, data: Dict[str, Any]) -> Project:
        """PUT /projects/{id} with a full record."""
        return self._to_project(
            self._make_request("PUT", f"/projects/{project_id}", json=data)
        )

    def delete_project(self, project_id: int) -> bool:
        """DELETE /projects/{id}."""
        result = self._make_request("DELETE", f"/projects/{project_id}")
        return isinstance(result, dict) and bool(result.get("success"))

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
