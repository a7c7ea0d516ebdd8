import logging
import requests
from typing import Dict, Any, Optional, List, Callable
from config.settings import config as default_config, AppConfig

logger = logging.getLogger(__name__)


class APIError(Exception):
    """
    Raised for every failed request.

    ``message`` is the server's ``detail`` when it sent one, otherwise a
    description of the transport failure. ``status_code`` is None when no
    response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        self.message = message
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class APIClient:
    def __init__(self, app_config: Optional[AppConfig] = None, session: Optional[requests.Session] = None):
        self.config = app_config or default_config
        self.session = session or requests.Session()
        self.base_url = self.config.endpoints.base
        self.timeout = self.config.request_timeout
        self._token: Optional[str] = None
        self._interceptors: List[Callable] = []
        self._setup_defaults()

    def _setup_defaults(self):
        """Setup default headers and session configuration"""
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        })

    # Bearer token

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str):
        self._token = token
        self.session.headers['Authorization'] = f"Bearer {token}"

    def clear_token(self):
        self._token = None
        self.session.headers.pop('Authorization', None)

    def add_interceptor(self, interceptor: Callable):
        self._interceptors.append(interceptor)

    def _apply_interceptors(self, request_config: Dict[str, Any]) -> Dict[str, Any]:
        for interceptor in self._interceptors:
            request_config = interceptor(request_config)
        return request_config

    def _handle_error(self, error: Exception, method: str, url: str):
        status_code = None
        detail = None

        if isinstance(error, requests.exceptions.HTTPError) and getattr(error, "response", None) is not None:
            status_code = error.response.status_code
            try:
                detail = error.response.json().get("detail")
            except ValueError:
                detail = error.response.text or None

        if isinstance(error, requests.exceptions.Timeout):
            error_message = f"Request timeout: {url}"
        elif isinstance(error, requests.exceptions.ConnectionError):
            error_message = f"Connection error: Could not connect to {url}"
        elif isinstance(error, requests.exceptions.HTTPError):
            error_message = detail if isinstance(detail, str) and detail else f"HTTP {status_code} error: {url}"
        else:
            error_message = f"Request failed: {str(error)}"

        logger.error(f"{method} {url} failed (status={status_code}): {error_message}")

        # Re-raise to allow caller to handle if needed
        raise APIError(error_message, status_code=status_code, detail=detail) from error

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith('http'):
            return endpoint
        if endpoint.startswith('/'):
            return f"{self.base_url}{endpoint}"
        return f"{self.base_url}/{endpoint}"

    def request(self, method: str, endpoint: str, timeout: Optional[int] = None, **kwargs) -> Any:
        url = self._build_url(endpoint)
        request_config = self._apply_interceptors({"method": method, "url": url, **kwargs})
        try:
            response = self.session.request(timeout=timeout or self.timeout, **request_config)
            response.raise_for_status()
            return response.json()
        except Exception as e:
            self._handle_error(e, method, url)

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[int] = None) -> Any:
        return self.request("GET", endpoint, params=params, timeout=timeout)

    def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None
    ) -> Any:
        return self.request("POST", endpoint, json=data, params=params, timeout=timeout)

    def patch(self, endpoint: str, data: Dict[str, Any], timeout: Optional[int] = None) -> Any:
        return self.request("PATCH", endpoint, json=data, timeout=timeout)

    def delete(self, endpoint: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[int] = None) -> Any:
        return self.request("DELETE", endpoint, params=params, timeout=timeout)

    def upload(
        self,
        endpoint: str,
        files: Dict[str, Any],
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None
    ) -> Any:
        # A None value drops the session's JSON Content-Type for this request,
        # so requests writes the multipart boundary itself
        return self.request(
            "POST",
            endpoint,
            files=files,
            params=params,
            headers={'Content-Type': None},
            timeout=timeout or self.config.upload_timeout,
        )
