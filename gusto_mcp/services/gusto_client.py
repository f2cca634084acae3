# This module implements the HTTP client for the Gusto REST API.
# Date: 2026-10-18
# Version: 1.0.0

import json
from typing import Any, Dict, Optional

import httpx

from gusto_mcp.core.config import Settings
from gusto_mcp.core.errors import TransportError, UpstreamError
from gusto_mcp.utils.logger import console

API_BASE_URL = "https://api.gusto.com/v1"


def _stringify(value: Any) -> str:
    """Renders a filter value in its canonical text form: true/false, 2 rather than 2.0."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(**filters: Any) -> str:
    """
    Builds the query string for the optional filters of an endpoint.
    A filter is included if and only if its value is not None; the order of the
    keyword arguments is kept.
    """
    params = httpx.QueryParams({key: _stringify(value) for key, value in filters.items() if value is not None})
    query = str(params)
    return f"?{query}" if query else ""


class GustoClient:
    """
    A thin client bound to one base URL and one bearer token. Every method issues
    exactly one HTTP request; nothing is cached and nothing is retried.

    The httpx.AsyncClient can be injected, which is how the tests stub the
    network. When it is not, the client creates and owns one.
    """
    def __init__(self,
                 access_token: str,
                 base_url: str = API_BASE_URL,
                 http_client: Optional[httpx.AsyncClient] = None,
                 timeout: Optional[float] = None):
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient()

    @classmethod
    def from_settings(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> "GustoClient":
        return cls(
            access_token=settings.GUSTO_ACCESS_TOKEN.get_secret_value(),
            base_url=settings.GUSTO_API_BASE_URL,
            http_client=http_client,
            timeout=settings.HTTP_TIMEOUT,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self):
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "GustoClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> httpx.Headers:
        headers = httpx.Headers({
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        })
        headers.update(extra or {})
        # Callers may replace the credential header but never drop it.
        if not headers.get("authorization"):
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    async def request(self, method: str, endpoint: str,
                      body: Any = None, headers: Optional[Dict[str, str]] = None) -> Any:
        """
        Sends one request to '<base_url><endpoint>' and returns the decoded JSON body.
        Raises:
            UpstreamError: the response status is outside the 2xx range.
            TransportError: the request could not be completed.
        """
        url = f"{self._base_url}{endpoint}"
        kwargs: Dict[str, Any] = {"headers": self._headers(headers)}
        if body is not None:
            kwargs["content"] = json.dumps(body)
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        console.debug(f"{method} {endpoint}")
        try:
            response = await self._http_client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"Request to Gusto API failed: {e}") from e

        if not response.is_success:
            # The body is read in full before failing.
            raise UpstreamError(response.status_code, response.reason_phrase, response.text)

        return response.json()

    async def get(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self.request("GET", endpoint, headers=headers)

    async def post(self, endpoint: str, data: Any, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self.request("POST", endpoint, body=data, headers=headers)

    # Employee endpoints
    async def list_employees(self, company_id: str, page: Optional[int] = None, per: Optional[int] = None) -> Any:
        return await self.get(f"/companies/{company_id}/employees{build_query(page=page, per=per)}")

    async def get_employee(self, employee_id: str) -> Any:
        return await self.get(f"/employees/{employee_id}")

    # Payroll endpoints
    async def list_payrolls(self, company_id: str, processed: Optional[bool] = None,
                            start_date: Optional[str] = None, end_date: Optional[str] = None) -> Any:
        query = build_query(processed=processed, start_date=start_date, end_date=end_date)
        return await self.get(f"/companies/{company_id}/payrolls{query}")

    async def get_payroll(self, company_id: str, payroll_id: str) -> Any:
        return await self.get(f"/companies/{company_id}/payrolls/{payroll_id}")

    # Contractor endpoints
    async def list_contractors(self, company_id: str, page: Optional[int] = None, per: Optional[int] = None) -> Any:
        return await self.get(f"/companies/{company_id}/contractors{build_query(page=page, per=per)}")

    # Company endpoints
    async def get_company(self, company_id: str) -> Any:
        return await self.get(f"/companies/{company_id}")

    # Benefits endpoints
    async def list_benefits(self, company_id: str) -> Any:
        return await self.get(f"/companies/{company_id}/company_benefits")
