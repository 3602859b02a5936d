"""
Client for the Pinpoint recruiting API

Wraps the JSON:API endpoints used by the MCP tools: jobs and applications.
Responses are returned as decoded JSON, unchanged.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp

from .config import PinpointConfig
from .models import ApplicationData, ApplicationFilters, JobFilters

logger = logging.getLogger(__name__)


class PinpointAPIError(Exception):
    """Non-2xx response from the Pinpoint API"""

    def __init__(self, status: int, body: Any = None):
        self.status = status
        self.body = body
        if body is None:
            detail = "empty response"
        elif isinstance(body, str):
            detail = body
        else:
            detail = json.dumps(body)
        super().__init__(f"API request failed: {status} - {detail}")

    @property
    def not_found(self) -> bool:
        return self.status == 404


class PinpointClient:
    """Client for interacting with the Pinpoint API"""

    def __init__(self, config: PinpointConfig, session: Optional[aiohttp.ClientSession] = None):
        self.config = config
        self.base_url = config.base_url
        self.headers = {
            "X-API-KEY": config.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self._session = session
        self._owns_session = session is None

    async def get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client created it"""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make a request to the Pinpoint API and return the decoded body"""
        session = await self.get_session()

        url = f"{self.base_url}{endpoint}"
        logger.info(f"Making {method} request to: {url}")

        try:
            async with session.request(
                method, url, headers=self.headers, params=params, json=payload
            ) as response:
                if 200 <= response.status < 300:
                    return await response.json(content_type=None)

                error_text = await response.text()
                logger.error(f"API request failed: {response.status} - {error_text}")
                raise PinpointAPIError(response.status, _decode_body(error_text))
        except PinpointAPIError:
            raise
        except aiohttp.ClientError as e:
            logger.error(f"Error making API request to {url}: {e}")
            raise

    async def get(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", endpoint, payload=payload)

    async def get_jobs(self, filters: Optional[JobFilters] = None) -> Dict[str, Any]:
        """
        Get jobs with optional filters and pagination.

        Only the filters that are set are sent as query parameters.
        """
        params = (filters or JobFilters()).to_params()
        try:
            return await self.get("/jobs", params=params)
        except Exception as e:
            logger.error(f"Error fetching jobs: {e}")
            raise

    async def get_job_by_id(self, job_id: str) -> Dict[str, Any]:
        try:
            return await self.get(f"/jobs/{_quote_id(job_id)}")
        except Exception as e:
            logger.error(f"Error fetching job {job_id}: {e}")
            raise

    async def create_application(self, application: ApplicationData) -> Dict[str, Any]:
        """
        Create a job application with the minimal required fields.

        Returns:
            The created application document, including its new id
        """
        try:
            return await self.post("/applications", application.to_payload())
        except Exception as e:
            logger.error(f"Error creating application: {e}")
            raise

    async def get_applications(self, filters: Optional[ApplicationFilters] = None) -> Dict[str, Any]:
        """
        Get applications with optional filters.

        Attachments are always sideloaded and the total count is always
        requested, whatever the filters.
        """
        params = (filters or ApplicationFilters()).to_params()
        try:
            return await self.get("/applications", params=params)
        except Exception as e:
            logger.error(f"Error fetching applications: {e}")
            raise

    async def get_application_by_id(self, application_id: str) -> Dict[str, Any]:
        try:
            return await self.get(f"/applications/{_quote_id(application_id)}")
        except Exception as e:
            logger.error(f"Error fetching application {application_id}: {e}")
            raise


def _quote_id(resource_id: str) -> str:
    return quote(str(resource_id), safe="")


def _decode_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text
