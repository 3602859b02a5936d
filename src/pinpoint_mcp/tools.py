"""
MCP tools backed by the Pinpoint API client and the PDF extractor.

Each tool answers with plain text. Failures are reported as text too, so the
calling assistant always gets a well-formed result.
"""

import json
import logging
from typing import Annotated, Any, Dict, Optional

from pydantic import AnyHttpUrl, EmailStr, Field

from .client import PinpointAPIError, PinpointClient
from .models import (
    ApplicationData,
    ApplicationFilters,
    EmploymentType,
    JobFilters,
    JobStatus,
    WorkplaceType,
)
from .pdf import parse_pdf_from_url

logger = logging.getLogger(__name__)


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _document(response: Any) -> Dict[str, Any]:
    """Return a JSON:API response document, rejecting empty or non-object bodies."""
    if not isinstance(response, dict):
        raise ValueError(f"Unexpected response from Pinpoint API: {_to_json(response)}")
    return response


def _error_text(action: str, error: BaseException) -> str:
    return f"Error {action}: {str(error) or 'Unknown error'}"


def _job_not_found(job_id: str) -> str:
    return f"Error: Job with ID {job_id} not found."


def register_tools(mcp: Any, client: PinpointClient) -> None:
    """Register the Pinpoint tools on an MCP server exposing ``tool()``."""

    @mcp.tool(
        name="get-jobs",
        description="Tool to get jobs with filtering and pagination options",
    )
    async def get_jobs(
        search: Annotated[Optional[str], Field(description="Search term to filter jobs by keyword")] = None,
        status: Annotated[Optional[JobStatus], Field(description="Filter by job status")] = None,
        employment_type: Annotated[
            Optional[EmploymentType], Field(description="Filter by employment type")
        ] = None,
        workplace_type: Annotated[
            Optional[WorkplaceType], Field(description="Filter by workplace type")
        ] = None,
        page: Annotated[int, Field(gt=0, description="Page number for pagination")] = 1,
        per_page: Annotated[int, Field(gt=0, description="Number of results per page")] = 20,
    ) -> str:
        filters = JobFilters(
            search=search,
            status=status,
            employment_type=employment_type,
            workplace_type=workplace_type,
            page=page,
            per_page=per_page,
        )
        try:
            jobs = await client.get_jobs(filters)
        except Exception as e:
            return _error_text("fetching jobs", e)
        return _to_json(jobs)

    @mcp.tool(name="get-job", description="Tool to get the job")
    async def get_job(
        id: Annotated[str, Field(description="The id of the job")],
    ) -> str:
        try:
            job = await client.get_job_by_id(id)
        except PinpointAPIError as e:
            if e.not_found:
                return _job_not_found(id)
            return _error_text("fetching job", e)
        except Exception as e:
            return _error_text("fetching job", e)

        if not job:
            return _job_not_found(id)
        return _to_json(job)

    @mcp.tool(
        name="create-application",
        description="Create a job application with minimal information",
    )
    async def create_application(
        jobId: Annotated[str, Field(description="The ID of the job to apply for")],
        firstName: Annotated[str, Field(description="Applicant first name")],
        lastName: Annotated[str, Field(description="Applicant last name")],
        email: Annotated[EmailStr, Field(description="Applicant email address")],
    ) -> str:
        try:
            application = ApplicationData(
                first_name=firstName,
                last_name=lastName,
                email=str(email),
                job_id=jobId,
            )

            # The job must exist before an application is created for it
            try:
                job = await client.get_job_by_id(jobId)
            except PinpointAPIError as e:
                if e.not_found:
                    return _job_not_found(jobId)
                raise
            if not job:
                return _job_not_found(jobId)
            job = _document(job)

            created = _document(await client.create_application(application))
            application_id = (created.get("data") or {}).get("id")
            job_title = ((job.get("data") or {}).get("attributes") or {}).get("title")
        except Exception as e:
            return _error_text("creating application", e)

        logger.info(f"Created application {application_id} for job {jobId}")

        return (
            f"Application submitted successfully! Application ID: {application_id}\n\n"
            f"Job: {job_title}\n"
            f"Applicant: {firstName} {lastName}\n"
            f"Email: {email}"
        )

    @mcp.tool(
        name="get-applications",
        description="Get job applications with optional filters",
    )
    async def get_applications(
        jobId: Annotated[Optional[str], Field(description="Filter by job ID")] = None,
        jobVisibility: Annotated[
            Optional[str],
            Field(
                description=(
                    "Filter by job visibility "
                    "(comma-separated: external,internal,private_job,confidential)"
                )
            ),
        ] = None,
        stageId: Annotated[Optional[str], Field(description="Filter by application stage ID")] = None,
        page: Annotated[Optional[int], Field(gt=0, description="Page number for pagination")] = None,
        perPage: Annotated[
            Optional[int], Field(gt=0, description="Number of applications per page")
        ] = None,
    ) -> str:
        try:
            filters = ApplicationFilters(
                job_id=jobId,
                job_visibility=jobVisibility,
                stage_id=stageId,
                page=page,
                per_page=perPage,
            )
            response = _document(await client.get_applications(filters))
            data = response.get("data") or []
            count = (((response.get("meta") or {}).get("stats") or {}).get("total") or {}).get("count")
            if count is None:
                count = len(data)
        except Exception as e:
            return _error_text("fetching applications", e)

        return f"Found {count} applications:\n\n{_to_json(data)}"

    @mcp.tool(
        name="get-application-by-id",
        description="Get a specific job application by ID",
    )
    async def get_application_by_id(
        id: Annotated[str, Field(description="The ID of the application to retrieve")],
    ) -> str:
        try:
            response = _document(await client.get_application_by_id(id))
        except Exception as e:
            return _error_text("fetching application", e)
        return _to_json(response.get("data"))

    @mcp.tool(
        name="parse-cv-from-url",
        description="Parse a CV from a PDF URL and return the raw text content",
    )
    async def parse_cv_from_url(
        url: Annotated[AnyHttpUrl, Field(description="URL of the PDF CV to parse")],
    ) -> str:
        try:
            session = await client.get_session()
            return await parse_pdf_from_url(str(url), session=session)
        except Exception as e:
            return _error_text("parsing CV from URL", e)
