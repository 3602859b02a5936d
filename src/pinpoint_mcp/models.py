"""
Request-scoped values sent to the Pinpoint API.

Filters map 1:1 onto bracketed query parameter names (``filter[search]``,
``page[number]``); the API treats those as structured names, so they are
emitted literally rather than as nested objects.
"""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Sequence, Union

from email_validator import EmailNotValidError, validate_email

JOB_STATUSES = ("open", "closed", "filled", "on_hold", "draft")
EMPLOYMENT_TYPES = ("full_time", "part_time", "contract", "temporary", "internship")
WORKPLACE_TYPES = ("onsite", "remote", "hybrid")
JOB_VISIBILITIES = ("external", "internal", "private_job", "confidential")

JobStatus = Literal["open", "closed", "filled", "on_hold", "draft"]
EmploymentType = Literal["full_time", "part_time", "contract", "temporary", "internship"]
WorkplaceType = Literal["onsite", "remote", "hybrid"]

# Always requested from /applications: attachment sideloading and the total count
APPLICATION_EXTRA_PARAMS = {
    "extra_fields[applications]": "attachments",
    "stats[total]": "count",
}


def normalize_job_visibility(value: Union[str, Sequence[str], None]) -> Optional[str]:
    """Return a comma-joined visibility list, rejecting unknown members."""
    if not value:
        return None

    if isinstance(value, str):
        members = [part.strip() for part in value.split(",")]
    else:
        members = [str(part).strip() for part in value]
    members = [member for member in members if member]

    unknown = [member for member in members if member not in JOB_VISIBILITIES]
    if unknown:
        raise ValueError(
            f"Invalid job visibility: {', '.join(unknown)} "
            f"(expected any of: {', '.join(JOB_VISIBILITIES)})"
        )

    return ",".join(members) or None


@dataclass
class JobFilters:
    search: Optional[str] = None
    status: Optional[JobStatus] = None
    employment_type: Optional[EmploymentType] = None
    workplace_type: Optional[WorkplaceType] = None
    page: Optional[int] = None
    per_page: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}

        if self.search:
            params["filter[search]"] = self.search
        if self.status:
            params["filter[status]"] = self.status
        if self.employment_type:
            params["filter[employment_type]"] = self.employment_type
        if self.workplace_type:
            params["filter[workplace_type]"] = self.workplace_type
        if self.page:
            params["page[number]"] = str(self.page)
        if self.per_page:
            params["page[size]"] = str(self.per_page)

        return params


@dataclass
class ApplicationFilters:
    job_id: Optional[str] = None
    job_visibility: Union[str, Sequence[str], None] = None
    stage_id: Optional[str] = None
    page: Optional[int] = None
    per_page: Optional[int] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}

        if self.job_id:
            params["filter[job_id]"] = self.job_id
        visibility = normalize_job_visibility(self.job_visibility)
        if visibility:
            params["filter[job_visibility]"] = visibility
        if self.stage_id:
            params["filter[stage_id]"] = self.stage_id
        # /applications paginates with plain page/per_page, unlike /jobs
        if self.page:
            params["page"] = str(self.page)
        if self.per_page:
            params["per_page"] = str(self.per_page)

        params.update(APPLICATION_EXTRA_PARAMS)
        return params


@dataclass
class ApplicationData:
    """Minimal data needed to create an application for a job."""

    first_name: str
    last_name: str
    email: str
    job_id: str

    def __post_init__(self) -> None:
        for field_name in ("first_name", "last_name", "email", "job_id"):
            if not str(getattr(self, field_name) or "").strip():
                raise ValueError(f"{field_name} is required")
        try:
            validate_email(self.email, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email address {self.email!r}: {e}") from e

    def to_payload(self) -> Dict[str, Any]:
        """Format the application as a JSON:API document."""
        return {
            "data": {
                "type": "applications",
                "attributes": {
                    "first_name": self.first_name,
                    "last_name": self.last_name,
                    "email": self.email,
                },
                "relationships": {
                    "job": {
                        "data": {
                            "type": "jobs",
                            "id": self.job_id,
                        }
                    }
                },
            }
        }
