"""
Prompt templates for common recruiting workflows.

The template functions are pure: they only interpolate their arguments into
an instruction for the assistant, which then drives the tools itself.
"""

from typing import Annotated, Any, Literal, Optional, Tuple

from pydantic import EmailStr, Field

from .models import EmploymentType

Timeframe = Literal["week", "month", "quarter", "all"]
InsightFocus = Literal["diversity", "efficiency", "quality", "cost", "timeline"]

DEFAULT_SCREENING_CRITERIA = "relevant experience, qualifications, and cultural fit"
DEFAULT_TIMEFRAME = "month"
DEFAULT_FOCUS = "efficiency"

FOCUS_ANALYSIS = {
    "diversity": "Diversity metrics and inclusive hiring practices",
    "efficiency": "Time-to-hire metrics and process optimization opportunities",
    "quality": "Application quality indicators and candidate assessment metrics",
    "cost": "Cost-per-hire analysis and budget optimization suggestions",
    "timeline": "Hiring timeline analysis and acceleration strategies",
}


def recruitment_summary(job_title: str) -> str:
    return f"""Please analyze the recruitment status for job title {job_title}. Use the available tools to:
1. Get detailed job information
2. Retrieve all applications for this job
3. Provide a summary including:
   - Job title and key details
   - Total number of applications
   - Application timeline and trends
   - Current pipeline status
   - Key insights and recommendations

Format the response as a professional recruitment report."""


def application_screening(job_title: str, criteria: Optional[str] = None) -> str:
    screening_criteria = criteria or DEFAULT_SCREENING_CRITERIA
    return f"""Please screen and evaluate all applications for job title {job_title}.

Screening criteria: {screening_criteria}

Tasks:
1. Get the job details to understand requirements
2. Retrieve all applications for this position
3. For each application, load the CV from the URL and evaluate based on:
   - How well they match the job requirements
   - Application completeness and quality
   - Timeline of application (early vs late applicants)
4. Rank applications and provide recommendations for next steps
5. Identify any red flags or standout candidates

Provide a structured evaluation report with clear recommendations."""


def job_performance_analysis(timeframe: Optional[str] = None, job_type: Optional[str] = None) -> str:
    timeframe = timeframe or DEFAULT_TIMEFRAME
    timeframe_text = "all available data" if timeframe == "all" else f"the past {timeframe}"
    job_type_filter = f" for {job_type} positions" if job_type else ""

    return f"""Analyze job posting performance{job_type_filter} over {timeframe_text}.

Please:
1. Get all jobs (filter by employment type if specified)
2. For each job, get application data
3. Calculate metrics including:
   - Applications per job
   - Time-to-first-application
   - Application conversion rates
   - Most/least popular positions
   - Seasonal trends if applicable
4. Create a table showing top performing channels (channel_source in the application data) and order by number of applications. Only provide this analysis if there are at least 5 applications per channel.
5. Identify top-performing job postings and success factors
6. Provide recommendations for improving underperforming positions

For the layout keep it professional and easy to read. The colour scheme should not use gradients and be grayscale where possible.

Create a comprehensive performance dashboard with visualizations where helpful."""


def candidate_pipeline_report(job_id: Optional[str] = None, stage_id: Optional[str] = None) -> str:
    job_scope = f"for job ID {job_id}" if job_id else "across all active positions"
    stage_scope = f" with focus on stage {stage_id}" if stage_id else ""
    first_step = f"Get details for job {job_id}" if job_id else "Get all open jobs"

    return f"""Generate a candidate pipeline report {job_scope}{stage_scope}.

Please:
1. {first_step}
2. Retrieve applications and analyze pipeline stages
3. Create a pipeline visualization showing:
   - Number of candidates at each stage
   - Conversion rates between stages
   - Average time spent in each stage
   - Bottlenecks or drop-off points
4. Identify candidates who may need attention (stuck in stages, high-potential candidates)
5. Provide actionable recommendations for pipeline optimization

Format as an executive summary with clear metrics and visual representations."""


def split_candidate_name(candidate_name: str) -> Tuple[str, str]:
    """Split a full name into first name and the remaining last name."""
    first_name, _, last_name = candidate_name.strip().partition(" ")
    return first_name, last_name.strip()


def quick_application_submit(job_title: str, candidate_name: str, candidate_email: str) -> str:
    first_name, last_name = split_candidate_name(candidate_name)

    return f"""Please help submit an application for {candidate_name} ({candidate_email}).

Steps:
1. Search for jobs with title containing "{job_title}"
2. If multiple matches, show the options and let me choose
3. If single match, proceed to submit application with:
   - First name: {first_name}
   - Last name: {last_name}
   - Email: {candidate_email}
4. Confirm successful submission and provide application details

Make this process as smooth as possible and handle any errors gracefully."""


def recruitment_insights(focus: Optional[str] = None) -> str:
    focus = focus or DEFAULT_FOCUS

    return f"""Generate strategic recruitment insights with a focus on {focus}.

Please analyze:
1. All current job postings and their performance
2. Application patterns and trends
3. Pipeline efficiency and bottlenecks
4. {FOCUS_ANALYSIS.get(focus, "")}

Provide:
- Key performance indicators
- Benchmarking against industry standards
- Specific recommendations for improvement
- Risk assessment and mitigation strategies
- Implementation roadmap

Format as an executive briefing with actionable insights."""


def register_prompts(mcp: Any) -> None:
    """Register the recruiting prompts on an MCP server exposing ``prompt()``."""

    @mcp.prompt(
        name="recruitment-summary",
        description="Generate a comprehensive recruitment summary for a specific job",
    )
    def recruitment_summary_prompt(
        jobTitle: Annotated[str, Field(description="The title of the job to analyze")],
    ) -> str:
        return recruitment_summary(jobTitle)

    @mcp.prompt(
        name="application-screening",
        description="Screen and evaluate applications for a job position",
    )
    def application_screening_prompt(
        jobTitle: Annotated[str, Field(description="The title of the job to screen applications for")],
        criteria: Annotated[
            Optional[str], Field(description="Specific screening criteria or requirements")
        ] = None,
    ) -> str:
        return application_screening(jobTitle, criteria)

    @mcp.prompt(
        name="job-performance-analysis",
        description="Analyze job posting performance and application metrics",
    )
    def job_performance_analysis_prompt(
        timeframe: Annotated[Optional[Timeframe], Field(description="Analysis timeframe")] = DEFAULT_TIMEFRAME,
        jobType: Annotated[
            Optional[EmploymentType], Field(description="Filter by employment type")
        ] = None,
    ) -> str:
        return job_performance_analysis(timeframe, jobType)

    @mcp.prompt(
        name="candidate-pipeline-report",
        description="Generate a pipeline report showing candidate progression",
    )
    def candidate_pipeline_report_prompt(
        jobId: Annotated[
            Optional[str],
            Field(description="Specific job ID to analyze (if not provided, analyzes all jobs)"),
        ] = None,
        stageId: Annotated[
            Optional[str], Field(description="Focus on specific stage in the pipeline")
        ] = None,
    ) -> str:
        return candidate_pipeline_report(jobId, stageId)

    @mcp.prompt(
        name="quick-application-submit",
        description="Streamlined prompt for submitting job applications",
    )
    def quick_application_submit_prompt(
        jobTitle: Annotated[str, Field(description="Title or keyword to search for jobs")],
        candidateName: Annotated[str, Field(description="Full name of the candidate")],
        candidateEmail: Annotated[EmailStr, Field(description="Email address of the candidate")],
    ) -> str:
        return quick_application_submit(jobTitle, candidateName, str(candidateEmail))

    @mcp.prompt(
        name="recruitment-insights",
        description="Generate strategic recruitment insights and recommendations",
    )
    def recruitment_insights_prompt(
        focus: Annotated[
            Optional[InsightFocus], Field(description="Primary focus area for insights")
        ] = DEFAULT_FOCUS,
    ) -> str:
        return recruitment_insights(focus)
