"""Job fit scoring with suggested roles and improvement tips."""

from __future__ import annotations

import logging

from resume_insights.clients.llm_client import LLMClient
from resume_insights.errors import GenerationError
from resume_insights.models.analysis import FitScoringResult
from resume_insights.models.resume import ResumeReference
from resume_insights.parsers.resume_parser import resume_blocks
from resume_insights.pipeline.flow import invoke_json, string_list, unit_score

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to process resume file for job fit scoring."
DEFAULT_JUSTIFICATION = "Analysis could not be completed."
MAX_SUGGESTED_ROLES = 5

SYSTEM_PROMPT = """\
You are an expert career advisor and recruiter. Your tasks are to:
1. Evaluate a resume against a specific job description and give a fit score \
between 0 and 1 with a concise justification.
2. Suggest 3-5 alternative job titles based only on the skills and experience \
found in the resume.
3. Give specific, actionable suggestions for improving the resume so it better \
matches the provided job description.

Respond with JSON only, in exactly this shape:
{
  "fitScore": 0.0,
  "justification": "why this score",
  "suggestedRoles": ["title 1", "title 2", "title 3"],
  "improvementSuggestions": ["suggestion 1", "suggestion 2"]
}

Scoring:
- Base fitScore on skills, experience and relevance to the job description.
- fitScore is a number from 0 (no fit) to 1 (perfect fit)."""


class FitScorer:
    def __init__(
        self,
        llm: LLMClient,
        model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens

    async def score(self, resume: ResumeReference, job_description: str) -> FitScoringResult:
        """Score how well a resume fits a job description."""
        if not job_description or not job_description.strip():
            raise GenerationError("A job description is required for job fit scoring.")
        content = resume_blocks(resume) + [{
            "type": "text",
            "text": (
                "Job description:\n"
                f"<job_description>\n{job_description}\n</job_description>\n\n"
                "Evaluate the resume above against this job description. "
                "Respond with JSON only."
            ),
        }]
        data = await invoke_json(
            self.llm,
            prompt=content,
            system=SYSTEM_PROMPT,
            model=self.model,
            failure_message=FAILURE_MESSAGE,
            max_tokens=self.max_tokens,
        )
        return normalize_scoring(data)


def normalize_scoring(data: dict) -> FitScoringResult:
    """Fill defaults for any field the provider left out."""
    roles = string_list(data.get("suggestedRoles"))
    if len(roles) > MAX_SUGGESTED_ROLES:
        logger.debug("Truncating %d suggested roles to %d", len(roles), MAX_SUGGESTED_ROLES)
        roles = roles[:MAX_SUGGESTED_ROLES]

    justification = data.get("justification")
    if not isinstance(justification, str) or not justification.strip():
        justification = DEFAULT_JUSTIFICATION

    return FitScoringResult(
        fit_score=unit_score(data.get("fitScore")),
        justification=justification.strip(),
        suggested_roles=roles,
        improvement_suggestions=string_list(data.get("improvementSuggestions")),
    )
