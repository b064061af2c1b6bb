"""Entity extraction: skills, experience and education from a resume."""

from __future__ import annotations

from resume_insights.clients.llm_client import LLMClient
from resume_insights.models.analysis import EntityExtractionResult
from resume_insights.models.resume import ResumeReference
from resume_insights.parsers.resume_parser import resume_blocks
from resume_insights.pipeline.flow import invoke_json, string_list

FAILURE_MESSAGE = "Failed to process resume file for entity extraction."

SYSTEM_PROMPT = """\
You are an AI assistant specialized in extracting information from resumes.

Respond with JSON only, in exactly this shape:
{
  "skills": ["skill 1", "skill 2"],
  "experience": ["role at company (dates)", "..."],
  "education": ["degree, institution (dates)", "..."]
}

Rules:
- Use only information present in the resume. Do not infer or invent.
- Each experience entry describes one role/company.
- Each education entry describes one degree/institution.
- Use an empty array when a category has no entries."""


class EntityExtractor:
    def __init__(
        self,
        llm: LLMClient,
        model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens

    async def extract(self, resume: ResumeReference) -> EntityExtractionResult:
        """Extract key skills, work experiences and education from a resume."""
        content = resume_blocks(resume) + [{
            "type": "text",
            "text": (
                "Given the resume above, extract the key skills, work experiences "
                "and educational experiences. Respond with JSON only."
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
        return normalize_entities(data)


def normalize_entities(data: dict) -> EntityExtractionResult:
    """Absent or malformed arrays become empty lists."""
    return EntityExtractionResult(
        skills=string_list(data.get("skills")),
        experience=string_list(data.get("experience")),
        education=string_list(data.get("education")),
    )
