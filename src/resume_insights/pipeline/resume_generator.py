"""Resume drafting from structured personal and professional details."""

from __future__ import annotations

from resume_insights.clients.llm_client import LLMClient
from resume_insights.errors import GenerationError
from resume_insights.models.generation import GeneratedResume, ResumeGenerationRequest
from resume_insights.pipeline.flow import invoke_text
from resume_insights.utils.json_parser import strip_code_fences

FAILURE_MESSAGE = "AI failed to generate resume content."

SYSTEM_PROMPT = """\
You are an expert resume writer. You write resumes in Markdown, structured \
with standard sections: Contact Info, Summary/Objective, Skills, Experience, \
Education.

Writing rules:
1. Use only the facts provided. Never invent employers, dates, degrees or numbers.
2. Start each section with a level-2 Markdown heading (## Skills, ## Experience, ...).
3. Use bullet points for lists within Experience and Skills.
4. Match the requested tone.
5. Output the resume Markdown only, without commentary or code fences."""

TONE_GUIDANCE = {
    "professional": "Formal, concise and achievement-focused.",
    "creative": "Distinctive voice and engaging phrasing while staying credible.",
    "technical": "Precise, detail-rich, emphasizing tools, systems and measurable impact.",
}


class ResumeGenerator:
    def __init__(
        self,
        llm: LLMClient,
        model: str = "claude-sonnet-4-5-20250929",
        max_tokens: int = 4096,
    ):
        self.llm = llm
        self.model = model
        self.max_tokens = max_tokens

    async def generate(self, request: ResumeGenerationRequest) -> GeneratedResume:
        """Draft a Markdown resume, optionally tailored to a job description."""
        tone = request.tone.value
        if request.target_job_description:
            targeting = f"""Tailor the resume to strongly align with this job description:
<job_description>
{request.target_job_description}
</job_description>
Highlight the relevant skills and experiences it mentions and use its keywords \
where appropriate. Start with a summary or objective targeting this role."""
        else:
            targeting = (
                "Create a general-purpose resume suitable for various professional roles. "
                "Start with a concise professional summary."
            )

        prompt = f"""Generate a resume from the following details.

Full Name: {request.full_name}
Contact Info: {request.contact_info}
Skills: {request.skills}
Experience: {request.experience}
Education: {request.education}
Tone: {tone} ({TONE_GUIDANCE[tone]})

{targeting}

Ensure the output is well-formatted Markdown."""

        text = await invoke_text(
            self.llm,
            prompt=prompt,
            system=SYSTEM_PROMPT,
            model=self.model,
            failure_message=FAILURE_MESSAGE,
            temperature=0.3,
            max_tokens=self.max_tokens,
        )
        resume_text = strip_code_fences(text)
        if not resume_text:
            raise GenerationError(FAILURE_MESSAGE)
        return GeneratedResume(resume_text=resume_text)
