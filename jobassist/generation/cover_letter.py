"""
Cover letter writer.

Tailors a 3-4 paragraph cover letter to one job using the applicant's resume.
"""

import logging

from jobassist.generation.gemini import (
    HARM_DANGEROUS_CONTENT,
    HARM_HARASSMENT,
    HARM_HATE_SPEECH,
    HARM_SEXUALLY_EXPLICIT,
    GeminiClient,
    GenerationSettings,
)
from jobassist.generation.schemas import JobDetails

logger = logging.getLogger(__name__)

COVER_LETTER_SETTINGS = GenerationSettings(
    temperature=0.7,
    max_output_tokens=1024,
    top_k=1,
    top_p=1.0,
    safety_categories=(HARM_HARASSMENT, HARM_HATE_SPEECH, HARM_SEXUALLY_EXPLICIT, HARM_DANGEROUS_CONTENT),
)

COVER_LETTER_PROMPT = """You are a professional career advisor. Write a compelling and concise cover letter for the following job application.
The cover letter should be tailored to the specific job description and highlight relevant skills and experiences from the applicant's resume.
The tone should be professional and enthusiastic. Address it to "Hiring Manager" if no specific contact is available.
Focus on 2-3 key alignments between the resume and the job description.
Keep the cover letter to 3-4 paragraphs.
Do not include any placeholder like "[Your Name]" or "[Your Contact Information]".
Start directly with the salutation (e.g., "Dear Hiring Manager,"). End directly before any closing like "Sincerely,".

Applicant's Resume:
--- APPLICANT RESUME ---
{resume_text}
--- END APPLICANT RESUME ---

Job Description:
--- JOB DESCRIPTION ---
Job Title: {title}
Company: {company}
Description: {description}
--- END JOB DESCRIPTION ---

Generate only the cover letter text.
"""


def build_cover_letter_prompt(job: JobDetails, resume_text: str) -> str:
    return COVER_LETTER_PROMPT.format(
        resume_text=resume_text,
        title=job.title,
        company=job.company,
        description=job.description,
    )


async def generate_cover_letter(client: GeminiClient, job: JobDetails, resume_text: str) -> str:
    """Write a cover letter for ``job``. Raises GenerationError on failure."""
    letter = await client.generate(build_cover_letter_prompt(job, resume_text), COVER_LETTER_SETTINGS)
    logger.info(f"Generated cover letter for {job.title} at {job.company} ({len(letter)} chars)")
    return letter
