"""
Interview preparation: likely questions for one job, grounded in the resume.
"""

import logging

from jobassist.generation.gemini import GeminiClient, GenerationSettings
from jobassist.generation.schemas import JobDetails

logger = logging.getLogger(__name__)

INTERVIEW_SETTINGS = GenerationSettings(temperature=0.6, max_output_tokens=800)

INTERVIEW_PROMPT = """You are an interview preparation assistant. Based on the provided job description and applicant's resume, generate a list of 5-7 potential interview questions.
These questions should help the applicant prepare for an interview for this specific role.
Include a mix of:
1. Behavioral questions ("Tell me about a time...").
2. Situational questions ("How would you handle X...?").
3. Technical questions relevant to skills in the job description and resume.
4. Questions about specific projects or experiences from the resume that align with the job.

Applicant's Resume:
---
{resume_text}
---

Job Description:
---
Job Title: {title}
Company: {company}
Description: {description}
---

Format the output as a numbered list. Each question should be on a new line.
Example:
1. Can you describe a challenging project from your resume and how it relates to our needs for this role?
"""


def build_interview_prompt(job: JobDetails, resume_text: str) -> str:
    return INTERVIEW_PROMPT.format(
        resume_text=resume_text,
        title=job.title,
        company=job.company,
        description=job.description,
    )


async def generate_interview_questions(client: GeminiClient, job: JobDetails, resume_text: str) -> str:
    questions = await client.generate(build_interview_prompt(job, resume_text), INTERVIEW_SETTINGS)
    logger.info(f"Generated interview questions for {job.title} at {job.company}")
    return questions
