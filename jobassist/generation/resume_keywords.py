"""
Resume keyword extractor.

Asks the model for a small JSON object used to pre-fill the job search form:
job title keywords, skills and a location.
"""

import logging

from jobassist.generation.gemini import GeminiClient, GenerationSettings, MalformedOutputError
from jobassist.generation.schemas import ResumeKeywords
from jobassist.utils.parser import extract_json

logger = logging.getLogger(__name__)

# Low temperature for structured output
KEYWORD_SETTINGS = GenerationSettings(temperature=0.1, max_output_tokens=300)

KEYWORD_PROMPT = """Analyze the following resume text. Your goal is to extract information to help pre-fill a job search form.
Provide the output as a JSON object with the following keys: "jobTitleKeywords", "skills", and "location".

1.  "jobTitleKeywords": Extract 1-3 potential job titles or primary role keywords from the resume.
    If multiple, separate them with a comma. If none are clear, leave this as an empty string.
    Examples: "Software Engineer, Full Stack Developer", "Product Manager", "Data Analyst"

2.  "skills": Extract relevant technical skills, tools, and methodologies. Return as a comma-separated string.
    Examples: "Python, React, AWS, Docker, Agile, Scrum, Jira"

3.  "location": Infer a primary location (city, state or country) if mentioned. If "remote" is strongly implied or stated, use "Remote".
    If no specific location is found, default to "{default_location}". Do not guess if not explicitly mentioned besides the default.

Resume Text:
---
{resume_text}
---

Return ONLY the JSON object. Do not include any other text, explanations, or markdown formatting.
Example of a valid JSON output:
{{
  "jobTitleKeywords": "Senior Software Engineer, Backend Developer",
  "skills": "Java, Spring Boot, Python, Microservices, Kubernetes, SQL",
  "location": "Bengaluru, India"
}}
Another example:
{{
  "jobTitleKeywords": "UX Designer",
  "skills": "Figma, Adobe XD, User Research, Prototyping",
  "location": "Remote"
}}
"""


def build_keyword_prompt(resume_text: str, default_location: str = "India") -> str:
    return KEYWORD_PROMPT.format(resume_text=resume_text, default_location=default_location)


def parse_keyword_response(text: str, default_location: str = "India") -> ResumeKeywords:
    """
    Parse the model's JSON answer, tolerating code fences around it.

    Raises:
        MalformedOutputError: no JSON object could be parsed
    """
    data = extract_json(text, expect_array=False)
    if not isinstance(data, dict):
        logger.error(f"Failed to parse JSON from keyword response. Raw output: {text[:500]}")
        raise MalformedOutputError("Failed to parse keyword data from AI response.")

    return ResumeKeywords(
        job_title_keywords=_as_text(data.get("jobTitleKeywords")),
        skills=_as_text(data.get("skills")),
        location=_as_text(data.get("location")) or default_location,
    )


def _as_text(value) -> str:
    """Models sometimes answer with a list where a comma-separated string was asked for."""
    if isinstance(value, list):
        return ", ".join(str(v).strip() for v in value if str(v).strip())
    if value is None:
        return ""
    return str(value).strip()


async def extract_resume_keywords(
    client: GeminiClient, resume_text: str, default_location: str = "India"
) -> ResumeKeywords:
    raw = await client.generate(build_keyword_prompt(resume_text, default_location), KEYWORD_SETTINGS)
    keywords = parse_keyword_response(raw, default_location)
    logger.info(f"Extracted keywords: {keywords.job_title_keywords!r}, location {keywords.location!r}")
    return keywords
