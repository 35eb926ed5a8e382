"""
Job Search Assistant - CLI Entry Point.

Searches every configured provider from the terminal and generates cover
letters and interview questions for the listed jobs.
"""

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from jobassist.config import Settings  # noqa: E402
from jobassist.generation import (  # noqa: E402
    GeminiClient,
    GenerationError,
    JobDetails,
    extract_resume_keywords,
    generate_cover_letter,
    generate_interview_questions,
)
from jobassist.search import JobAggregator  # noqa: E402
from jobassist.sources import JobListing, SearchParams  # noqa: E402
from jobassist.tools import UnsupportedDocumentError, parse_resume_from_path  # noqa: E402


def load_resume(path: Path) -> str | None:
    """Read a resume file, printing why when it cannot be used."""
    if not path.exists():
        print(f"Not found: {path}")
        return None
    try:
        text = parse_resume_from_path(str(path))
    except UnsupportedDocumentError as e:
        print(f"Error: {e}")
        return None
    except Exception as e:
        print(f"Failed to read resume: {e}")
        return None
    print(f"Extracted {len(text)} chars from {path.name}")
    return text


def print_jobs(jobs: list[JobListing]) -> None:
    if not jobs:
        print("No jobs found.")
        return
    for i, job in enumerate(jobs, 1):
        print(f"{i:>3}. {job.title} - {job.company} ({job.location}) [{job.source_api}]")
        if job.snippet:
            print(f"     {job.snippet}")
        if job.url:
            print(f"     {job.url}")


def pick_job(jobs: list[JobListing], arg: str) -> JobListing | None:
    try:
        index = int(arg) - 1
    except ValueError:
        print("Usage: /letter <n> or /questions <n>")
        return None
    if not 0 <= index < len(jobs):
        print(f"No job #{arg} in the current results")
        return None
    return jobs[index]


async def run(settings: Settings, resume_path: Path | None) -> None:
    aggregator = JobAggregator.from_settings(settings)
    gemini = GeminiClient.from_settings(settings)

    configured = [s.name for s in aggregator.configured_sources]
    print(f"Providers: {', '.join(configured) if configured else 'none configured'}")
    if not gemini.is_configured:
        print("Warning: GEMINI_API_KEY not set, generation commands are disabled")

    resume_text = load_resume(resume_path) if resume_path else None
    defaults = {"keywords": "", "skills": "", "location": ""}

    async def prefill(text: str) -> None:
        if not gemini.is_configured:
            return
        try:
            keywords = await extract_resume_keywords(gemini, text, settings.default_resume_location)
        except GenerationError as e:
            print(f"Could not extract keywords: {e}")
            return
        defaults.update(keywords=keywords.job_title_keywords, skills=keywords.skills, location=keywords.location)
        print(f"Suggested: {keywords.job_title_keywords or '-'} | {keywords.skills or '-'} | {keywords.location}")

    if resume_text:
        await prefill(resume_text)

    jobs: list[JobListing] = []
    print("Commands: /search, /letter <n>, /questions <n>, /resume <path>, /quit")
    print("-" * 40)

    while True:
        try:
            user_input = input("> ").strip()
        except (KeyboardInterrupt, EOFError):
            break
        if not user_input:
            continue

        command, _, arg = user_input.partition(" ")
        arg = arg.strip()

        if command == "/quit":
            break

        if command == "/resume":
            text = load_resume(Path(arg))
            if text:
                resume_text = text
                await prefill(text)
            continue

        if command in ("/letter", "/questions"):
            job = pick_job(jobs, arg)
            if job is None:
                continue
            if not resume_text:
                print("Load a resume first: /resume <path>")
                continue
            details = JobDetails(title=job.title, company=job.company, description=job.description)
            try:
                if command == "/letter":
                    output = await generate_cover_letter(gemini, details, resume_text)
                else:
                    output = await generate_interview_questions(gemini, details, resume_text)
            except GenerationError as e:
                print(f"Error: {e}")
                continue
            print(f"\n{output}\n")
            continue

        if command != "/search":
            print("Unknown command")
            continue

        keywords = input(f"Keywords [{defaults['keywords']}]: ").strip() or defaults["keywords"]
        location = input(f"Location [{defaults['location']}]: ").strip() or defaults["location"]
        skills = input(f"Skills [{defaults['skills']}]: ").strip() or defaults["skills"]
        page = input("Page [1]: ").strip() or "1"
        if not keywords or not location:
            print("Keywords and Location are required.")
            continue
        if not page.isdigit() or int(page) < 1:
            print("Page must be a positive number.")
            continue

        params = SearchParams(keywords=keywords, location=location, skills=skills or None, page=int(page))
        print("Searching...")
        jobs = await aggregator.search(params)
        print_jobs(jobs)


def main():
    """Run the job search assistant CLI."""
    print("Job Search Assistant")
    print("=" * 40)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    resume_path = None
    if len(sys.argv) > 1:
        resume_path = Path(" ".join(sys.argv[1:]))  # Join all args for filenames with spaces

    asyncio.run(run(settings, resume_path))
    print("Goodbye!")


if __name__ == "__main__":
    main()
