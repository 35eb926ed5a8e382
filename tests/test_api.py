import httpx
import pytest
from fastapi.testclient import TestClient

from helpers import GEMINI_HOST, JSEARCH_HOST, LINKEDIN_HOST, UPWORK_HOST, FakeUpstream, gemini_text, make_settings
from jobassist.api.app import app
from jobassist.api.deps import get_http_client, get_settings

JOB_DETAILS = {"title": "Backend Engineer", "company": "Acme", "description": "Build APIs."}
RESUME = "Jane Doe, Python developer"


@pytest.fixture
def fake_upstream():
    return FakeUpstream()


@pytest.fixture
def client_factory(fake_upstream):
    """Build a TestClient against fake upstreams with optional settings overrides."""

    def build(**overrides):
        app_settings = make_settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: app_settings
        app.dependency_overrides[get_http_client] = fake_upstream.client
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory):
    with client_factory() as c:
        yield c


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


# --- search ---


def test_search_merges_and_dedupes(client, fake_upstream):
    fake_upstream.on(
        JSEARCH_HOST,
        {"data": [{"job_id": "j1", "job_title": "Engineer", "employer_name": "Acme", "job_city": "NYC"}]},
    )
    fake_upstream.on(UPWORK_HOST, httpx.Response(500, json={"message": "down"}))
    fake_upstream.on(
        LINKEDIN_HOST,
        [
            {"job_id": "l1", "job_title": "engineer", "company_name": "ACME", "job_location": "nyc, NY"},
            {"job_id": "l2", "job_title": "Designer", "company_name": "Initech", "job_location": "Remote"},
        ],
    )

    response = client.post("/api/search-jobs", json={"keywords": "engineer", "location": "NYC", "skills": "python"})

    assert response.status_code == 200
    jobs = response.json()
    assert [j["id"] for j in jobs] == ["jsearch-j1", "linkedinpost-l2"]
    assert jobs[0]["sourceApi"] == "JSearch"
    assert jobs[0]["description"] == "No description available."
    assert "salary" not in jobs[0]


def test_search_page_is_forwarded(client, fake_upstream):
    fake_upstream.on(JSEARCH_HOST, {"data": []})
    fake_upstream.on(UPWORK_HOST, [])
    fake_upstream.on(LINKEDIN_HOST, [])

    response = client.post("/api/search-jobs", json={"keywords": "qa", "location": "Pune", "page": 3})

    assert response.status_code == 200
    assert response.json() == []
    (request,) = fake_upstream.requests_to(JSEARCH_HOST)
    assert request.url.params["page"] == "3"


@pytest.mark.parametrize(
    "body",
    [
        {"keywords": "engineer"},
        {"location": "NYC"},
        {"keywords": "   ", "location": "NYC"},
        {},
    ],
)
def test_search_requires_keywords_and_location(client, fake_upstream, body):
    response = client.post("/api/search-jobs", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "Keywords and Location are required."}
    assert fake_upstream.requests == []


def test_search_rejects_bad_page(client):
    response = client.post("/api/search-jobs", json={"keywords": "a", "location": "b", "page": 0})

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid request: page")


def test_search_without_rapidapi_key_is_empty(client_factory, fake_upstream):
    with client_factory(rapidapi_key="") as c:
        response = c.post("/api/search-jobs", json={"keywords": "a", "location": "b"})

    assert response.status_code == 200
    assert response.json() == []
    assert fake_upstream.requests == []


def test_wrong_method_returns_message(client):
    response = client.get("/api/search-jobs")

    assert response.status_code == 405
    assert response.json() == {"message": "Method Not Allowed"}


def test_unknown_route_returns_message(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert "message" in response.json()


# --- generation ---


def test_cover_letter(client, fake_upstream):
    fake_upstream.on(GEMINI_HOST, gemini_text("Dear Hiring Manager,\n\nHello."))

    response = client.post("/api/generate-cover-letter", json={"jobDetails": JOB_DETAILS, "resumeText": RESUME})

    assert response.status_code == 200
    assert response.json() == {"coverLetter": "Dear Hiring Manager,\n\nHello."}


@pytest.mark.parametrize(
    "body",
    [
        {"resumeText": RESUME},
        {"jobDetails": JOB_DETAILS},
        {"jobDetails": {"title": "Engineer", "company": "Acme"}, "resumeText": RESUME},
        {"jobDetails": JOB_DETAILS, "resumeText": "   "},
    ],
)
def test_cover_letter_requires_fields(client, fake_upstream, body):
    response = client.post("/api/generate-cover-letter", json=body)

    assert response.status_code == 400
    assert response.json()["message"].startswith("Missing required fields")
    assert fake_upstream.requests == []


def test_generation_without_gemini_key(client_factory, fake_upstream):
    with client_factory(gemini_api_key="") as c:
        response = c.post("/api/generate-cover-letter", json={})

    assert response.status_code == 500
    assert response.json() == {"message": "Server configuration error: Gemini API key missing."}
    assert fake_upstream.requests == []


def test_blocked_cover_letter_reports_reason(client, fake_upstream):
    fake_upstream.on(GEMINI_HOST, {"promptFeedback": {"blockReason": "SAFETY"}})

    response = client.post("/api/generate-cover-letter", json={"jobDetails": JOB_DETAILS, "resumeText": RESUME})

    assert response.status_code == 500
    assert response.json() == {"message": "Content generation blocked: SAFETY"}


def test_interview_questions(client, fake_upstream):
    fake_upstream.on(GEMINI_HOST, gemini_text("1. Why Acme?\n2. Describe an API you built."))

    response = client.post(
        "/api/generate-interview-questions", json={"jobDetails": JOB_DETAILS, "resumeText": RESUME}
    )

    assert response.status_code == 200
    assert response.json()["questions"].startswith("1. Why Acme?")


def test_interview_questions_finish_reason(client, fake_upstream):
    fake_upstream.on(GEMINI_HOST, {"candidates": [{"finishReason": "MAX_TOKENS"}]})

    response = client.post(
        "/api/generate-interview-questions", json={"jobDetails": JOB_DETAILS, "resumeText": RESUME}
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Content generation issue: MAX_TOKENS"}


def test_extract_resume_keywords(client_factory, fake_upstream):
    fake_upstream.on(GEMINI_HOST, gemini_text('```json\n{"jobTitleKeywords": "Backend Engineer", "skills": "Python"}\n```'))

    with client_factory(default_resume_location="Remote") as c:
        response = c.post("/api/extract-resume-keywords", json={"resumeText": RESUME})

    assert response.status_code == 200
    assert response.json() == {"jobTitleKeywords": "Backend Engineer", "skills": "Python", "location": "Remote"}


def test_extract_resume_keywords_malformed(client, fake_upstream):
    fake_upstream.on(GEMINI_HOST, gemini_text("Sorry, I cannot help with that."))

    response = client.post("/api/extract-resume-keywords", json={"resumeText": RESUME})

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to parse keyword data from AI response."}


def test_extract_resume_keywords_requires_text(client):
    response = client.post("/api/extract-resume-keywords", json={"resumeText": ""})

    assert response.status_code == 400
    assert response.json() == {"message": "Missing required field: resumeText."}


# --- resume upload ---


def test_parse_resume_txt(client):
    response = client.post(
        "/api/parse-resume",
        files={"resumeFile": ("resume.txt", b"Jane Doe\nPython", "text/plain")},
    )

    assert response.status_code == 200
    assert response.json() == {"text": "Jane Doe\nPython", "fileName": "resume.txt"}


def test_parse_resume_without_file(client):
    response = client.post("/api/parse-resume", data={"other": "x"})

    assert response.status_code == 400
    assert response.json() == {"message": "No file uploaded."}


def test_parse_resume_unsupported_type(client):
    response = client.post(
        "/api/parse-resume",
        files={"resumeFile": ("photo.png", b"\x89PNG", "image/png")},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Unsupported file type: image/png. Please upload PDF, DOCX, or TXT."


def test_parse_resume_too_large(client):
    content = b"a" * (5 * 1024 * 1024 + 1)
    response = client.post("/api/parse-resume", files={"resumeFile": ("big.txt", content, "text/plain")})

    assert response.status_code == 413


def test_parse_resume_corrupt_pdf(client):
    response = client.post(
        "/api/parse-resume",
        files={"resumeFile": ("broken.pdf", b"not a pdf", "application/pdf")},
    )

    assert response.status_code == 500
    assert response.json()["message"].startswith("Failed to parse resume file")


@pytest.mark.parametrize(
    "body",
    [
        {"keywords": None, "location": "NYC"},
        {"keywords": "engineer", "location": None},
    ],
)
def test_search_null_fields_are_missing(client, fake_upstream, body):
    response = client.post("/api/search-jobs", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "Keywords and Location are required."}
    assert fake_upstream.requests == []


def test_cover_letter_null_text_part_reports_finish_reason(client, fake_upstream):
    fake_upstream.on(GEMINI_HOST, {"candidates": [{"content": {"parts": [{"text": None}]}, "finishReason": "SAFETY"}]})

    response = client.post("/api/generate-cover-letter", json={"jobDetails": JOB_DETAILS, "resumeText": RESUME})

    assert response.status_code == 500
    assert response.json() == {"message": "Content generation issue: SAFETY"}
