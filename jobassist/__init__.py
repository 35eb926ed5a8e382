"""
Job Search Assistant Backend.

Core components:
- sources: Per-provider job listing adapters
- search: Concurrent aggregation and de-duplication
- generation: Cover letters, interview questions, resume keywords (Gemini)
- tools: Resume text extraction
- api: FastAPI application
"""
