"""
AI Playground backend package.

This package contains all application source code organized by responsibility:
- api/          : FastAPI routes and HTTP handling
- core/         : Configuration, logging, errors and cross-cutting utilities
- services/     : Business logic, one service per demo product
- llm/          : OpenAI integration and prompt management
- integrations/ : Third-party HTTP APIs (Google Places, n8n)
- catalog/      : Static product catalog shown on the landing page
- models/       : Pydantic models for request/response schemas
"""

__version__ = "0.3.0"
