"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- A small landing-page design shared by adapter, dispatcher and CLI tests
- A fixed export context for deterministic payloads
"""

from datetime import UTC, datetime

import pytest
from dotenv import load_dotenv

from design_export.adapters import ExportContext
from design_export.model import CanonicalDesign

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Design Fixtures
# =============================================================================


@pytest.fixture
def hero_component() -> dict:
    """A single hero component in wire spelling."""
    return {
        "id": "comp-1",
        "type": "hero",
        "title": "Hero Section",
        "content": "Welcome to our website",
        "x": 0,
        "y": 0,
        "width": 100,
        "height": 400,
        "bgColor": "#3B82F6",
        "textColor": "#FFFFFF",
        "properties": {},
    }


@pytest.fixture
def components(hero_component) -> list[dict]:
    """Three stacked components with distinct ids and valid colors."""
    return [
        hero_component,
        {
            "id": "comp-2",
            "type": "features",
            "title": "Features",
            "content": "Fast, simple & reliable",
            "x": 0,
            "y": 400,
            "width": 100,
            "height": 300,
            "bgColor": "#F3F4F6",
            "textColor": "#111827",
            "properties": {"columns": 3},
        },
        {
            "id": "comp-3",
            "type": "cta",
            "title": "Get Started",
            "content": "Sign up today",
            "x": 10,
            "y": 700,
            "width": 80,
            "height": 200,
            "bgColor": "#10B981",
            "textColor": "#FFFFFF",
            "properties": {"buttonLabel": "Sign up"},
        },
    ]


@pytest.fixture
def design_tokens() -> dict:
    """Token set with the three declared groups."""
    return {
        "colors": {
            "primary": "#3B82F6",
            "secondary": "#10B981",
            "accent": "#F59E0B",
        },
        "typography": {
            "fontFamily": "Inter, sans-serif",
            "headingSize": "2.5rem",
            "bodySize": "1rem",
        },
        "spacing": {
            "sm": "0.5rem",
            "md": "1rem",
            "lg": "2rem",
        },
    }


@pytest.fixture
def design(components, design_tokens) -> CanonicalDesign:
    """Validated design built from the component and token fixtures."""
    return CanonicalDesign.build(components, design_tokens)


# =============================================================================
# Export Context
# =============================================================================


@pytest.fixture
def export_context() -> ExportContext:
    """Export context with a fixed timestamp."""
    return ExportContext(
        project_name="Test Project",
        exported_at=datetime(2025, 1, 15, 10, 30, tzinfo=UTC),
    )
