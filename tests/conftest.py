"""
Pytest configuration and fixtures for test isolation.
"""
import os

import pytest

from fizop.utils.logging_config import logging_config


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging():
    """Release handlers installed by CLI invocations."""
    yield
    logging_config.reset()


@pytest.fixture
def bilingual_fizop():
    return {
        "flour": {"label": {"en": "flour", "fr": "farine"}},
        "water": {"label": {"en": "water", "fr": "eau"}},
    }


@pytest.fixture
def png_data_uri():
    return (
        "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAUAAAAFCAYAAACNbyblAAAAHElEQVQI12P4"
        "//8/w38GIAXDIBKE0DHxgljNBAAO9TXL0Y4OHwAAAABJRU5ErkJggg=="
    )


@pytest.fixture
def image_url():
    return "https://en.wikipedia.org/static/images/project-logos/enwiki.png"
