"""
Pytest configuration and fixtures.
Every test gets a fresh application and therefore a fresh hotel.
"""

import os
import pytest

# Set the environment BEFORE importing app
os.environ['FLASK_ENV'] = 'test'


@pytest.fixture
def app():
    """Create test application with a fresh 300-room hotel."""
    from app import create_app

    app = create_app('test')
    app.config['TESTING'] = True

    with app.app_context():
        yield app


@pytest.fixture
def hotel(app):
    """Hotel service of the test application."""
    return app.extensions['hotel']


@pytest.fixture
def runner(app):
    """Create test CLI runner."""
    return app.test_cli_runner()
