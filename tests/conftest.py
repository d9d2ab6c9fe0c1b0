import os

# Keep test runs from writing logs/app.log
os.environ['LOG_FILE'] = ''

import pytest


@pytest.fixture
def client():
    from app import app
    return app.test_client()
