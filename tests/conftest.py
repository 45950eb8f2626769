from __future__ import annotations

import pytest

from lottery_consulter import create_app


@pytest.fixture()
def app():
    # No test talks to the real random.org; routes use the local provider.
    return create_app({"TESTING": True, "RANDOM_ORG_ENABLED": False})


@pytest.fixture()
def client(app):
    return app.test_client()
