import sys
from pathlib import Path

import pytest

# Make the top-level modules (app, passphrase, strength_check) importable
# when running pytest from a plain checkout.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def app():
    from app import create_app

    return create_app({
        'TESTING': True,
        'WTF_CSRF_ENABLED': False,
        'RATELIMIT_ENABLED': False,
    })


@pytest.fixture
def client(app):
    return app.test_client()
