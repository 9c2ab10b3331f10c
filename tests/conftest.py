import os
from types import SimpleNamespace

import pytest


def pytest_configure(config):
    # Fake AWS environment so boto3/moto never reach real AWS
    os.environ.setdefault("AWS_REGION", "us-east-1")
    os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
    os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
    os.environ.setdefault("LOG_LEVEL", "DEBUG")

    # Handlers under test use the in-memory store unless a test says otherwise
    os.environ.pop("WISHES_DATA_SOURCE", None)


@pytest.fixture(autouse=True)
def reset_cached_state():
    """
    Reset the cached S3 client and wish store before and after each test.

    Without this, state mutated by one test (or a client created outside a
    moto context) would leak into the next.
    """
    from src.aws.clients import reset_clients
    from src.wishes.factory import reset_store

    reset_clients()
    reset_store()
    yield
    reset_clients()
    reset_store()


@pytest.fixture
def lambda_context():
    return SimpleNamespace(aws_request_id="req-1234567890", function_name="wishes")
