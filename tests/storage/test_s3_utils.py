import io
import json
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

import src.storage.s3_utils as s3_utils


# ---------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------
@pytest.fixture
def mock_s3(monkeypatch):
    """
    Patch get_s3() to return a mock S3 client.
    """
    mock_client = MagicMock()
    monkeypatch.setattr(s3_utils, "get_s3", lambda: mock_client)
    return mock_client


# ---------------------------------------------------------------------
# parse_s3_uri()
# ---------------------------------------------------------------------
def test_parse_s3_uri():
    assert s3_utils.parse_s3_uri("s3://bucket/data/wishes.json") == (
        "bucket",
        "data/wishes.json",
    )


@pytest.mark.parametrize("uri", ["s3://bucket", "s3://bucket/", "s3:///key", "/tmp/x.json"])
def test_parse_s3_uri_rejects_incomplete(uri):
    with pytest.raises(ValueError):
        s3_utils.parse_s3_uri(uri)


def test_is_s3_uri():
    assert s3_utils.is_s3_uri("s3://b/k")
    assert not s3_utils.is_s3_uri("data/wishes.json")


# ---------------------------------------------------------------------
# read_json_object()
# ---------------------------------------------------------------------
def test_read_json_object_success(mock_s3):
    mock_s3.get_object.return_value = {"Body": io.BytesIO(b'{"wishes": []}')}

    assert s3_utils.read_json_object("bucket", "key.json") == {"wishes": []}
    mock_s3.get_object.assert_called_once_with(Bucket="bucket", Key="key.json")


@pytest.mark.parametrize("code", ["NoSuchKey", "404"])
def test_read_json_object_missing_returns_none(mock_s3, code):
    mock_s3.get_object.side_effect = ClientError({"Error": {"Code": code}}, "GetObject")

    assert s3_utils.read_json_object("bucket", "key.json") is None


def test_read_json_object_other_client_error_raises(mock_s3):
    mock_s3.get_object.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied"}}, "GetObject"
    )

    with pytest.raises(ClientError):
        s3_utils.read_json_object("bucket", "key.json")


def test_read_json_object_invalid_json_raises(mock_s3):
    mock_s3.get_object.return_value = {"Body": io.BytesIO(b"{oops")}

    with pytest.raises(json.JSONDecodeError):
        s3_utils.read_json_object("bucket", "key.json")


# ---------------------------------------------------------------------
# Against moto
# ---------------------------------------------------------------------
@mock_aws
def test_read_json_object_with_moto():
    s3 = boto3.client("s3", region_name="us-east-1")
    s3.create_bucket(Bucket="wish-data")
    s3.put_object(
        Bucket="wish-data",
        Key="wishes.json",
        Body=json.dumps({"wishes": [{"id": "a"}]}).encode("utf-8"),
    )

    assert s3_utils.read_json_object("wish-data", "wishes.json") == {
        "wishes": [{"id": "a"}]
    }
    assert s3_utils.read_json_object("wish-data", "missing.json") is None


def test_read_json_object_rejects_nan(mock_s3):
    mock_s3.get_object.return_value = {"Body": io.BytesIO(b'{"price": Infinity}')}

    with pytest.raises(ValueError):
        s3_utils.read_json_object("bucket", "key.json")
