import logging

import boto3
import pytest
from moto import mock_aws

from mvnfetch.modules.artifactfetch.fileget import S3Transport, split_s3_url
from mvnfetch.modules.artifactfetch.util.exceptions import FetchError

BUCKET = "my-bucket"
KEY = "repo/org/example/lib/1.0/lib-1.0.jar"
URL = f"s3://{BUCKET}/{KEY}"


class StaticRegionFetcher:
    def __init__(self, region):
        self.region = region
        self.calls = 0

    def retrieve_region(self):
        self.calls += 1
        return self.region


class BrokenRegionFetcher:
    def retrieve_region(self):
        raise RuntimeError("metadata service unreachable")


def _create_object(region: str, body: bytes) -> None:
    client = boto3.client("s3", region_name=region)
    client.create_bucket(Bucket=BUCKET, CreateBucketConfiguration={"LocationConstraint": region})
    client.put_object(Bucket=BUCKET, Key=KEY, Body=body)


def test_split_s3_url():
    assert split_s3_url(URL) == (BUCKET, KEY)


@pytest.mark.parametrize("url", ["https://my-bucket/key", "s3://my-bucket/", "s3:///key"])
def test_split_s3_url_rejects_incomplete(url):
    with pytest.raises(FetchError):
        split_s3_url(url)


def test_region_from_instance_metadata():
    fetcher = StaticRegionFetcher("eu-west-1")
    transport = S3Transport(region_fetcher=fetcher)

    assert transport.resolve_region() == "eu-west-1"
    assert transport.resolve_region() == "eu-west-1"
    assert fetcher.calls == 1


def test_region_falls_back_when_metadata_has_none(caplog):
    caplog.set_level(logging.WARNING, logger="S3Transport")
    transport = S3Transport(region_fetcher=StaticRegionFetcher(None))

    assert transport.resolve_region() == "ap-southeast-1"
    assert "falling back to ap-southeast-1" in caplog.text


def test_region_lookup_errors_are_swallowed(caplog):
    caplog.set_level(logging.WARNING, logger="S3Transport")
    transport = S3Transport(region_fetcher=BrokenRegionFetcher(), default_region="us-west-2")

    assert transport.resolve_region() == "us-west-2"
    assert "metadata service unreachable" in caplog.text


def test_explicit_region_skips_metadata():
    fetcher = StaticRegionFetcher("eu-west-1")
    transport = S3Transport(region="us-east-2", region_fetcher=fetcher)

    assert transport.resolve_region() == "us-east-2"
    assert fetcher.calls == 0


def test_fetch_reads_object(aws_credentials):
    with mock_aws():
        _create_object("ap-southeast-1", b"jar-bytes")
        transport = S3Transport(region_fetcher=StaticRegionFetcher(None), chunk_size=4)

        with transport.fetch(URL, "ignored", "ignored") as result:
            assert result.content_length == len(b"jar-bytes")
            assert b"".join(result.iter_bytes()) == b"jar-bytes"
        transport.close()

    assert result.closed


def test_fetch_missing_object_raises_fetch_error(aws_credentials):
    with mock_aws():
        _create_object("eu-west-1", b"jar-bytes")
        transport = S3Transport(region_fetcher=StaticRegionFetcher("eu-west-1"))

        with pytest.raises(FetchError) as excinfo:
            transport.fetch(f"s3://{BUCKET}/repo/missing.jar")

    assert excinfo.value.url == f"s3://{BUCKET}/repo/missing.jar"
