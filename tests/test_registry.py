import httpx

from mvnfetch.modules.artifactfetch.fileget import HttpTransport, S3Transport, TransportRegistry
from mvnfetch.settings import Settings


def test_default_registry_maps_s3_and_falls_back_to_http():
    settings = Settings(_env_file=None, s3_region="eu-central-1")
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    registry = TransportRegistry.default(settings, client=client)

    assert isinstance(registry.for_url("s3://bucket/repo/"), S3Transport)
    assert isinstance(registry.for_url("https://repo1.maven.org/maven2/"), HttpTransport)
    assert isinstance(registry.for_url("ftp://mirror/maven/"), HttpTransport)
    assert registry.for_url("s3://bucket/repo/").resolve_region() == "eu-central-1"


def test_close_closes_each_transport_once():
    class Closable:
        def __init__(self):
            self.closed = 0

        def fetch(self, url, user=None, password=None):
            raise NotImplementedError

        def close(self):
            self.closed += 1

    fallback = Closable()
    s3 = Closable()
    registry = TransportRegistry(fallback)
    registry.register("s3", s3)
    registry.register("http", fallback)

    registry.close()

    assert fallback.closed == 1
    assert s3.closed == 1
