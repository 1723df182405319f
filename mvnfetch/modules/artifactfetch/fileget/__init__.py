from .base import FetchResult, Transport
from .http_transport import HttpTransport
from .registry import TransportRegistry
from .s3_transport import S3Transport, split_s3_url

__all__ = [
    "FetchResult",
    "Transport",
    "HttpTransport",
    "S3Transport",
    "TransportRegistry",
    "split_s3_url",
]
