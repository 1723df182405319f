"""Download Maven artifacts from HTTP(S) or S3 repositories."""

__version__ = "0.1.0"
