"""Constants shared across mvnfetch."""

MAVEN_CENTRAL_URL = "https://repo1.maven.org/maven2/"

DEFAULT_EXTENSION = "jar"

COORDINATE_SEPARATOR = ":"
EXTENSION_SEPARATOR = "@"

S3_SCHEME = "s3"
S3_DEFAULT_REGION = "ap-southeast-1"

DOWNLOAD_CHUNK_SIZE = 65536
