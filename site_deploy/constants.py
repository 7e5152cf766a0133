"""Global constants for site-deploy"""

from enum import Enum

APP_NAME = "site-deploy"
LOG_FORMAT = "%(message)s"

# Project configuration
PROJECT_CONFIG_FILE = ".site-deploy.yaml"

# Published manifest
MANIFEST_FILE_NAME = "files.json"
MANIFEST_CACHE_CONTROL = "Cache-Control: no-cache"
DEFAULT_MANIFEST_TIMEOUT = 10.0  # seconds

# Hashing
DEFAULT_HASH_ALGORITHM = "sha1"
DEFAULT_CHUNK_SIZE = 64 * 1024  # 64KB
DEFAULT_HASH_WORKERS = 8

# Cache control
CACHE_CONTROL_HEADER = "Cache-Control"
DEFAULT_SHORT_MAX_AGE = 1  # html pages, robots.txt, sitemaps
DEFAULT_LONG_MAX_AGE = 31536000  # one year, content-hashed assets
SHORT_LIVED_EXTENSIONS = (".html", ".txt")

# Markup handling
MARKUP_EXTENSION = ".html"
MARKUP_CONTENT_TYPE = "text/html"
SPECIAL_PAGES = ("index.html", "404.html")

# Upload ordering
SCRIPT_STYLE_EXTENSIONS = (".js", ".css")
ORDER_KEY_SCRIPT_STYLE = 0
ORDER_KEY_ASSET = 1
ORDER_KEY_MARKUP = 2

# Common exclude patterns
DEFAULT_EXCLUDE_PATTERNS = [
    ".DS_Store",
    "Thumbs.db",
    "*.tmp",
]


class StorageType(Enum):
    FILESYSTEM = "filesystem"
    GCS = "gcs"
    S3 = "s3"
    BOS = "bos"


SUPPORTED_STORAGE_TYPES = [t.value for t in StorageType]
DEFAULT_STORAGE_TYPE = StorageType.GCS.value


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "SD001"
    SOURCE_NOT_FOUND = "SD002"
    HASH_FAILED = "SD003"
    UPLOAD_FAILED = "SD004"
    MANIFEST_PUBLISH_FAILED = "SD005"
    STORAGE_CONNECTION_FAILED = "SD006"
    MANIFEST_VALIDATION_FAILED = "SD007"


# Environment variables
ENV_CONFIG_PATH = "SITE_DEPLOY_CONFIG"
ENV_BASE_URL = "SITE_DEPLOY_BASE_URL"
ENV_SOURCE_DIR = "SITE_DEPLOY_SOURCE_DIR"
ENV_BUCKET = "SITE_DEPLOY_BUCKET"
ENV_LOG_LEVEL = "SITE_DEPLOY_LOG_LEVEL"
ENV_BOS_ACCESS_KEY = "BOS_AK"
ENV_BOS_SECRET_KEY = "BOS_SK"
ENV_BOS_ENDPOINT = "BOS_ENDPOINT"
ENV_S3_ACCESS_KEY = "AWS_ACCESS_KEY_ID"
ENV_S3_SECRET_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_S3_REGION = "AWS_DEFAULT_REGION"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_ARROW = "->"

# Messages templates
MSG_FILE_DEPLOYED = "({count}/{total}) Deployed: ./{source} {arrow} {target}"
MSG_NO_CHANGES = "No changes to deploy. All done."
MSG_DEPLOY_FINISHED = f"{EMOJI_SUCCESS} Deploy finished!"

# Interactive prompts
PROMPT_CONFIRM_DEPLOY = "Do you want to continue with the deploy?"
