"""Exception definitions for site-deploy API"""

from ..constants import ErrorCode


class SiteDeployError(Exception):
    """Base exception for site-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(SiteDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class SourceNotFoundError(SiteDeployError):
    """Source directory missing or not a directory"""

    def __init__(self, source_dir: str):
        message = f"Source directory not found: {source_dir}"
        super().__init__(message, ErrorCode.SOURCE_NOT_FOUND)
        self.source_dir = source_dir


class HashError(SiteDeployError):
    """A local file could not be read while hashing"""

    def __init__(self, file_path: str, reason: str):
        message = f"Failed to hash {file_path}: {reason}"
        super().__init__(message, ErrorCode.HASH_FAILED)
        self.file_path = file_path


class UploadError(SiteDeployError):
    """A single file upload failed; the batch is aborted"""

    def __init__(self, local_path: str, remote_path: str, uploaded: list = None):
        message = f"Failed to upload {local_path} to {remote_path}"
        super().__init__(message, ErrorCode.UPLOAD_FAILED)
        self.local_path = local_path
        self.remote_path = remote_path
        self.uploaded = list(uploaded or [])


class ManifestPublishError(SiteDeployError):
    """The new manifest could not be published"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MANIFEST_PUBLISH_FAILED)


class StorageError(SiteDeployError):
    """Storage backend error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.STORAGE_CONNECTION_FAILED)


class ValidationError(SiteDeployError):
    """Validation error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MANIFEST_VALIDATION_FAILED)

