"""Tests for storage backends."""

import asyncio
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from site_deploy.api.exceptions import StorageError
from site_deploy.models import TargetConfig
from site_deploy.storage import (
    BOSStorage,
    FilesystemStorage,
    GCSStorage,
    S3Storage,
    StorageFactory,
)


@pytest.fixture
def page(tmp_path: Path) -> Path:
    path = tmp_path / "team.html"
    path.write_text("<html>team</html>")
    return path


class TestFilesystemStorage:
    """Tests for the local directory backend."""

    def test_upload_copies_and_records_headers(self, tmp_path: Path, page: Path) -> None:
        """Test uploads land under the prefix with their headers recorded."""
        storage = FilesystemStorage({"path": str(tmp_path / "bucket"), "prefix": "/site/"})

        async def upload():
            async with storage:
                return await storage.upload(page, "about/team", "text/html", "Cache-Control: max-age=1")

        assert asyncio.run(upload())
        assert (tmp_path / "bucket" / "site" / "about" / "team").read_text() == "<html>team</html>"
        assert storage.load_headers() == {
            "site/about/team": {"Content-Type": "text/html", "Cache-Control": "max-age=1"}
        }

    def test_content_type_inferred(self, tmp_path: Path) -> None:
        source = tmp_path / "logo.png"
        source.write_bytes(b"png")
        storage = FilesystemStorage({"path": str(tmp_path / "bucket")})

        assert asyncio.run(storage.upload(source, "img/logo.png"))
        assert storage.load_headers()["img/logo.png"] == {"Content-Type": "image/png"}

    def test_describe_is_file_uri(self, tmp_path: Path) -> None:
        storage = FilesystemStorage({"path": str(tmp_path / "bucket")})

        assert storage.describe("files.json") == (tmp_path / "bucket" / "files.json").resolve().as_uri()

    def test_missing_source_returns_false(self, tmp_path: Path) -> None:
        storage = FilesystemStorage({"path": str(tmp_path / "bucket")})

        assert asyncio.run(storage.upload(tmp_path / "missing.css", "missing.css")) is False

    def test_requires_path(self) -> None:
        with pytest.raises(StorageError):
            FilesystemStorage({})


class TestGCSStorage:
    """Tests for the gsutil backend."""

    def test_build_command(self) -> None:
        """Test headers are passed as gsutil -h options before cp."""
        storage = GCSStorage({"bucket": "www.example.com"})

        command = storage.build_command(Path("public/about.html"), "about", "text/html", "Cache-Control: max-age=1")

        assert command == [
            "gsutil",
            "-h", "Content-Type:text/html",
            "-h", "Cache-Control:max-age=1",
            "cp", str(Path("public/about.html")), "gs://www.example.com/about",
        ]

    def test_build_command_without_content_type(self) -> None:
        storage = GCSStorage({"bucket": "b", "prefix": "v2"})

        command = storage.build_command(Path("app.js"), "app.js", None, "Cache-Control: max-age=31536000")

        assert command == ["gsutil", "-h", "Cache-Control:max-age=31536000", "cp", "app.js", "gs://b/v2/app.js"]

    def test_upload_runs_gsutil(self, mocker: MockerFixture, page: Path) -> None:
        """Test a zero exit status is a successful upload."""
        mocker.patch("site_deploy.storage.gcs.shutil.which", return_value="/usr/bin/gsutil")
        process = mocker.Mock(returncode=0)
        process.communicate = mocker.AsyncMock(return_value=(b"", b""))
        spawn = mocker.patch("asyncio.create_subprocess_exec", new=mocker.AsyncMock(return_value=process))

        storage = GCSStorage({"bucket": "b"})

        assert asyncio.run(storage.upload(page, "about/team", "text/html", "Cache-Control: max-age=1"))
        args = spawn.call_args.args
        assert args[0] == "/usr/bin/gsutil"
        assert args[-1] == "gs://b/about/team"

    def test_upload_failure_returns_false(self, mocker: MockerFixture, page: Path) -> None:
        mocker.patch("site_deploy.storage.gcs.shutil.which", return_value="/usr/bin/gsutil")
        process = mocker.Mock(returncode=1)
        process.communicate = mocker.AsyncMock(return_value=(b"", b"AccessDeniedException: 403"))
        mocker.patch("asyncio.create_subprocess_exec", new=mocker.AsyncMock(return_value=process))

        storage = GCSStorage({"bucket": "b"})

        assert asyncio.run(storage.upload(page, "about/team")) is False

    def test_missing_gsutil(self, mocker: MockerFixture) -> None:
        mocker.patch("site_deploy.storage.gcs.shutil.which", return_value=None)

        with pytest.raises(StorageError):
            asyncio.run(GCSStorage({"bucket": "b"}).initialize())


class TestS3Storage:
    """Tests for the boto3 backend."""

    def test_build_extra_args(self, page: Path) -> None:
        storage = S3Storage({"bucket": "b"})

        assert storage.build_extra_args(page, None, "Cache-Control: max-age=1") == {
            "ContentType": "text/html",
            "CacheControl": "max-age=1",
        }
        assert storage.build_extra_args(Path("blob"), None, None) == {}

    def test_initialize_builds_client(self, mocker: MockerFixture) -> None:
        session = mocker.patch("boto3.session.Session")
        storage = S3Storage({
            "bucket": "b",
            "access_key": "AK",
            "secret_key": "SK",
            "region": "eu-west-1",
            "endpoint": "https://s3.example.com",
        })

        asyncio.run(storage.initialize())

        session.assert_called_once_with(
            aws_access_key_id="AK",
            aws_secret_access_key="SK",
            region_name="eu-west-1"
        )
        session.return_value.client.assert_called_once_with("s3", endpoint_url="https://s3.example.com")

    def test_upload(self, mocker: MockerFixture, page: Path) -> None:
        """Test upload_file receives the prefixed key and headers."""
        client = mocker.Mock()
        mocker.patch("boto3.session.Session").return_value.client.return_value = client
        storage = S3Storage({"bucket": "b", "prefix": "site"})

        assert asyncio.run(storage.upload(page, "about/team", "text/html", "Cache-Control: max-age=1"))
        client.upload_file.assert_called_once_with(
            str(page), "b", "site/about/team",
            ExtraArgs={"ContentType": "text/html", "CacheControl": "max-age=1"}
        )

    def test_upload_error_returns_false(self, mocker: MockerFixture, page: Path) -> None:
        client = mocker.Mock()
        client.upload_file.side_effect = RuntimeError("denied")
        mocker.patch("boto3.session.Session").return_value.client.return_value = client

        assert asyncio.run(S3Storage({"bucket": "b"}).upload(page, "x")) is False


class TestBOSStorage:
    """Tests for the Baidu BOS backend."""

    def test_upload_passes_cache_header(self, mocker: MockerFixture, page: Path) -> None:
        client = mocker.Mock()
        mocker.patch("baidubce.services.bos.bos_client.BosClient", return_value=client)
        storage = BOSStorage({"bucket": "b", "access_key": "AK", "secret_key": "SK"})

        assert asyncio.run(storage.upload(page, "about/team", "text/html", "Cache-Control: max-age=1"))
        client.head_bucket.assert_called_once_with("b")
        client.put_object_from_file.assert_called_once_with(
            "b", "about/team", str(page),
            content_type="text/html",
            user_headers={"Cache-Control": "max-age=1"}
        )

    def test_describe(self) -> None:
        assert BOSStorage({"bucket": "b"}).describe("files.json") == "bos://b/files.json"


class TestStorageFactory:
    """Tests for backend creation from target configuration."""

    @pytest.mark.parametrize(
        "target, backend",
        [
            (TargetConfig(type="filesystem", path="/tmp/site"), FilesystemStorage),
            (TargetConfig(type="gcs", bucket="b"), GCSStorage),
            (TargetConfig(type="s3", bucket="b", region="us-east-1"), S3Storage),
            (TargetConfig(type="bos", bucket="b"), BOSStorage),
        ],
    )
    def test_create_from_config(self, target: TargetConfig, backend) -> None:
        assert isinstance(StorageFactory.create_from_config(target), backend)

    def test_prefix_and_options_passed(self) -> None:
        target = TargetConfig(type="gcs", bucket="b", prefix="/v2/", options={"gsutil": "/opt/gsutil"})

        storage = StorageFactory.create_from_config(target)

        assert storage.prefix == "v2"
        assert storage.gsutil == "/opt/gsutil"

    def test_supported_types(self) -> None:
        assert set(StorageFactory.get_supported_types()) == {"filesystem", "gcs", "s3", "bos"}
