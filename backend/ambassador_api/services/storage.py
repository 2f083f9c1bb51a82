from __future__ import annotations
import asyncio
import base64
import binascii
import io
import secrets
from datetime import timedelta
from minio import Minio
from minio.error import S3Error
from ambassador_api.config import settings
from ambassador_api.services.codes import now_ms, random_suffix

DEFAULT_CONTENT_TYPE = "image/png"


class UploadTooLarge(Exception):
    pass


def _parse_endpoint(ep: str) -> tuple[str, bool]:
    # Return (host:port, secure)
    secure = ep.startswith("https://")
    host = ep.replace("http://", "").replace("https://", "")
    return host, secure


def decode_upload(file_data: str, max_bytes: int | None = None) -> bytes:
    """
    Decode an inline base64 payload (a leading data: URL prefix is tolerated).
    Raises ValueError on malformed input and UploadTooLarge past the cap.
    """
    limit = settings.upload_max_bytes if max_bytes is None else max_bytes
    if file_data.startswith("data:") and "," in file_data:
        file_data = file_data.split(",", 1)[1]
    try:
        data = base64.b64decode(file_data, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("fileData is not valid base64")
    if len(data) > limit:
        raise UploadTooLarge(f"{len(data)} bytes exceeds {limit}")
    return data


def make_blob_path(file_name: str) -> str:
    """<epoch-ms>-<random>-<name>; unique per upload and a single object key."""
    safe = file_name.replace("/", "_").replace("\\", "_").strip() or "screenshot"
    return f"{now_ms()}-{random_suffix()}-{safe}"


class BlobVault:
    """
    Private screenshot bucket. Objects are write-once; reads only happen through
    presigned GET URLs minted per request. The handle alone grants nothing.
    """

    def __init__(self, client: Minio, bucket: str):
        self._client = client
        self.bucket = bucket

    @classmethod
    def from_settings(cls) -> "BlobVault":
        host, secure = _parse_endpoint(settings.s3_endpoint)
        # explicit region keeps presigning local (no bucket-location lookup)
        client = Minio(
            endpoint=host,
            access_key=settings.s3_access_key,
            secret_key=settings.s3_secret_key,
            secure=secure,
            region=settings.s3_region,
        )
        return cls(client, settings.s3_bucket_screenshots)

    def ensure_bucket(self) -> None:
        try:
            if not self._client.bucket_exists(bucket_name=self.bucket):
                self._client.make_bucket(bucket_name=self.bucket)
        except S3Error as e:
            # bucket creation may race with another worker
            if e.code not in ("BucketAlreadyOwnedByYou", "BucketAlreadyExists"):
                raise

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        self._client.put_object(
            bucket_name=self.bucket,
            object_name=key,
            data=io.BytesIO(data),
            length=len(data),
            content_type=content_type,
        )

    async def put_bytes(self, key: str, data: bytes, content_type: str | None = None) -> None:
        await asyncio.to_thread(self._put, key, data, content_type or DEFAULT_CONTENT_TYPE)

    def presign_get(self, key: str, ttl: timedelta) -> str:
        """Read-only URL for one object, valid for ttl. Every call yields a distinct URL."""
        return self._client.presigned_get_object(
            bucket_name=self.bucket,
            object_name=key,
            expires=ttl,
            # S3 ignores x- query params, so the nonce only makes the URL unique
            extra_query_params={"x-vault-nonce": secrets.token_urlsafe(8)},
        )


_vault: BlobVault | None = None


def get_vault() -> BlobVault:
    global _vault
    if _vault is None:
        _vault = BlobVault.from_settings()
    return _vault
