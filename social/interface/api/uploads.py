"""Multipart upload helpers."""

from fastapi import UploadFile

from social.domain.error import InvalidInputError


async def read_upload(upload: UploadFile, max_bytes: int) -> bytes:
    """Read an uploaded file, refusing to buffer more than ``max_bytes``.

    Raises:
        InvalidInputError: If the file is larger than ``max_bytes``
    """
    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise InvalidInputError(f"Image {upload.filename!r} exceeds {max_bytes} bytes")
    return data
