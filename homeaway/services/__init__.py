"""
Services Package
External service integrations
"""

from homeaway.services.s3_service import (
    S3Service,
    LocalStorageService,
    UploadError,
    upload_image,
    delete_image,
)

__all__ = [
    'S3Service',
    'LocalStorageService',
    'UploadError',
    'upload_image',
    'delete_image',
]
