"""
AWS S3 Image Upload Service
Handles property and profile image uploads to AWS S3
"""

import boto3
from botocore.exceptions import ClientError
from flask import current_app
import os
import uuid
from PIL import Image, UnidentifiedImageError
import io


class UploadError(Exception):
    """Raised when an image could not be stored"""


class S3Service:
    """Service for handling S3 uploads"""

    @staticmethod
    def is_configured():
        return bool(current_app.config.get('AWS_ACCESS_KEY_ID') and
                    current_app.config.get('S3_BUCKET_NAME'))

    @staticmethod
    def get_s3_client():
        """Get initialized S3 client"""
        return boto3.client(
            's3',
            aws_access_key_id=current_app.config.get('AWS_ACCESS_KEY_ID'),
            aws_secret_access_key=current_app.config.get('AWS_SECRET_ACCESS_KEY'),
            region_name=current_app.config.get('AWS_REGION', 'us-east-1')
        )

    @staticmethod
    def allowed_file(filename):
        """Check if file extension is allowed"""
        allowed_extensions = current_app.config.get('ALLOWED_EXTENSIONS',
                                                     {'png', 'jpg', 'jpeg', 'gif', 'webp'})
        return '.' in filename and \
               filename.rsplit('.', 1)[1].lower() in allowed_extensions

    @staticmethod
    def compress_image(image_file, max_size=(1920, 1080), quality=85):
        """
        Compress and resize image

        Args:
            image_file: File object or bytes
            max_size: Max dimensions (width, height)
            quality: JPEG quality (1-100)

        Returns:
            Compressed image as bytes, or None if it cannot be decoded
        """
        try:
            img = Image.open(image_file)

            # JPEG has no alpha channel
            if img.mode in ('RGBA', 'LA', 'P'):
                background = Image.new('RGB', img.size, (255, 255, 255))
                if img.mode == 'P':
                    img = img.convert('RGBA')
                background.paste(img, mask=img.split()[-1] if img.mode in ('RGBA', 'LA') else None)
                img = background

            img.thumbnail(max_size, Image.Resampling.LANCZOS)

            output = io.BytesIO()
            img.save(output, format='JPEG', quality=quality, optimize=True)
            output.seek(0)

            return output
        except (UnidentifiedImageError, OSError) as e:
            current_app.logger.error(f'Image compression error: {str(e)}')
            return None

    @staticmethod
    def upload_file(file, folder='images', compress=True):
        """
        Upload file to S3

        Args:
            file: File object from request.files
            folder: S3 folder/prefix
            compress: Whether to compress image

        Returns:
            S3 URL or None
        """
        if not file or not S3Service.allowed_file(file.filename):
            return None

        bucket_name = current_app.config.get('S3_BUCKET_NAME')
        if not bucket_name:
            current_app.logger.error('S3_BUCKET_NAME not configured')
            return None

        file_ext = file.filename.rsplit('.', 1)[1].lower()
        content_type = f'image/{file_ext}'
        file_to_upload = file

        if compress and file_ext in ['jpg', 'jpeg', 'png']:
            compressed_file = S3Service.compress_image(file)
            if compressed_file:
                file_to_upload = compressed_file
                file_ext = 'jpg'
                content_type = 'image/jpeg'
            else:
                file.seek(0)

        s3_key = f"{folder}/{uuid.uuid4().hex}.{file_ext}"

        try:
            S3Service.get_s3_client().upload_fileobj(
                file_to_upload,
                bucket_name,
                s3_key,
                ExtraArgs={
                    'ACL': 'public-read',
                    'ContentType': content_type
                }
            )
        except ClientError as e:
            current_app.logger.error(f'S3 upload error: {str(e)}')
            return None

        region = current_app.config.get('AWS_REGION', 'us-east-1')
        return f"https://{bucket_name}.s3.{region}.amazonaws.com/{s3_key}"

    @staticmethod
    def delete_file(s3_url):
        """
        Delete file from S3

        Args:
            s3_url: Full S3 URL

        Returns:
            Success boolean
        """
        bucket_name = current_app.config.get('S3_BUCKET_NAME')
        marker = f"{bucket_name}.s3."
        if not s3_url or marker not in s3_url:
            return False

        # Format: https://bucket-name.s3.region.amazonaws.com/folder/filename.ext
        key = s3_url.split(marker)[1].split('/', 1)[1]

        try:
            S3Service.get_s3_client().delete_object(Bucket=bucket_name, Key=key)
            return True
        except ClientError as e:
            current_app.logger.error(f'S3 delete error: {str(e)}')
            return False


class LocalStorageService:
    """
    Fallback service for local file storage
    Used in development when AWS S3 is not configured
    """

    @staticmethod
    def upload_file(file, folder='uploads'):
        """
        Save file locally

        Returns:
            Local URL path or None
        """
        if not file or not S3Service.allowed_file(file.filename):
            return None

        upload_folder = os.path.join(current_app.root_path, '..', folder)
        os.makedirs(upload_folder, exist_ok=True)

        file_ext = file.filename.rsplit('.', 1)[1].lower()
        filename = f"{uuid.uuid4().hex}.{file_ext}"

        try:
            file.save(os.path.join(upload_folder, filename))
        except OSError as e:
            current_app.logger.error(f'Local upload error: {str(e)}')
            return None

        return f"/{folder}/{filename}"


def upload_image(file, folder):
    """Store an image in S3, or on local disk when S3 is not configured"""
    if S3Service.is_configured():
        url = S3Service.upload_file(file, folder=folder, compress=True)
    else:
        url = LocalStorageService.upload_file(
            file, folder=f"{current_app.config.get('UPLOAD_FOLDER', 'uploads')}/{folder}"
        )

    if not url:
        raise UploadError('Failed to upload image')

    current_app.logger.info(f'Stored image {url}')
    return url


def delete_image(url):
    """Remove a previously stored image; local files are left in place"""
    if url and S3Service.is_configured():
        return S3Service.delete_file(url)
    return False
