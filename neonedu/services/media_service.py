"""
Media Service - image upload passthrough to Cloudinary
"""
import hashlib
import time
import requests
from flask import current_app
from neonedu.exceptions import UploadError


class MediaService:
    """Relays admin image uploads to the Cloudinary upload API"""

    UPLOAD_URL = 'https://api.cloudinary.com/v1_1/{cloud_name}/image/upload'

    @staticmethod
    def sign(params: dict, api_secret: str) -> str:
        """Cloudinary request signature: sha1 of sorted params + secret"""
        to_sign = '&'.join(f'{key}={params[key]}' for key in sorted(params))
        return hashlib.sha1(f'{to_sign}{api_secret}'.encode('utf-8')).hexdigest()

    @staticmethod
    def validate(file_storage, max_bytes: int) -> bytes:
        """
        Check an uploaded file before anything leaves the server

        Args:
            file_storage: werkzeug FileStorage from the multipart body
            max_bytes: Size ceiling in bytes

        Returns:
            File content

        Raises:
            UploadError: missing file, non-image type or oversize payload
        """
        if file_storage is None or not file_storage.filename:
            raise UploadError('No file provided')

        if not (file_storage.mimetype or '').startswith('image/'):
            raise UploadError('File must be an image')

        content = file_storage.read()
        if len(content) > max_bytes:
            limit_mb = max_bytes / (1024 * 1024)
            raise UploadError(f'File size must be less than {limit_mb:g}MB for faster uploads')

        return content

    @classmethod
    def upload_image(cls, file_storage, folder: str = None) -> str:
        """
        Upload an image and return its permanent URL

        Args:
            file_storage: werkzeug FileStorage from the multipart body
            folder: Cloudinary folder label

        Returns:
            secure_url of the stored image
        """
        config = current_app.config
        folder = folder or config['UPLOAD_DEFAULT_FOLDER']
        content = cls.validate(file_storage, config['UPLOAD_MAX_BYTES'])

        print(f"[MediaService] Starting upload for {file_storage.filename} "
              f"({len(content) / 1024:.1f}KB) to folder: {folder}", flush=True)

        params = {'folder': folder, 'timestamp': int(time.time())}
        payload = dict(params,
                       api_key=config['CLOUDINARY_API_KEY'],
                       signature=cls.sign(params, config['CLOUDINARY_API_SECRET']))

        try:
            response = requests.post(
                cls.UPLOAD_URL.format(cloud_name=config['CLOUDINARY_CLOUD_NAME']),
                data=payload,
                files={'file': (file_storage.filename, content, file_storage.mimetype)},
                timeout=config['UPLOAD_TIMEOUT']
            )
            response.raise_for_status()
            result = response.json()
        except requests.exceptions.Timeout:
            print("[MediaService] Upload timed out", flush=True)
            raise UploadError('Upload timed out. Please try a smaller image.', 500)
        except requests.exceptions.RequestException as e:
            print(f"[MediaService] Upload error: {e}", flush=True)
            raise UploadError('Failed to upload image', 500)
        except ValueError as e:
            print(f"[MediaService] Invalid response from Cloudinary: {e}", flush=True)
            raise UploadError('Failed to upload image', 500)

        url = result.get('secure_url')
        if not url:
            raise UploadError('Failed to upload image', 500)

        print("[MediaService] Upload completed successfully", flush=True)
        return url
