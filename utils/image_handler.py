"""
Image Validation and Processing Module

Validates uploaded recipe images to prevent malicious file uploads.
Re-encodes images through PIL to strip potential exploits.
"""

import os
from io import BytesIO

from PIL import Image

from constants.validation import ALLOWED_EXTENSIONS


class ImageValidationError(Exception):
    """Raised when an image fails validation."""
    pass


# Allowed image formats (PIL format names)
ALLOWED_FORMATS = {'JPEG', 'PNG', 'GIF', 'WEBP'}

# Maximum image dimensions (prevent decompression bombs)
MAX_WIDTH = 4096
MAX_HEIGHT = 4096

# Maximum file size (10MB)
MAX_FILE_SIZE = 10 * 1024 * 1024


def allowed_file(filename):
    return bool(filename) and '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS


def validate_and_process_image(image_data, output_path, max_width=1600, max_height=1600):
    """
    Validate and re-encode an image to ensure safety.

    Args:
        image_data: Raw image bytes or file-like object (e.g. werkzeug FileStorage)
        output_path: Path where the processed image will be saved
        max_width: Maximum width to resize to (default 1600)
        max_height: Maximum height to resize to (default 1600)

    Returns:
        str: The final output path (always .jpg)

    Raises:
        ImageValidationError: If the image is invalid or potentially malicious
    """
    if isinstance(image_data, bytes):
        content = image_data
    else:
        image_data.seek(0)
        content = image_data.read()

    if len(content) > MAX_FILE_SIZE:
        raise ImageValidationError(f"Image too large: {len(content)} bytes (max {MAX_FILE_SIZE})")
    image_buffer = BytesIO(content)

    try:
        img = Image.open(image_buffer)

        # Detects corrupted/fake files
        img.verify()

        # verify() leaves the image unusable, reopen
        image_buffer.seek(0)
        img = Image.open(image_buffer)

        if img.format not in ALLOWED_FORMATS:
            raise ImageValidationError(
                f"Invalid image format: {img.format}. "
                f"Allowed formats: {', '.join(sorted(ALLOWED_FORMATS))}"
            )

        width, height = img.size
        if width > MAX_WIDTH or height > MAX_HEIGHT:
            raise ImageValidationError(
                f"Image dimensions too large: {width}x{height}. "
                f"Maximum: {MAX_WIDTH}x{MAX_HEIGHT}"
            )

        if width > max_width or height > max_height:
            img.thumbnail((max_width, max_height), Image.Resampling.LANCZOS)

        # JPEG has no alpha channel, flatten onto white
        if img.mode in ('RGBA', 'LA', 'P'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode in ('P', 'LA'):
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1])
            img = background
        elif img.mode != 'RGB':
            img = img.convert('RGB')

        output_path = os.path.splitext(output_path)[0] + '.jpg'
        img.save(output_path, 'JPEG', quality=85, optimize=True)

        return output_path

    except ImageValidationError:
        raise
    except Image.DecompressionBombError:
        raise ImageValidationError("Image appears to be a decompression bomb (too large when decoded)")
    except Exception as e:
        raise ImageValidationError(f"Invalid or corrupted image: {str(e)}")


def remove_image(upload_folder, filename):
    """Delete a stored image. Returns True if a file was removed."""
    if not filename:
        return False
    path = os.path.join(upload_folder, os.path.basename(filename))
    if os.path.exists(path):
        os.remove(path)
        return True
    return False
