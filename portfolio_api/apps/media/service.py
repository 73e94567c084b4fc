"""
Upload stub
Files are not stored yet; the admin UI gets a placeholder asset back.
"""
from typing import Any, Dict

from portfolio_api import config


def placeholder_upload() -> Dict[str, Any]:
    return {
        "url": config.UPLOAD_PLACEHOLDER_URL,
        "fileName": "uploaded.png",
        "mimeType": "image/png",
        "size": 1024,
    }
