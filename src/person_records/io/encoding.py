"""
Encoding detection for record files.
"""

from pathlib import Path

import chardet

from ..utils.logging import get_logger

logger = get_logger(__name__)

MIN_CONFIDENCE = 0.7


def detect_encoding(
    file_path: Path, fallback: str = "utf-8", max_bytes: int = 10000
) -> str:
    """Detect file encoding using chardet, falling back when unsure."""
    try:
        with file_path.open("rb") as f:
            raw_data = f.read(max_bytes)
    except OSError as e:
        # The real open reports the failure
        logger.debug(
            f"Encoding detection failed, using fallback "
            f"(file_path={file_path}, error={e}, fallback={fallback})"
        )
        return fallback

    if not raw_data:
        return fallback

    detection_result = chardet.detect(raw_data)
    detected_encoding = detection_result.get("encoding")
    confidence = detection_result.get("confidence") or 0.0

    if detected_encoding and confidence > MIN_CONFIDENCE:
        logger.debug(
            f"Encoding detected (file_path={file_path}, "
            f"encoding={detected_encoding}, confidence={confidence})"
        )
        return detected_encoding

    logger.debug(
        f"Low confidence encoding detection, using fallback "
        f"(file_path={file_path}, detected={detected_encoding}, "
        f"confidence={confidence}, fallback={fallback})"
    )
    return fallback
