"""Pure helpers around the OCR service: image preparation and payload-to-text."""

import io
from typing import Any

MAX_IMAGE_DIMENSION = 2048  # Resize if either dimension exceeds this
OCR_IMAGE_PADDING = 50  # White padding around image to prevent edge truncation
MIN_DETECTION_CONFIDENCE = 0.5


def resize_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, padding: int = OCR_IMAGE_PADDING
) -> bytes:
    """
    Prepare receipt image bytes for OCR.

    Applies EXIF orientation, shrinks the image so neither side exceeds
    ``max_dimension``, converts to grayscale and adds white padding.

    Args:
        image_bytes: Image data as bytes
        max_dimension: Maximum allowed dimension (width or height)
        padding: White padding to add around image (pixels)

    Returns:
        JPEG bytes ready for upload

    Raises:
        OSError: If the bytes are not a readable image.
    """
    from PIL import Image, ImageOps

    img = Image.open(io.BytesIO(image_bytes))
    img = ImageOps.exif_transpose(img)

    width, height = img.size
    if width > max_dimension or height > max_dimension:
        ratio = min(max_dimension / width, max_dimension / height)
        img = img.resize((int(width * ratio), int(height * ratio)), Image.Resampling.LANCZOS)

    img = ImageOps.grayscale(img)

    if padding > 0:
        img = ImageOps.expand(img, border=padding, fill="white")

    buffer = io.BytesIO()
    img.save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def _detection_rows(detections: list[Any], min_confidence: float) -> list[list[dict[str, Any]]]:
    """Group PaddleOCR-style ``[bbox, [text, confidence]]`` detections into text rows."""
    boxes: list[dict[str, Any]] = []
    for detection in detections:
        bbox, (text, confidence) = detection
        if confidence < min_confidence or not str(text).strip():
            continue
        y_coords = [point[1] for point in bbox]
        boxes.append(
            {
                "text": str(text).strip(),
                "center_y": sum(y_coords) / len(y_coords),
                "height": max(y_coords) - min(y_coords),
                "min_x": min(point[0] for point in bbox),
            }
        )

    if not boxes:
        return []

    # Half the median box height keeps neighbouring rows apart
    heights = sorted(box["height"] for box in boxes)
    y_threshold = max(5.0, heights[len(heights) // 2] / 2)

    boxes.sort(key=lambda b: (b["center_y"], b["min_x"]))
    rows: list[list[dict[str, Any]]] = []
    for box in boxes:
        if rows:
            row = rows[-1]
            row_center = sum(b["center_y"] for b in row) / len(row)
            if abs(box["center_y"] - row_center) <= y_threshold:
                row.append(box)
                continue
        rows.append([box])

    for row in rows:
        row.sort(key=lambda b: b["min_x"])
    return rows


def ocr_text_from_result(raw_result: dict[str, Any], min_confidence: float = MIN_DETECTION_CONFIDENCE) -> str:
    """
    Convert an OCR service JSON payload into newline-separated receipt text.

    Accepts a ready ``full_text`` or ``text`` field, or PaddleOCR-style
    ``detections`` which are grouped into rows top-to-bottom and joined
    left-to-right.
    """
    for key in ("full_text", "text"):
        value = raw_result.get(key)
        if isinstance(value, str) and value.strip():
            return value

    rows = _detection_rows(raw_result.get("detections") or [], min_confidence)
    return "\n".join(" ".join(box["text"] for box in row) for row in rows)
