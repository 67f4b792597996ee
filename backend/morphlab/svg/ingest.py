"""Only image/svg+xml files enter the pipeline."""

from __future__ import annotations

import logging
from typing import Union

from morphlab.svg.encoder import SVG_MIME_TYPE
from morphlab.svg.outcome import ErrorKind, RenderError

logger = logging.getLogger(__name__)

UNSUPPORTED_FILE_MESSAGE = "Please upload an SVG file."


def accept_upload(content_type: str | None, data: bytes) -> Union[str, RenderError]:
    """Return the uploaded text, or an unsupported-file-type error."""
    mime = (content_type or "").split(";", 1)[0].strip().lower()
    if mime != SVG_MIME_TYPE:
        logger.warning("Rejected upload with content type %r", content_type)
        return RenderError(kind=ErrorKind.UNSUPPORTED_FILE_TYPE, message=UNSUPPORTED_FILE_MESSAGE)
    return data.decode("utf-8", errors="replace")
