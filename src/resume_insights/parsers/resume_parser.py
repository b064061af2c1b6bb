"""Resume documents: data URIs, text extraction and provider content blocks."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
import zipfile
from pathlib import Path

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from resume_insights.errors import GenerationError, UnsupportedFormatError
from resume_insights.models.resume import DataUri, ResumeReference

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIMES = ("text/plain", "text/markdown")

EMPTY_RESUME_MESSAGE = "The resume document is empty or could not be read."

SUFFIX_MIME_TYPES: dict[str, str] = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".txt": "text/plain",
    ".md": "text/markdown",
}


def to_data_uri(file_path: str | Path) -> str:
    """Read a resume file and encode it as a base64 data URI."""
    path = Path(file_path)
    mime_type = SUFFIX_MIME_TYPES.get(path.suffix.lower())
    if mime_type is None:
        raise UnsupportedFormatError(path.suffix or None)
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def parse_data_uri(uri: str) -> DataUri:
    """Split ``data:<mime>;base64,<payload>`` into MIME type and decoded bytes.

    Raises:
        ValueError: with a user-facing message describing what is malformed.
    """
    if not uri.startswith("data:"):
        raise ValueError("Invalid file data format.")
    header, sep, payload = uri[len("data:"):].partition(",")
    if not sep:
        raise ValueError("Invalid file data format.")

    params = [p.strip().lower() for p in header.split(";")]
    mime_type = params[0]
    if "/" not in mime_type:
        raise ValueError("File data must declare a MIME type.")
    if "base64" not in params[1:]:
        raise ValueError("File data must be base64 encoded.")

    try:
        data = base64.b64decode("".join(payload.split()), validate=True)
    except binascii.Error:
        raise ValueError("File data is not valid base64.") from None
    return DataUri(mime_type=mime_type, data=data)


def clean_markdown(text: str) -> str:
    """Normalize text pasted or exported from word processors.

    Removes BOM/zero-width characters, turns decorative bullets into ``-``,
    collapses runs of spaces and limits blank lines to one.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = []
    for line in text.splitlines():
        stripped = line.lstrip()
        indent = line[: len(line) - len(stripped)].replace("\t", "    ")
        stripped = re.sub(r"[ \t]{2,}", " ", stripped).rstrip()
        lines.append(f"{indent}{stripped}" if stripped else "")
    text = "\n".join(lines)

    return re.sub(r"\n{3,}", "\n\n", text).strip()


def extract_docx_text(data: bytes) -> str:
    """Return paragraph and table text from DOCX bytes."""
    try:
        doc = Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        logger.warning("Could not open DOCX resume: %s", exc)
        raise UnsupportedFormatError(DOCX_MIME) from exc

    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [c.text.strip() for c in row.cells if c.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n".join(parts)


def resume_blocks(resume: ResumeReference) -> list[dict]:
    """Convert a resume reference into Messages API content blocks.

    PDFs go to the model as native documents; DOCX and plain text are sent as
    text. Any other MIME type raises UnsupportedFormatError, and a resume with
    no readable text raises GenerationError.
    """
    if resume.data_uri is None:
        text = clean_markdown(resume.text or "")
        if not text:
            raise GenerationError(EMPTY_RESUME_MESSAGE)
        return [_text_block(text)]

    doc = parse_data_uri(resume.data_uri)
    if doc.mime_type == PDF_MIME:
        return [{
            "type": "document",
            "source": {
                "type": "base64",
                "media_type": PDF_MIME,
                "data": base64.b64encode(doc.data).decode("ascii"),
            },
        }]
    if doc.mime_type == DOCX_MIME:
        text = extract_docx_text(doc.data)
    elif doc.mime_type in TEXT_MIMES:
        text = doc.data.decode("utf-8", errors="replace")
    else:
        raise UnsupportedFormatError(doc.mime_type)

    text = clean_markdown(text)
    if not text:
        raise GenerationError(EMPTY_RESUME_MESSAGE)
    return [_text_block(text)]


def _text_block(text: str) -> dict:
    return {"type": "text", "text": f"<resume>\n{text}\n</resume>"}
