import re
from pathlib import Path

from resume_insights.parsers.resume_parser import extract_docx_text


def parse_jd(text: str) -> str:
    """Collapse whitespace in a job description, keeping paragraph breaks."""
    text = re.sub(r"[ \t]+", " ", text)
    lines = [line.strip() for line in text.splitlines()]
    return re.sub(r"\n{3,}", "\n\n", "\n".join(lines)).strip()


def load_jd_file(file_path: str | Path) -> str:
    """Load a job description from a .txt, .md or .docx file."""
    path = Path(file_path)
    if path.suffix.lower() == ".docx":
        return parse_jd(extract_docx_text(path.read_bytes()))
    return parse_jd(path.read_text(encoding="utf-8"))
