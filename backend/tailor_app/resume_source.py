import re

# Heading text must match exactly; the prompt relies on this block verbatim.
EDUCATION_RE = re.compile(r"## EDUCATION(.*?)(?:\n## |\n# |\Z)", re.DOTALL)


def load_resume_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def extract_education_section(resume_text: str) -> str:
    """Return the text under ``## EDUCATION`` up to the next heading, or ""."""
    m = EDUCATION_RE.search(resume_text)
    return m.group(1).strip() if m else ""
