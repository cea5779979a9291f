import re
import unicodedata

_NOISE_LINE_RE = re.compile(r"^(?=.*video)(?=.*bình luận).*$", re.IGNORECASE | re.MULTILINE)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(value: str | None) -> str:
    """NFC và xuống dòng kiểu unix, để dấu tổ hợp và dấu dựng sẵn so khớp như nhau."""
    if not value:
        return ""
    value = unicodedata.normalize("NFC", value)
    return value.replace("\r\n", "\n").replace("\r", "\n")


def clean_description(text: str | None) -> str:
    if not text:
        return ""
    text = normalize_text(text)
    # Bỏ dòng "Video dưới bình luận" và các biến thể
    text = _NOISE_LINE_RE.sub("", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()
