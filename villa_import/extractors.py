"""
Trích xuất từng trường từ bài đăng villa dạng văn bản tự do.

Mỗi hàm nhận toàn bộ văn bản, không ném lỗi và trả về None khi không tìm thấy.
Các hàm độc lập với nhau, thứ tự gọi không ảnh hưởng kết quả.
"""
import re
from typing import Optional, Tuple

MILLION = 1_000_000
HALF_MILLION_BONUS = 500_000

_CODE_RE = re.compile(r"\bMS\s*:?\s*(\d+)", re.IGNORECASE)
_ADDRESS_LINE_RE = re.compile(r"(?:địa chỉ|📍)[:\s]*([^\n]+)", re.IGNORECASE)
_ADDRESS_PREFIX_RE = re.compile(r"^địa chỉ[:\s]*", re.IGNORECASE)
_PARENTHETICAL_RE = re.compile(r"\s*\([^)]*\)")

# "Giá: 3.x00.000" -> 3 triệu + 500k
_PRICE_RE = re.compile(r"giá[:\s]*(\d)([.,]?x)?", re.IGNORECASE)
_GUESTS_SLASH_RE = re.compile(r"/(\d+)\s*khách", re.IGNORECASE)
_GUESTS_RE = re.compile(r"(\d{1,2})\s*khách", re.IGNORECASE)

_BEDROOM_RE = re.compile(r"(\d+)\s*(?:phòng\s*ngủ|pn|bedroom)", re.IGNORECASE)
_BATHROOM_RE = re.compile(r"(\d+)\s*(?:wc|toilet|nhà vệ sinh|phòng tắm|vs)", re.IGNORECASE)
_BED_COUNT_RE = re.compile(r"(\d+)\s*giường", re.IGNORECASE)
_BED_CONFIG_RE = re.compile(r"giường\s*\(([^)]+)\)", re.IGNORECASE)

_DISTANCE_RE = re.compile(r"cách\s+biển\D*(\d+)\s*(km|m)", re.IGNORECASE)
_DISTANCE_VALUE_RE = re.compile(r"^(\d+)(km|m)$")

_POOL_AFTER_RE = re.compile(r"(?:hồ bơi|bể bơi)\D*(\d+)\s*m(?:[²2^\s]|$)", re.IGNORECASE)
_POOL_BEFORE_RE = re.compile(r"(\d+)\s*m[²2^](?=[^\n]*(?:hồ bơi|bể bơi|pool))", re.IGNORECASE)

_FACEBOOK_RE = re.compile(r"https?://(?:www\.)?facebook\.com/\S+", re.IGNORECASE)


def extract_code(text: str) -> Optional[str]:
    """'MS:208', 'MS 208', 'MS208' -> 'MS208'."""
    m = _CODE_RE.search(text or "")
    return f"MS{m.group(1)}" if m else None


def extract_address_line(text: str) -> Optional[str]:
    m = _ADDRESS_LINE_RE.search(text or "")
    if not m:
        return None
    # "📍Địa chỉ: ..." -> bỏ luôn tiền tố thứ hai
    line = _ADDRESS_PREFIX_RE.sub("", m.group(1).strip()).strip()
    return line or None


def extract_name(text: str) -> Optional[str]:
    """
    Tên ngắn lấy từ chính dòng địa chỉ:
      "📍Địa chỉ: 45/37 Thuỳ Vân, P.Thắng Tam (Khu vực bãi sau)" -> "45/37 Thuỳ Vân"
    """
    line = extract_address_line(text)
    if not line:
        return None
    name = line.split("(", 1)[0].split(",", 1)[0].strip()
    return name or None


def extract_address(text: str) -> Optional[str]:
    line = extract_address_line(text)
    if not line:
        return None
    address = _PARENTHETICAL_RE.sub("", line).strip()
    return address or None


def extract_price(text: str) -> Optional[int]:
    # Chỉ lấy một chữ số hàng triệu, giá >= 10 triệu không biểu diễn được.
    m = _PRICE_RE.search(text or "")
    if not m:
        return None
    price = int(m.group(1)) * MILLION
    if m.group(2):
        price += HALF_MILLION_BONUS
    return price


def extract_guests(text: str) -> Optional[int]:
    m = _GUESTS_SLASH_RE.search(text or "") or _GUESTS_RE.search(text or "")
    return int(m.group(1)) if m else None


def extract_price_and_guests(text: str) -> Tuple[Optional[int], Optional[int]]:
    return extract_price(text), extract_guests(text)


def extract_bedroom_count(text: str) -> Optional[int]:
    m = _BEDROOM_RE.search(text or "")
    return int(m.group(1)) if m else None


def extract_bathroom_count(text: str) -> Optional[int]:
    m = _BATHROOM_RE.search(text or "")
    return int(m.group(1)) if m else None


def extract_bed_info(text: str) -> Tuple[Optional[int], Optional[str]]:
    count_m = _BED_COUNT_RE.search(text or "")
    config_m = _BED_CONFIG_RE.search(text or "")
    count = int(count_m.group(1)) if count_m else None
    config = config_m.group(1).strip() if config_m else None
    return count, (config or None)


def extract_distance_to_sea(text: str) -> Optional[str]:
    """'cách biển bãi sau 700m' -> '700m', 'cách biển 2km' -> '2km'."""
    m = _DISTANCE_RE.search(text or "")
    if not m:
        return None
    return f"{int(m.group(1))}{m.group(2).lower()}"


def distance_in_meters(distance: Optional[str]) -> Optional[int]:
    if not distance:
        return None
    m = _DISTANCE_VALUE_RE.match(distance)
    if not m:
        return None
    value = int(m.group(1))
    return value * 1000 if m.group(2) == "km" else value


def extract_pool_area(text: str) -> Optional[str]:
    m = _POOL_AFTER_RE.search(text or "") or _POOL_BEFORE_RE.search(text or "")
    return f"{int(m.group(1))}m²" if m else None


def extract_facebook_link(text: str) -> Optional[str]:
    m = _FACEBOOK_RE.search(text or "")
    return m.group(0) if m else None
