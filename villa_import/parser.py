import logging

from .schemas import ParsedPropertyData
from .utils import normalize_text, clean_description
from .extractors import (
    extract_code, extract_name, extract_address, extract_price_and_guests,
    extract_bedroom_count, extract_bathroom_count, extract_bed_info,
    extract_distance_to_sea, extract_pool_area, extract_facebook_link,
    distance_in_meters,
)
from .keyword_catalog import (
    detect_location_id, detect_property_type_id, detect_amenity_ids, NEAR_SEA_AMENITY_ID,
)

logger = logging.getLogger(__name__)

WEEKEND_PRICE_MULTIPLIER = 2
MAX_GUESTS_OFFSET = 5
NEAR_SEA_THRESHOLD_M = 500

PRICE_NOTE = """⚠️
Giá tại thời điểm đăng bài, có thể tăng giảm theo mùa

🔥 Giá Thứ 6, Thứ 7, Chủ nhật, Lễ, Tết có thay đổi

☎️ Vui lòng liên hệ để có giá chính xác !!"""

# (thuộc tính, nhãn hiển thị) theo thứ tự kiểm tra
REQUIRED_FIELD_LABELS: tuple[tuple[str, str], ...] = (
    ("code", "Mã property (MS:XXX)"),
    ("name", "Tên property"),
    ("price_weekday", "Giá ngày thường"),
    ("bedroom_count", "Số phòng ngủ"),
    ("bathroom_count", "Số WC"),
    ("standard_guests", "Số khách"),
)


def apply_near_sea_rule(data: ParsedPropertyData) -> ParsedPropertyData:
    """
    Gắn tiện ích "Gần biển" khi khoảng cách tới biển dưới NEAR_SEA_THRESHOLD_M,
    kể cả khi bài đăng không ghi rõ. Đây là bước duy nhất dùng kết quả của một
    extractor khác, nên tách riêng khỏi bộ phân loại từ khóa.
    """
    if NEAR_SEA_AMENITY_ID in data.amenity_ids:
        return data
    meters = distance_in_meters(data.distance_to_sea)
    if meters is None or meters >= NEAR_SEA_THRESHOLD_M:
        return data
    return data.model_copy(update={"amenity_ids": data.amenity_ids + (NEAR_SEA_AMENITY_ID,)})


def parse_property_text(text: str) -> ParsedPropertyData:
    t = normalize_text(text)

    price_weekday, standard_guests = extract_price_and_guests(t)
    bed_count, bed_config = extract_bed_info(t)

    data = ParsedPropertyData(
        code=extract_code(t),
        name=extract_name(t),
        address=extract_address(t),
        price_weekday=price_weekday,
        price_weekend=price_weekday * WEEKEND_PRICE_MULTIPLIER if price_weekday is not None else None,
        standard_guests=standard_guests,
        max_guests=standard_guests + MAX_GUESTS_OFFSET if standard_guests is not None else None,
        bedroom_count=extract_bedroom_count(t),
        bathroom_count=extract_bathroom_count(t),
        bed_count=bed_count,
        bed_config=bed_config,
        distance_to_sea=extract_distance_to_sea(t),
        pool_area=extract_pool_area(t),
        facebook_link=extract_facebook_link(t),
        location_id=detect_location_id(t),
        property_type_id=detect_property_type_id(t),
        amenity_ids=detect_amenity_ids(t),
        price_note=PRICE_NOTE,
        description=clean_description(t) or None,
    )
    data = apply_near_sea_rule(data)
    logger.debug("parse_property_text -> code=%s location=%s type=%s amenities=%s",
                 data.code, data.location_id, data.property_type_id, data.amenity_ids)
    return data


def validate_missing_fields(data: ParsedPropertyData) -> list[str]:
    # Số 0 hoặc chuỗi rỗng cũng coi là thiếu: form không dùng được.
    return [label for field, label in REQUIRED_FIELD_LABELS if not getattr(data, field, None)]
