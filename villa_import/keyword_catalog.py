# Danh mục ID cố định và từ khóa nhận diện trong bài đăng.
from types import MappingProxyType
from typing import Mapping

DEFAULT_LOCATION_ID = 5
DEFAULT_PROPERTY_TYPE_ID = 1
NEAR_SEA_AMENITY_ID = 14

LOCATION_KEYWORDS: Mapping[int, tuple[str, ...]] = MappingProxyType({
    1: ("bãi sau", "thùy vân", "thuỳ vân", "phan huy ích", "lê hồng phong", "lạc long quân"),
    2: ("bãi trước", "trần phú", "quang trung", "hạ long"),
    3: ("long cung", "chí linh"),
    4: ("bãi dâu",),
    5: (),  # Trung Tâm (mặc định)
})

PROPERTY_TYPE_KEYWORDS: Mapping[int, tuple[str, ...]] = MappingProxyType({
    1: ("villa",),
    2: ("homestay",),
    3: ("căn hộ", "chung cư"),
})

AMENITY_KEYWORDS: Mapping[int, tuple[str, ...]] = MappingProxyType({
    1: ("hồ bơi", "bể bơi", "pool"),
    2: ("điều hòa", "điều hoà", "máy lạnh"),
    3: ("wifi", "internet"),
    4: ("tủ lạnh",),
    5: ("máy giặt",),
    6: ("bếp", "nhà bếp", "dụng cụ bếp", "nồi", "chảo", "dụng cụ nhà bếp"),
    7: ("karaoke",),
    8: ("bida", "bi a", "bi-a"),
    9: ("bbq", "nướng", "lò nướng"),
    10: ("tv", "tivi", "smart tv"),
    13: ("đậu xe", "đỗ xe", "chỗ đậu", "parking"),
    14: ("gần biển", "sát biển"),
    16: ("sân vườn",),
})

# ID -> nhãn hiển thị trên form admin
LOCATION_LABEL: Mapping[int, str] = MappingProxyType({
    1: "Bãi Sau",
    2: "Bãi Trước",
    3: "Long Cung",
    4: "Bãi Dâu",
    5: "Trung Tâm",
})

PROPERTY_TYPE_LABEL: Mapping[int, str] = MappingProxyType({
    1: "Villa",
    2: "Homestay",
    3: "Căn hộ",
})

AMENITY_LABEL: Mapping[int, str] = MappingProxyType({
    1: "Hồ bơi",
    2: "Điều hòa",
    3: "WiFi",
    4: "Tủ lạnh",
    5: "Máy giặt",
    6: "Bếp đầy đủ",
    7: "Karaoke",
    8: "Bida",
    9: "BBQ",
    10: "Smart TV",
    13: "Bãi đỗ xe",
    14: "Gần biển",
    16: "Sân vườn",
})


def _matches(text: str, keywords: tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def classify(text: str | None, table: Mapping[int, tuple[str, ...]], default_id: int) -> int:
    if not text:
        return default_id
    t = text.lower()
    for id_, keywords in table.items():
        if _matches(t, keywords):
            return id_
    return default_id


def classify_all(text: str | None, table: Mapping[int, tuple[str, ...]]) -> tuple[int, ...]:
    """Every ID whose keywords hit, in table order, each at most once."""
    if not text:
        return ()
    t = text.lower()
    out: list[int] = []
    for id_, keywords in table.items():
        if id_ not in out and _matches(t, keywords):
            out.append(id_)
    return tuple(out)


def detect_location_id(text: str | None) -> int:
    return classify(text, LOCATION_KEYWORDS, DEFAULT_LOCATION_ID)


def detect_property_type_id(text: str | None) -> int:
    return classify(text, PROPERTY_TYPE_KEYWORDS, DEFAULT_PROPERTY_TYPE_ID)


def detect_amenity_ids(text: str | None) -> tuple[int, ...]:
    return classify_all(text, AMENITY_KEYWORDS)
