import pytest

SAMPLE_POST = """🏡 VILLA BÃI SAU MS:208
📍Địa chỉ: 45/37 Thuỳ Vân, Phường Thắng Tam (Khu vực bãi sau)
✅ 4 phòng ngủ - 5 WC - 6 giường (4 giường đôi, 2 giường đơn)
🌊 Cách biển bãi sau 300m
🏊 Hồ bơi 45m2, sân vườn, BBQ
❄️ Điều hòa, wifi, tủ lạnh, máy giặt, bếp đầy đủ
💰 Giá: 3.x00.000/15 khách
Video dưới bình luận 👇
https://www.facebook.com/villa.vungtau/posts/123
"""

@pytest.fixture
def sample_post() -> str:
    return SAMPLE_POST
