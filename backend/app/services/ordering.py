from typing import Optional
from urllib.parse import quote


WHATSAPP_BASE_URL = "https://wa.me"
ORDER_MESSAGE = (
    'Hello Sitora! I am interested in the "{name}". '
    "Could you please provide more details?"
)


def normalize_phone(phone: Optional[str]) -> str:
    """Только цифры: wa.me не принимает '+', пробелы и дефисы"""
    return "".join(ch for ch in (phone or "") if ch.isdigit())


def build_order_link(product_name: str, phone: str) -> str:
    message = ORDER_MESSAGE.format(name=product_name)
    # Те же безопасные символы, что у encodeURIComponent
    text = quote(message, safe="!~*'()")
    return f"{WHATSAPP_BASE_URL}/{normalize_phone(phone)}?text={text}"
