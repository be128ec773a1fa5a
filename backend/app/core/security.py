import secrets
from typing import Optional


def verify_admin_password(password: Optional[str], expected: Optional[str]) -> bool:
    """Проверка общего пароля админа (сравнение за постоянное время)"""
    if not expected or not isinstance(password, str):
        return False
    return secrets.compare_digest(
        password.encode("utf-8"),
        expected.encode("utf-8")
    )
