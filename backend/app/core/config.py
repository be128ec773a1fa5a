from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./sitora.db"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Общий пароль админки; без него любой вход и запись отклоняются
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_TOKEN: str = "demo-token"

    # Supabase (зеркало каталога)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None
    SUPABASE_TIMEOUT: float = 10.0

    # WhatsApp для заказов
    WHATSAPP_PHONE: Optional[str] = None

    # Собранный фронтенд (необязательно)
    STATIC_DIR: Optional[str] = None

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def mirror_enabled(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_KEY)

    class Config:
        env_file = ".env"
