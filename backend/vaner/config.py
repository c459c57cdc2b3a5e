"""Application configuration from environment variables."""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Web server port
    web_port: int = 8000
    
    # Firebase project (optional - falls back to the credentials' project)
    firebase_project_id: str | None = None
    
    # Service account: path to a JSON file or the inline JSON itself
    firebase_credentials: str | None = None
    
    # Start the reminder trigger together with the web app
    scheduler_enabled: bool = True
    
    # Reminder job: trigger cadence and matching window, anchored to this zone
    reminder_timezone: str = "Europe/Oslo"
    # Cron step in minutes; use a divisor of 60 for an even cadence
    reminder_interval_minutes: int = Field(5, ge=1, le=60)
    reminder_window_minutes: int = Field(5, ge=0)
    
    # Match users on the other side of midnight too (off keeps the plain range query)
    reminder_wrap_midnight: bool = False
    
    # Push content
    reminder_title: str = "Vaner"
    reminder_body: str = "Husk dagens vaner ✨"
    
    # Cache lifetimes for the share endpoints (seconds)
    share_page_cache_seconds: int = 300
    share_image_cache_seconds: int = 3600
    
    class Config:
        env_prefix = ""
        case_sensitive = False


settings = Settings()
