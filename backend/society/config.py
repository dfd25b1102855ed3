"""Configuration settings for the application."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""
    
    app_name: str = "Unity Savings Society API"
    store_name: str = "Unity Savings Society"
    contact_email: str = "society2k26@gmail.com"
    debug: bool = False
    log_level: str = "INFO"
    
    # Relational store for transactions and profiles
    database_path: str = "society.db"
    # Key-value file for the credential record and display preferences
    local_state_path: str = "society_state.json"
    
    # Advice provider: "gemini-*", "gpt-*", "claude-*" or "mock:*"
    advice_model: str = "gemini-1.5-flash"
    google_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    
    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
