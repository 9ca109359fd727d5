from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "EssayScoringAPI"
    environment: str = "dev"

    # spaCy-Pipeline für Satzsplit, Tokenisierung und POS-Tags
    # Lokal: python -m spacy download en_core_web_sm
    spacy_model: str = "en_core_web_sm"

    log_level: str = "INFO"


settings = Settings()
