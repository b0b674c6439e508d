from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # hashlib algorithm used to derive namespace identifiers
    NAMESPACE_DIGEST: str = "md5"

    # Escape ' and " in addition to <, > and & when rendering for HTML
    ESCAPE_QUOTES: bool = True


settings = Settings()
