from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, model_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

    APP_NAME: str = "API de Finanças"
    ENV: str = Field(default="lab", validation_alias=AliasChoices("FINANCAS_ENV","ENV"))  # lab|prod
    API_HOST: str = Field(default="0.0.0.0", validation_alias=AliasChoices("FINANCAS_API_HOST","API_HOST"))
    API_PORT: int = Field(default=3000, validation_alias=AliasChoices("FINANCAS_API_PORT","API_PORT","PORT"))
    DATABASE_URL: str = Field(default="sqlite:///./financas.db", validation_alias=AliasChoices("FINANCAS_DATABASE_URL","DATABASE_URL"))
    # Access gate (X-API-Key)
    API_KEY_ENABLED: bool = Field(default=False, validation_alias=AliasChoices("FINANCAS_API_KEY_ENABLED","API_KEY_ENABLED"))
    API_KEY: str = Field(default="", validation_alias=AliasChoices("FINANCAS_API_KEY","API_KEY"))
    # lista separada por vírgula; "*" libera qualquer origem
    CORS_ALLOW_ORIGINS: str = Field(default="*", validation_alias=AliasChoices("FINANCAS_CORS_ALLOW_ORIGINS","CORS_ALLOW_ORIGINS"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("FINANCAS_LOG_LEVEL","LOG_LEVEL"))

    @model_validator(mode="after")
    def _security_invariants(self):
        # Fail-fast de segurança (contrato de settings)
        if self.ENV == "prod" and not self.API_KEY_ENABLED:
            raise ValueError("SECURITY: ENV=prod requer API_KEY_ENABLED=true (failsafe)")

        if self.API_KEY_ENABLED:
            key = (self.API_KEY or "").strip()
            if not key:
                raise ValueError("SECURITY: API_KEY vazio (obrigatório quando API_KEY_ENABLED=true)")
            # normaliza (remove espaços acidentais)
            self.API_KEY = key

        # Heroku/Render ainda entregam postgres://
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            self.DATABASE_URL = "postgresql+psycopg://" + url[len("postgres://"):]
        elif url.startswith("postgresql://"):
            self.DATABASE_URL = "postgresql+psycopg://" + url[len("postgresql://"):]

        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


def get_settings() -> Settings:
    return Settings()
