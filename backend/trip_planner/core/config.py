import json
from functools import lru_cache
from typing import Annotated, Any, List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", populate_by_name=True
    )

    app_name: str = "AI Trip Planner"
    environment: str = Field("local", alias="ENVIRONMENT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"], alias="CORS_ORIGINS"
    )

    weather_api_key: Optional[str] = Field(None, alias="WEATHER_API_KEY")
    geo_base_url: str = Field(
        "http://api.openweathermap.org/geo/1.0/direct", alias="WEATHER_GEO_URL"
    )
    weather_base_url: str = Field(
        "https://api.openweathermap.org/data/2.5/forecast", alias="WEATHER_FORECAST_URL"
    )

    llm_provider: str = Field("vertex", alias="LLM_PROVIDER")
    vertex_project_id: Optional[str] = Field(None, alias="VERTEX_PROJECT_ID")
    vertex_location: str = Field("asia-south1", alias="VERTEX_LOCATION")
    vertex_model: str = Field("gemini-1.5-flash", alias="VERTEX_MODEL")
    ollama_host: str = Field("http://localhost:11434", alias="OLLAMA_HOST")
    ollama_model: str = Field("llama3", alias="OLLAMA_MODEL")

    maps_api_key: Optional[str] = Field(None, alias="MAPS_KEY")

    booking_api_base: Optional[str] = Field(None, alias="EMT_API_BASE")
    booking_api_key: Optional[str] = Field(None, alias="EMT_KEY")
    booking_simulate: bool = Field(True, alias="EMT_SIMULATE")
    razorpay_key_id: Optional[str] = Field(None, alias="RZ_KEY_ID")
    razorpay_key_secret: Optional[str] = Field(None, alias="RZ_SECRET")

    http_timeout_seconds: float = Field(10.0, alias="HTTP_TIMEOUT_SECONDS")
    generation_timeout_seconds: float = Field(30.0, alias="GENERATION_TIMEOUT_SECONDS")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        # CORS_ORIGINS accepts a JSON list or "https://a.example, https://b.example"
        if isinstance(value, str) and value.strip().startswith("["):
            return json.loads(value)
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()
