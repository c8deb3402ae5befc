"""Configuration loaded from environment (.env) and defaults."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from thumbaudit.errors import ConfigurationError

# Locate the project root .env file regardless of CWD
_THIS_DIR = Path(__file__).resolve().parent          # thumbaudit/
_PROJECT_ROOT = _THIS_DIR.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM provider: gemini | openai | anthropic
    thumbaudit_llm_provider: str = "gemini"

    # Google Gemini
    gemini_api_key: str | None = None
    thumbaudit_gemini_model: str = "gemini-2.5-flash"

    # OpenAI
    openai_api_key: str | None = None
    thumbaudit_openai_model: str = "gpt-4o"

    # Anthropic
    anthropic_api_key: str | None = None
    thumbaudit_anthropic_model: str = "claude-3-5-sonnet-20241022"

    # Language preselected in the UI and used by the CLI when none is given
    thumbaudit_default_language: str = "English"

    # Where the CLI writes exported reports
    thumbaudit_output_dir: str = "./output"

    # Optional TrueType font for PDF export (needed for Urdu script)
    thumbaudit_pdf_font_path: str | None = None

    # CORS origins (comma-separated). Defaults to localhost dev.
    cors_origins: str = "http://localhost:8000,http://127.0.0.1:8000"
    cors_origin_regex: str | None = None

    # Port for backend/run.py (PORT env var)
    port: int = 8000

    # Idle time after which a visitor's uploads and report are dropped
    thumbaudit_session_ttl_seconds: int = 60 * 60

    # Max screenshot / template upload size in bytes (default 10 MB)
    max_upload_bytes: int = 10 * 1024 * 1024

    @property
    def output_dir(self) -> Path:
        """Output directory as Path; relative paths resolve against the project root."""
        p = Path(self.thumbaudit_output_dir)
        if not p.is_absolute():
            return (_PROJECT_ROOT / p).resolve()
        return p.resolve()

    @property
    def pdf_font_path(self) -> Path | None:
        if not self.thumbaudit_pdf_font_path:
            return None
        return Path(self.thumbaudit_pdf_font_path)

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def api_key_for(self, provider_name: str) -> str | None:
        keys = {
            "gemini": self.gemini_api_key,
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
        }
        try:
            return keys[provider_name.lower()]
        except KeyError:
            raise ConfigurationError(f"Unknown LLM provider: {provider_name}") from None

    def model_for(self, provider_name: str) -> str:
        models = {
            "gemini": self.thumbaudit_gemini_model,
            "openai": self.thumbaudit_openai_model,
            "anthropic": self.thumbaudit_anthropic_model,
        }
        try:
            return models[provider_name.lower()]
        except KeyError:
            raise ConfigurationError(f"Unknown LLM provider: {provider_name}") from None


def get_settings() -> Settings:
    return Settings()
