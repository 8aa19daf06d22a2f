from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildinfoSettings(BaseModel):
    """Static values reported by the emulated buildinfo endpoint."""

    # Version of the Prometheus API this shim claims to speak.
    prometheus_version: str = "1.8.2"
    revision_prefix: str = "gmp"
    build_branch: str = "HEAD"
    build_user: str = "gmp@localhost"


_BUILDINFO_DEFAULTS = BuildinfoSettings()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_port: int = 9090
    service_host: str = "0.0.0.0"  # nosec B104

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Logging
    log_level: str = "INFO"

    # Identity of the binary embedding the shim, e.g. "frontend" or "rule-evaluator"
    binary_name: str = "frontend"
    binary_version: str = "0.1.0"

    # Emulated build metadata, defaulting to BuildinfoSettings
    prometheus_version: str = _BUILDINFO_DEFAULTS.prometheus_version
    revision_prefix: str = _BUILDINFO_DEFAULTS.revision_prefix
    build_branch: str = _BUILDINFO_DEFAULTS.build_branch
    build_user: str = _BUILDINFO_DEFAULTS.build_user

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def buildinfo(self) -> BuildinfoSettings:
        return BuildinfoSettings(
            prometheus_version=self.prometheus_version,
            revision_prefix=self.revision_prefix,
            build_branch=self.build_branch,
            build_user=self.build_user,
        )


settings = Settings()
