"""Application settings from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .mesh.pipeline import StartMeshPlanar


class Settings(BaseSettings):
    log_level: str = "info"

    # Iteration spin box. Work grows ~5x per iteration and rebuilds run on the GUI thread.
    default_iterations: int = Field(2, ge=0)
    max_iterations: int = Field(6, ge=0, le=8)

    # Starting mesh shown on launch
    default_start_mesh: StartMeshPlanar = StartMeshPlanar.PENTAGON
    grid_cols: int = Field(3, ge=1)
    grid_rows: int = Field(3, ge=1)

    model_config = SettingsConfigDict(env_prefix="WEAVE_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
