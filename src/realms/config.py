"""Generator configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from realms.terrain.types import FalloffParameters, NoiseParameters, WorldParameters


class Settings(BaseSettings):
    """Settings loaded from ``REALMS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REALMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "info"

    # Fixed seed; a random one is drawn when unset
    seed: int | None = None

    # World size and sea level
    width: int = 500
    height: int = 500
    sea_level: float = 0.0

    # Elevation noise
    scale: float = 0.2
    octaves: int = 8
    persistence: float = 0.35
    lacunarity: float = 4.0

    # Island falloff
    falloff_enabled: bool = True
    falloff_a: float = 2.0
    falloff_b: float = 6.0
    falloff_multiplier: float = 0.7

    def world_parameters(self) -> WorldParameters:
        """Build validated world parameters from these settings."""
        falloff = None
        if self.falloff_enabled:
            falloff = FalloffParameters(
                a=self.falloff_a,
                b=self.falloff_b,
                multiplier=self.falloff_multiplier,
            )
        return WorldParameters(
            width=self.width,
            height=self.height,
            sea_level=self.sea_level,
            elevation_parameters=NoiseParameters(
                scale=self.scale,
                octaves=self.octaves,
                persistence=self.persistence,
                lacunarity=self.lacunarity,
            ),
            falloff=falloff,
        )


settings = Settings()
