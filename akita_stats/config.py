"""Application configuration and environment settings"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class RankingSettings(BaseModel):
    """Constants used to decide how much love an origin needs relative to another"""
    model_config = ConfigDict(frozen=True)

    magic_number: float = Field(1.0, description="Upper bound of the closeness window")
    margin: float = Field(0.25, description="Width of the closeness window")

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Payment estimation
    # 0.36 USD/hour = 0.0000001 USD/millisecond
    STREAM_RATE_PER_MILLISECOND: float = Field(0.0000001, description="Estimated USD streamed per millisecond")

    # Need-love ranking
    NEEDS_LOVE_MAGIC_NUMBER: float = Field(1.0, description="Upper bound of the need-love closeness window")
    NEEDS_LOVE_MAGIC_NUMBER_MARGIN: float = Field(0.25, ge=0, description="Width of the need-love closeness window")

    # Report settings
    TOP_ORIGINS_COUNT: int = Field(5, ge=0, description="Number of origins listed in each ranking")

    # Input/Output directories with defaults
    INPUT_DIR: str = Field("/input", description="Directory containing the extension data export")
    OUTPUT_DIR: str = Field("/output", description="Directory for output files")

    @property
    def ranking(self) -> RankingSettings:
        """Get need-love ranking constants as a separate model"""
        return RankingSettings(
            magic_number=self.NEEDS_LOVE_MAGIC_NUMBER,
            margin=self.NEEDS_LOVE_MAGIC_NUMBER_MARGIN
        )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        frozen=True
    )

settings = Settings()
