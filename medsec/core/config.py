from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pathlib import Path

class Settings(BaseSettings):
    # Application Settings
    app_name: str = "MedSec Threat Engine"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # API Settings
    api_v1_str: str = "/api/v1"
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = False

    # Ensemble Settings
    tree_count: int = Field(100, ge=1)
    max_depth: int = 10
    min_leaf_samples: int = 2

    # Training Settings
    min_training_samples: int = Field(10, ge=1)
    retrain_interval: int = Field(50, ge=1)
    seed_training_data: bool = True

    # Paths
    base_dir: Path = Path(__file__).parent.parent.parent
    logs_dir: Path = base_dir / "logs"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MEDSEC_",
        extra="ignore"
    )

settings = Settings()
