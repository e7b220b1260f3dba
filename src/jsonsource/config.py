# src/jsonsource/config.py
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field
import yaml
import os

class Settings(BaseModel):
    # i default arrivano dall'ambiente, quindi vanno validati anch'essi
    model_config = ConfigDict(validate_default=True)

    discriminator_key: str = Field(default_factory=lambda: os.getenv("JSONSOURCE_DISCRIMINATOR", "@type"))
    collision_policy: Literal["reject", "merge"] = Field(
        default_factory=lambda: os.getenv("JSONSOURCE_COLLISION_POLICY", "reject"))
    max_depth: int = Field(default_factory=lambda: os.getenv("JSONSOURCE_MAX_DEPTH", "64"))
    output_dir: Path = Field(default_factory=lambda: os.getenv("JSONSOURCE_OUTPUT_DIR", "generated"))
    fetch_timeout_s: int = 30
    log_level: str = Field(default_factory=lambda: os.getenv("JSONSOURCE_LOG_LEVEL", "INFO"))

def load_manifest(path: Path):
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return data.get("models", [])
