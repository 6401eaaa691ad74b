from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class SourceConfig:
    api_key: str = os.getenv("SPOONACULAR_API_KEY", "")
    base_url: str = "https://api.spoonacular.com/recipes"
    number: int = 50
    timeout: float = 10.0
    enabled: bool = True
    mock_seed: int | None = None


DEFAULT_SOURCE_CONFIG = SourceConfig()
