import yaml
from pydantic import BaseModel, Field
from typing import Dict, Optional

from backend.app.core.settings import DIFFICULTY_CONFIG_PATH

class DifficultyProfile(BaseModel):
    depth: int = Field(ge=1, description="Search depth in plies.")
    random_factor: float = Field(ge=0.0, le=1.0)
    use_opening_book: bool
    description: Optional[str] = None

class DifficultyRegistry:
    def __init__(self, config_path: str = DIFFICULTY_CONFIG_PATH):
        self.profiles: Dict[str, DifficultyProfile] = {}
        self._load(config_path)

    def _load(self, path: str):
        with open(path, "r") as f:
            data = yaml.safe_load(f)
            for key, val in data.get("difficulties", {}).items():
                self.profiles[key] = DifficultyProfile(**val)

    def get(self, name: str) -> Optional[DifficultyProfile]:
        return self.profiles.get(name)

    def list_all(self) -> Dict[str, DifficultyProfile]:
        return self.profiles

# Singleton instance
registry = DifficultyRegistry()
