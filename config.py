from enum import Enum
from pathlib import Path

from pydantic import PositiveInt
from pydantic_settings import BaseSettings


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    api_url: str = "https://forkify-api.herokuapp.com/api/v2/recipes"
    key: str | None = None
    res_per_page: PositiveInt = 10
    timeout: float = 10
    storage_path: Path = Path("storage.json")
