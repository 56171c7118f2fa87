import os

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    target_dir: str = Field(default_factory=os.getcwd)
    # Empty means [target_dir]
    workspace_dirs: list[str] = []

    chunk_size: int = 100
    chunk_overlap: int = 20
    max_results: int = Field(default=10, ge=1, le=10)

    bm25_k1: float = 1.2
    bm25_b: float = 0.75

    file_encoding: str = "utf-8"
    file_encoding_errors: str = "replace"

    log_level: str = "INFO"

    class Config:
        env_prefix = "BM25_SEARCH_"
        env_file = ".env"
        extra = "ignore"

    @property
    def workspace_directories(self) -> list[str]:
        return self.workspace_dirs or [self.target_dir]


settings = Settings()
