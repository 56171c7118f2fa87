from pathlib import Path


class TextLoader:

    def __init__(self, encoding: str = "utf-8", errors: str = "replace"):
        self._encoding = encoding
        self._errors = errors

    def load(self, file_path: Path) -> str:
        return file_path.read_text(encoding=self._encoding, errors=self._errors)
