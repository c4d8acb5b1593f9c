import os

from dotenv import load_dotenv


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.token_secret = os.getenv("TOKEN_SECRET", "change-me")
        self.token_algorithm = os.getenv("TOKEN_ALGORITHM", "HS256")
        self.token_exp_minutes = self._get_int("TOKEN_EXP_MINUTES", 60 * 24)
        self.bcrypt_rounds = self._get_int("BCRYPT_ROUNDS", 12)
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        raw = os.getenv(key, "").strip()
        if not raw:
            return default
        try:
            return int(raw)
        except ValueError as exc:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc
