from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SettingsError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("GPACALC_LOG_LEVEL", "").strip().upper() or cls.log_level,
            log_format=os.getenv("GPACALC_LOG_FORMAT") or cls.log_format,
        )


settings = Settings.from_env()
