import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("CASEVIEW_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


def _int_list(raw: str) -> tuple[int, ...]:
    return tuple(int(part) for part in raw.split(",") if part.strip())


@dataclass
class Config:
    environment: str
    search_debounce_ms: int = 300
    default_page_size: int = 10
    page_size_options: tuple[int, ...] = field(default=(5, 10, 25, 50))
    page_window: int = 5
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            search_debounce_ms=int(os.environ.get("CASEVIEW_SEARCH_DEBOUNCE_MS", "300")),
            default_page_size=int(os.environ.get("CASEVIEW_PAGE_SIZE", "10")),
            page_size_options=_int_list(
                os.environ.get("CASEVIEW_PAGE_SIZE_OPTIONS", "5,10,25,50")
            ),
            page_window=int(os.environ.get("CASEVIEW_PAGE_WINDOW", "5")),
            log_level=os.environ.get("CASEVIEW_LOG_LEVEL", "INFO").upper(),
        )


config = Config.from_env()
