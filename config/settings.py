"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


class Settings:
    """
    Every value can be overridden from config/.env or the process environment.

    TTLs are per upstream resource: match payloads never change once the
    game is over, so they are kept much longer than ranks or masteries.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── Rate limits (per 1 second / per 2 minutes) ─────────────────────────
    # Personal key hard limits are 20/s and 100/120s; stay slightly below.
    RATE_LIMIT_PER_1_SEC:          int = _int('RATE_LIMIT_PER_1_SEC', 18)
    RATE_LIMIT_PER_2_MIN:          int = _int('RATE_LIMIT_PER_2_MIN', 90)

    MATCH_RATE_LIMIT_PER_1_SEC:    int = 18
    MATCH_RATE_LIMIT_PER_2_MIN:    int = 90

    SUMMONER_RATE_LIMIT_PER_1_SEC: int = 18
    SUMMONER_RATE_LIMIT_PER_2_MIN: int = 85

    LEAGUE_RATE_LIMIT_PER_1_SEC:   int = 15
    LEAGUE_RATE_LIMIT_PER_2_MIN:   int = 75

    MASTERY_RATE_LIMIT_PER_1_SEC:  int = 18
    MASTERY_RATE_LIMIT_PER_2_MIN:  int = 85

    ACCOUNT_RATE_LIMIT_PER_1_SEC:  int = 18
    ACCOUNT_RATE_LIMIT_PER_2_MIN:  int = 85

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: int = _int('REQUEST_TIMEOUT', 15)
    USER_AGENT:      str = 'lol-stats-core/1.0'

    # ── Static assets ──────────────────────────────────────────────────────
    DDRAGON_URL:          str = os.getenv('DDRAGON_URL', 'https://ddragon.leagueoflegends.com')
    COMMUNITY_DRAGON_URL: str = os.getenv('COMMUNITY_DRAGON_URL', 'https://raw.communitydragon.org/latest')
    DDRAGON_LANG:         str = os.getenv('DDRAGON_LANG', 'en_US')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR:      Path = Path(__file__).resolve().parent.parent
    DATA_DIR:      Path = BASE_DIR / 'data'
    LOG_DIR:       Path = DATA_DIR / 'logs'
    CACHE_DB_PATH: Path = Path(os.getenv('CACHE_DB_PATH', str(DATA_DIR / 'cache' / 'riot_cache.sqlite')))
    AUGMENTS_PATH: Path = Path(os.getenv(
        'AUGMENTS_PATH',
        str(BASE_DIR / 'infrastructure' / 'static' / 'arena_augments.json'),
    ))

    # ── Cache (seconds) ────────────────────────────────────────────────────
    CACHE_BACKEND:   str = os.getenv('CACHE_BACKEND', 'memory').strip().lower()
    ACCOUNT_TTL_S:   int = _int('ACCOUNT_TTL_S', 3600)
    SUMMONER_TTL_S:  int = _int('SUMMONER_TTL_S', 600)
    MASTERY_TTL_S:   int = _int('MASTERY_TTL_S', 600)
    RANK_TTL_S:      int = _int('RANK_TTL_S', 300)
    MATCH_IDS_TTL_S: int = _int('MATCH_IDS_TTL_S', 60)
    MATCH_TTL_S:     int = _int('MATCH_TTL_S', 7 * 24 * 3600)

    # ── Normalization ──────────────────────────────────────────────────────
    DEFAULT_WARD_ID:  int = 2052
    ARENA_QUEUE_ID:   int = 1700

    # ── Caller defaults ────────────────────────────────────────────────────
    MASTERIES_LIMIT: int = _int('MASTERIES_LIMIT', 24)
    GAMES_LIMIT:     int = _int('GAMES_LIMIT', 10)
    CHAMPS_LIMIT:    int = _int('CHAMPS_LIMIT', 7)

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
        if cls.CACHE_BACKEND == 'sqlite':
            cls.CACHE_DB_PATH.parent.mkdir(parents=True, exist_ok=True)


settings = Settings()
