import os

class Config:
    def __init__(self):
        self.redis_url = os.getenv("REDIS_URL", "redis://redis:6379/0")
        self.mangadex_api_url = os.getenv("MANGADEX_API_URL", "https://api.mangadex.org")
        self.at_home_token_lifespan = int(os.getenv("AT_HOME_TOKEN_LIFESPAN_MS", 5 * 60 * 1000))
        self.session_cache_backend = os.getenv("SESSION_CACHE", "memory").lower()
        self.download_queue = os.getenv("DOWNLOAD_QUEUE", "download_jobs")
        self.use_port_443_only = os.getenv("MD_PORT_443_ONLY", "false").lower() == "true"
        self.data_saver = os.getenv("MD_DATA_SAVER", "false").lower() == "true"

def get_config():
    return Config()
