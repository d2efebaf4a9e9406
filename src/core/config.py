from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv

# Ensure .env is loaded regardless of current working directory
load_dotenv(find_dotenv(), override=False)


DEFAULT_USER_AGENT = (
	"Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
	"(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class UpstreamSettings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="UPSTREAM_")
	metadata_base_url: str = "https://api.vxtwitter.com"
	status_path: str = "/Twitter/status/{post_id}"
	user_agent: str = DEFAULT_USER_AGENT
	metadata_timeout: float = 10.0
	media_timeout: float = 30.0
	media_max_redirects: int = 5


class CacheSettings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="CACHE_")
	ttl_seconds: int = 3600
	# Верхняя граница числа записей, при переполнении вытесняются самые старые
	maxsize: int = 10000


class AppSettings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="APP_")
	title: str = "x-media-relay"
	host: str = "0.0.0.0"
	port: int = 3000
	cors_origins: list[str] = ["*"]
	log_level: str = "INFO"
	logs_dir: str = "logs"
	log_to_files: bool = True
	log_requests: bool = True


class Settings(BaseSettings):
	upstream: UpstreamSettings = UpstreamSettings()
	cache: CacheSettings = CacheSettings()
	app: AppSettings = AppSettings()


settings = Settings()
