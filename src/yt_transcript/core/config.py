"""
Configuration for the transcript tool.
Every tunable value lives here and can be overridden via environment variables
(or a local .env file).
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=False)

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def _parse_list_env(env_var: str, default: List[str]) -> List[str]:
    """Parse a comma-separated environment variable into a list."""
    value = os.getenv(env_var)
    if value:
        return [item.strip() for item in value.split(',') if item.strip()]
    return default

def _parse_optional_float_env(env_var: str) -> Optional[float]:
    """Parse a float environment variable, returning None when unset or empty."""
    value = os.getenv(env_var, '').strip()
    if not value:
        return None
    return float(value)

# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================

@dataclass
class AppConfig:
    """Core application configuration."""
    version: str = field(default_factory=lambda: os.getenv('APP_VERSION', '0.1.0'))

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'WARNING'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

@dataclass
class NetworkConfig:
    """Network configuration."""
    # None leaves requests without a timeout
    http_timeout: Optional[float] = field(default_factory=lambda: _parse_optional_float_env('HTTP_TIMEOUT'))
    # Keeps the strings scraped from the watch page in English
    accept_language: str = field(default_factory=lambda: os.getenv('YT_ACCEPT_LANGUAGE', 'en-US'))

# =============================================================================
# INNERTUBE CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class InnertubeConfig:
    """Endpoints and client identity used to talk to YouTube's internal API."""
    watch_url: str = "https://www.youtube.com/watch?v={video_id}"
    player_url: str = "https://www.youtube.com/youtubei/v1/player?key={api_key}"
    # The ANDROID client reliably exposes caption track metadata
    client_name: str = field(default_factory=lambda: os.getenv('YT_CLIENT_NAME', 'ANDROID'))
    client_version: str = field(default_factory=lambda: os.getenv('YT_CLIENT_VERSION', '20.10.38'))
    api_key_pattern: str = r'"INNERTUBE_API_KEY":\s*"([a-zA-Z0-9_-]+)"'
    recaptcha_marker: str = 'class="g-recaptcha"'

    def context_payload(self, video_id: str) -> Dict[str, Any]:
        """Build the JSON body for a player request."""
        return {
            "context": {
                "client": {
                    "clientName": self.client_name,
                    "clientVersion": self.client_version,
                }
            },
            "videoId": video_id,
        }

# =============================================================================
# TRANSCRIPT CONFIGURATION
# =============================================================================

@dataclass
class TranscriptConfig:
    """Transcript selection defaults."""
    default_languages: List[str] = field(default_factory=lambda: _parse_list_env('TRANSCRIPT_LANGUAGES', ['en']))

# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Main configuration class that aggregates all configuration sections."""
    app: AppConfig = field(default_factory=AppConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    innertube: InnertubeConfig = field(default_factory=InnertubeConfig)
    transcript: TranscriptConfig = field(default_factory=TranscriptConfig)

# =============================================================================
# GLOBAL CONFIGURATION INSTANCE
# =============================================================================

config = Config()

APP_VERSION = config.app.version
LOG_LEVEL = config.logging.level

# =============================================================================
# ENVIRONMENT CONFIGURATION HELPERS
# =============================================================================

def create_env_template() -> str:
    """Create a template .env file with all available configuration options."""
    template = """# yt-transcript configuration
# Copy this file to .env and adjust as needed

# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================
APP_VERSION=0.1.0

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================
LOG_LEVEL=WARNING
LOG_FORMAT=%(asctime)s [%(name)s] %(levelname)s: %(message)s
LOG_DATE_FORMAT=%Y-%m-%d %H:%M:%S

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================
# Seconds; leave empty to use the transport default
HTTP_TIMEOUT=
YT_ACCEPT_LANGUAGE=en-US

# =============================================================================
# INNERTUBE CLIENT
# =============================================================================
YT_CLIENT_NAME=ANDROID
YT_CLIENT_VERSION=20.10.38

# =============================================================================
# TRANSCRIPT CONFIGURATION
# =============================================================================
# Preferred caption languages (comma-separated, most preferred first)
TRANSCRIPT_LANGUAGES=en
"""
    return template
