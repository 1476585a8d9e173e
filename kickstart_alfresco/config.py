"""
Environment configuration for the Alfresco conversion.
"""

from typing import Optional
import os
import logging
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables
load_dotenv()


class ConversionSettings(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    log_level: str = "INFO"
    model_author: Optional[str] = None
    model_version: Optional[str] = "1.0"

    @classmethod
    def from_env(cls) -> "ConversionSettings":
        return cls(
            log_level=os.getenv("KICKSTART_LOG_LEVEL", "INFO").upper(),
            model_author=os.getenv("KICKSTART_MODEL_AUTHOR") or None,
            model_version=os.getenv("KICKSTART_MODEL_VERSION", "1.0"),
        )


def configure_logging(settings: Optional[ConversionSettings] = None) -> None:
    settings = settings or ConversionSettings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
