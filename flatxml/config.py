"""Runtime settings for flatxml."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class FlatXmlSettings(BaseSettings):
    """Settings read from ``FLATXML_*`` environment variables.

    Attributes:
        text_tags: Element names read as a "text content" wrapper
        pretty_print: Whether encoded documents are indented
        indent: Indentation unit used when pretty printing
        encoding: Byte encoding of documents written to streams and files
        log_level: Level used by the demonstration entry point
    """

    model_config = SettingsConfigDict(env_prefix="FLATXML_", case_sensitive=False)

    text_tags: list[str] = ["Text"]
    pretty_print: bool = True
    indent: str = "  "
    encoding: str = "utf-8"
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> FlatXmlSettings:
    """Return the process-wide settings, read once."""
    return FlatXmlSettings()
