"""Application settings.

Read from DUEL_* environment variables or a .env.duel file. Command-line
flags take precedence over anything set here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DUEL_", env_file=".env.duel", env_file_encoding="utf-8",
    )

    log_level: str = "WARNING"

    # Edge-file pawns capture one forward diagonal step only, like inner-file pawns
    strict_pawn_edges: bool = False

    require_txt_suffix: bool = True
