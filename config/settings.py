from pydantic import Field
from pydantic_settings import BaseSettings


class ArgumentSettings(BaseSettings):
    log_level: str = Field(default="INFO", description="Logging level")

    # Username search
    search_max_matches: int = Field(
        default=5, description="Maximum full and partial matches collected by a username search"
    )

    # Slash command options
    option_description_limit: int = Field(
        default=100, description="Maximum length of a slash command option description"
    )
    id_option_suffix: str = Field(
        default="-ID", description="Suffix of the companion ID option for user arguments"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "CHATARGS_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = ArgumentSettings()
