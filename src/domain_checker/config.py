from pydantic_settings import BaseSettings

from .yaml_config import get_defaults, get_output_strings

_defaults = get_defaults()
_output = get_output_strings()


class Settings(BaseSettings):
    model_config = {"env_prefix": "DOMAIN_CHECKER_"}

    # Logging (always to stderr)
    log_level: str = _defaults.get("log_level", "WARNING")
    log_json: bool = _defaults.get("log_json", True)

    # Verdict tokens written to stdout, one per query
    forbidden_token: str = _output.get("forbidden_token", "Bad")
    allowed_token: str = _output.get("allowed_token", "Good")


settings = Settings()
