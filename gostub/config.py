"""Configuration management using Dynaconf."""

from pathlib import Path

from dynaconf import Dynaconf, Validator

DEFAULT_SETTINGS_FILE = Path(__file__).with_name("settings.toml")

EMPTY_RESULTS_POLICIES = ("blank", "error")


def make_settings(project_dir: Path | None = None) -> Dynaconf:
    """Build the layered settings object.

    Package defaults load first; ``settings.toml`` and ``.secrets.toml`` from
    ``project_dir`` (the working directory by default) are merged over them.
    Project files are given as absolute paths because Dynaconf resolves
    relative names against the folder of the first settings file.
    """
    project_dir = Path.cwd() if project_dir is None else project_dir
    return Dynaconf(
        envvar_prefix="GOSTUB",
        settings_files=[
            str(DEFAULT_SETTINGS_FILE),
            str(project_dir / "settings.toml"),
            str(project_dir / ".secrets.toml"),
        ],
        environments=True,
        load_dotenv=True,
        merge_enabled=True,
        validators=[
            # Logging validators
            Validator(
                "logging.level",
                default="WARNING",
                is_in=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            ),
            Validator("logging.format", default="text", is_in=["json", "text"]),
            Validator("logging.console_colorized", default=False, is_type_of=bool),
            Validator("logging.file_enabled", default=False, is_type_of=bool),
            Validator("logging.file_path", default="logs/gostub.log"),
            Validator("logging.file_rotation", default="daily"),
            Validator("logging.file_retention_days", default=7, gte=1, lte=365),
            # Generator validators
            Validator(
                "generator.empty_results",
                default="blank",
                is_in=list(EMPTY_RESULTS_POLICIES),
            ),
            # Parser validators
            Validator("parser.include_package_files", default=True, is_type_of=bool),
            # Resolver validators
            Validator("resolver.qualified_kinds", default={}, is_type_of=dict),
        ],
    )


settings = make_settings()
