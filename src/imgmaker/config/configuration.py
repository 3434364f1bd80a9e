from __future__ import annotations

from pathlib import Path
from typing import Any, Type

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from imgmaker.coretypes import ParameterSet
from imgmaker.exceptions import ConfigurationError
from imgmaker.io.writers import ExistingFileMode, ImageFileWriter
from imgmaker.utils import merge_dictionaries

DEFAULT_CONFIG_FILENAME = "imgmaker.yaml"


class WriterOptions(BaseModel):
    """How the output file is written."""

    existing_file_mode: ExistingFileMode = Field(
        ExistingFileMode.OVERWRITE,
        description="How to handle an existing output file: OVERWRITE (replace it), SKIP (keep it) or FAIL (report an error).",
        title="Existing File Handling",
    )
    create_dirs: bool = Field(
        True,
        description="Create missing parent directories of the output path.",
        title="Create Directories",
    )
    show_progress: bool = Field(
        True,
        description="Show a progress bar while the image is written.",
        title="Show Progress",
    )

    def create_writer(self) -> ImageFileWriter:
        return ImageFileWriter(
            existing_file_mode=self.existing_file_mode,
            create_dirs=self.create_dirs,
            show_progress=self.show_progress,
        )


class ImageMakerSettings(BaseSettings):
    """
    Settings for one image-making run.

    Values come from keyword arguments first and from ``imgmaker.yaml`` in
    the working directory second.

    Examples
    --------
    >>> settings = ImageMakerSettings(
    ...     image={"size": [8, 8, 8], "output_path": "blank.nrrd"}
    ... )
    >>> settings.writer.existing_file_mode
    <ExistingFileMode.OVERWRITE: 'overwrite'>
    """

    image: ParameterSet = Field(
        description="Pixel type, geometry, fill values and destination of the image.",
    )
    writer: WriterOptions = Field(
        default_factory=WriterOptions,
        description="Options for writing the output file.",
    )
    model_config = SettingsConfigDict(
        yaml_file=DEFAULT_CONFIG_FILENAME,
        # the file may hold other tools' settings too
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @property
    def json_schema(self) -> dict:
        """Return the JSON schema for the settings."""
        return self.model_json_schema()

    @classmethod
    def load(cls, **overrides: Any) -> ImageMakerSettings:
        """
        Build settings from keyword overrides and the default YAML file.

        Raises
        ------
        ConfigurationError
            If the combined values are invalid.
        """
        try:
            return cls(**overrides)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def from_user_yaml(
        cls, path: Path, overrides: dict[str, Any] | None = None
    ) -> ImageMakerSettings:
        """
        Load settings from a YAML file, with `overrides` taking precedence.

        Raises
        ------
        ConfigurationError
            If the file is missing or the values are invalid.
        """
        path = Path(path)
        if not path.is_file():
            msg = f"Configuration file {path} does not exist."
            raise ConfigurationError(msg)
        source = YamlConfigSettingsSource(cls, yaml_file=path)
        settings = merge_dictionaries(source(), overrides or {})
        return cls.load(**settings)

    def to_yaml(self, path: Path) -> None:
        """Write the settings to `path` as YAML."""
        import yaml  # type: ignore

        model = self.model_dump(mode="json")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w") as f:
                yaml.dump(model, f, sort_keys=False)
        except (OSError, IOError) as e:
            msg = f"Failed to save settings to {path}: {e}"
            raise ValueError(msg) from e
