"""Configuration for list rendering."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mapreduce.errors import ConfigError

ENV_PREFIX = "MAPREDUCE_DISPLAY_"


class DisplayConfig(BaseModel):
    """How print_list renders a sequence.

    Attributes:
        separator: Line printed before and after the items
        arrow: Text between an index and its item
        start_index: Index of the first item
    """

    model_config = ConfigDict(frozen=True)

    separator: str = "----------"
    arrow: str = " => "
    start_index: int = Field(default=0, ge=0)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DisplayConfig:
        """Build a config from MAPREDUCE_DISPLAY_* variables.

        Unset variables keep their defaults.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        raw = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ConfigError(
                f"Invalid display configuration for {field}: {first['msg']}",
                first["input"],
            ) from e
