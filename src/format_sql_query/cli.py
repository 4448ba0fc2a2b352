from typing import Literal, Self

from pydantic import Field, FilePath, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Cli(BaseSettings):
    model_config = SettingsConfigDict(
        cli_parse_args=True,
        cli_prog_name="format-sql-query",
        env_prefix="FORMAT_SQL_QUERY_",
    )

    kind: Literal["identifier", "literal", "column-type"] = Field(
        init=False,
        description="What to format",
    )
    fragments: list[str] = Field(
        default_factory=list,
        description="Text fragments formatted as one identifier or literal",
    )
    value_type: str | None = Field(None, description="Value type name, e.g. int32")
    dialect: str | None = Field(None, description="Dialect name, overrides configuration")
    config: FilePath | None = Field(None, description="TOML configuration file")

    @model_validator(mode="after")
    def _check_value_type(self) -> Self:
        if self.kind == "column-type" and self.value_type is None:
            raise ValueError("value_type is required for kind 'column-type'")
        return self
