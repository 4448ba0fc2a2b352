#!/usr/bin/env python3
"""
SQL fragment formatter

Prints an escaped identifier, a quoted literal or a dialect column type
for the given command-line arguments.
"""

import logging
import sys

from pydantic_settings import SettingsConfigDict

from .cli import Cli
from .data_type import get_dialect, value_type_by_name
from .errors import FormatSqlQueryError
from .escape import ObjectConcat, QuotedDataConcat
from .names import ColumnType
from .settings import Settings

logger = logging.getLogger(__name__)


def render(cli: Cli, settings: Settings) -> str:
    """Render the fragment requested on the command line."""
    match cli.kind:
        case "identifier":
            return str(ObjectConcat(cli.fragments))
        case "literal":
            return str(QuotedDataConcat(cli.fragments))
        case "column-type":
            dialect = get_dialect(cli.dialect or settings.defaults.dialect)
            # value_type presence is checked by Cli
            value_type = value_type_by_name(cli.value_type or "")
            return str(ColumnType.of(dialect, value_type))


def main() -> int:
    """Run the command-line entry point."""
    cli = Cli()

    settings = Settings.build(SettingsConfigDict(toml_file=cli.config))
    logging.basicConfig(level=settings.logging.level)

    try:
        output = render(cli, settings)
    except FormatSqlQueryError as e:
        logger.error("Failed to format %s: %s", cli.kind, e)
        return 1

    logger.debug("Formatted %s from %r", cli.kind, cli.fragments)
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
