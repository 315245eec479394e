from enum import Enum
from typing import Optional

import click


class LogLevel(Enum):
    """Enum for log levels with corresponding emojis."""

    INFO = ""
    WARNING = "⚠️"
    ERROR = "❌"
    HINT = "💡"


class ConsoleLogger:
    """Terminal output for the CLI commands."""

    def log(
        self, message: str, level: LogLevel = LogLevel.INFO, fg: Optional[str] = None
    ) -> None:
        """Log a message with the specified level and optional color.

        Args:
            message: The message to log
            level: The log level (determines the emoji)
            fg: Optional foreground color for the message
        """
        if not level == LogLevel.INFO:
            emoji = level.value
            if fg:
                formatted_message = f"{emoji} {click.style(message, fg=fg)}"
            else:
                formatted_message = f"{emoji} {message}"
        else:
            formatted_message = message

        click.echo(formatted_message, err=level in (LogLevel.ERROR, LogLevel.HINT))

    def error(self, message: str) -> None:
        """Log an error message and exit with status 1."""
        self.log(message, LogLevel.ERROR, "red")

        click.get_current_context().exit(1)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING, "yellow")

    def hint(self, message: str) -> None:
        self.log(message, LogLevel.HINT)
