from viewremote.cli.commands.describe import describe_command
from viewremote.cli.commands.open import open_command
from viewremote.cli.commands.url import url_command

__all__ = ["describe_command", "open_command", "url_command"]
