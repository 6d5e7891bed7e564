# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Optgrid output and error reporting."""
from rich.console import Console

console = Console(color_system="truecolor")
err_console = Console(color_system="truecolor", stderr=True)
