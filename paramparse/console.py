# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for paramparse output."""
from rich.console import Console

from paramparse.themes import get_theme

console = Console(theme=get_theme())
error_console = Console(theme=get_theme(), stderr=True)
