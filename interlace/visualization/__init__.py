from interlace.visualization.console import rich_logger

__all__ = ["rich_logger"]
