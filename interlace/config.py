"""
Configuration models for the built-in middleware.

Pydantic models, validated on construction.
"""

import logging

from pydantic import BaseModel, Field


class LoggerConfig(BaseModel):
    """Transition logger configuration"""
    level: int = Field(logging.INFO, description="Log level for recorded transitions")
    logger_name: str = Field("interlace.transitions", description="Logger to emit transitions on")
    max_history: int | None = Field(1000, ge=1, description="Transitions kept in memory; None keeps all")
    log_state: bool = Field(True, description="Include previous/next state in log lines")


class ValidationConfig(BaseModel):
    """Action validation configuration"""
    coerce: bool = Field(False, description="Forward the parsed Action instead of the original mapping")
    allowed_types: list[str] | None = Field(None, description="Accepted action types; None accepts any")
    allow_non_actions: bool = Field(True, description="Let function/async commands pass through")


class ConsoleConfig(BaseModel):
    """Rich console printer configuration"""
    show_prev_state: bool = Field(True, description="Print the state before the action")
    show_next_state: bool = Field(True, description="Print the state after the action")
    title_style: str = Field("bold cyan", description="Rich style of the panel title")
