"""Configuration helpers for the mdpage CLI."""

import json
import logging
import os
from dataclasses import replace
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from mdpage.rendering.options import RenderConfig

console = Console(stderr=True)

config_dir = os.path.expanduser("~/.config/mdpage")
config_path = os.path.join(config_dir, "config.json")


class SiteSettings(BaseModel):
    """Settings accepted in ``config.json``. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    content_path: Optional[str] = None
    title: Optional[str] = None
    fallback_title: Optional[str] = None
    fallback_message: Optional[str] = None
    extensions: Optional[List[str]] = None
    timeout: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)

    def apply(self, config: RenderConfig) -> RenderConfig:
        data: Dict[str, Any] = self.model_dump(exclude_none=True)
        if "extensions" in data:
            data["extensions"] = tuple(data["extensions"])
        return replace(config, **data)


def load_settings(path: Optional[str] = None) -> SiteSettings:
    """Load settings from file; a missing or invalid file yields defaults."""
    path = path or config_path
    try:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                return SiteSettings.model_validate(json.load(f))
    except (json.JSONDecodeError, OSError, ValidationError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return SiteSettings()


def build_config(
    *,
    content_path: Optional[str] = None,
    title: Optional[str] = None,
    settings_path: Optional[str] = None,
) -> RenderConfig:
    """Resolve the render config: CLI options > config file > env > defaults."""
    config = RenderConfig.from_env()
    config = load_settings(settings_path).apply(config)
    overrides: Dict[str, Any] = {}
    if content_path:
        overrides["content_path"] = content_path
    if title:
        overrides["title"] = title
    return replace(config, **overrides) if overrides else config


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                markup=False,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
        force=True,
    )
