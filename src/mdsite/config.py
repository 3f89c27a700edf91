"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from mdsite.core.markdown import make_renderer


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str = "mdsite"
    input_dir:        str = Field(default="in",        description="Root of posts/, static/ and templates/")
    output_dir:       str = Field(default="out",       description="Directory for generated HTML and static files")
    posts_subdir:     str = Field(default="posts",     description="Content files, relative to input_dir")
    static_subdir:    str = Field(default="static",    description="Static assets, relative to input_dir")
    templates_subdir: str = Field(default="templates", description="Jinja2 templates, relative to input_dir")
    landing_size:     int = Field(default=5, ge=0,     description="Published posts shown on the landing page")
    parser_config:    str = Field(default="commonmark", description="MarkdownIt parser preset name")

    @field_validator("parser_config")
    @classmethod
    def known_preset(cls, value: str) -> str:
        make_renderer(value)
        return value

    @property
    def posts_dir(self) -> Path:
        return Path(self.input_dir) / self.posts_subdir

    @property
    def static_dir(self) -> Path:
        return Path(self.input_dir) / self.static_subdir

    @property
    def templates_dir(self) -> Path:
        return Path(self.input_dir) / self.templates_subdir


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDSITE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSITE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
