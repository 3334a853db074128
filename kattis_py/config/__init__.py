"""Configuration management."""

from .credentials import Credentials
from .global_config import GlobalConfig
from .solution_config import SolutionConfig, TemplateConfig
from .templates import Template

__all__ = ["Credentials", "GlobalConfig", "SolutionConfig", "Template", "TemplateConfig"]
