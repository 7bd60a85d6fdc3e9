"""User settings for the markup tool."""

from .tool_settings import SettingsManager, ToolSettings

__all__ = ['SettingsManager', 'ToolSettings']
