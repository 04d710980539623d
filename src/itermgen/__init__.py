"""itermgen - build iTerm2 .itermcolors presets from plain color lists."""

__version__ = "0.1.0"
