"""ui-vault - design token color palettes and WCAG contrast auditing."""

__version__ = "0.1.0"
