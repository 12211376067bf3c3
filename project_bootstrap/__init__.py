"""Bootstrap a new project directory with .gitignore, LICENSE, NOTICE and README.md."""

__version__ = "0.1.0"
