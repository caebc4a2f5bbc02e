"""
Theme loader for termslides playback.

Themes control how pages are laid out on the terminal.
Each theme is a directory containing:
  - theme.yaml: Configuration (layout, heading style, verbatim frames)

Example theme.yaml:
    layout:
      indent: 3
      voffset: 5
    heading:
      color: yellow
      underline: false
    verbatim:
      frame: true
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from ..models.document import StyleSet
from ..models.directives import color_isValid


class ThemeError(Exception):
    """Raised when theme loading or validation fails"""
    pass


class Theme:
    """
    Represents a termslides playback theme.

    Values missing from theme.yaml fall back to the caller's defaults,
    so an empty theme.yaml is valid.
    """

    def __init__(self, theme_name: str, themes_dir: Optional[str] = None):
        """
        Load a theme by name.

        Args:
            theme_name: Name of the theme directory (e.g., "default", "plain")
            themes_dir: Path to themes directory (defaults to settings)

        Raises:
            ThemeError: If theme directory or theme.yaml doesn't exist,
                        or theme.yaml is malformed
        """
        from ..config import appsettings

        self.name = theme_name
        self.themes_dir = Path(themes_dir or appsettings.themes_dir)
        self.theme_dir = self.themes_dir / theme_name

        if not self.theme_dir.exists():
            raise ThemeError(
                f"Theme '{theme_name}' not found. "
                f"Expected directory: {self.theme_dir}"
            )

        self.config_path = self.theme_dir / "theme.yaml"
        if not self.config_path.exists():
            raise ThemeError(
                f"Theme '{theme_name}' missing theme.yaml"
            )

        self.config = self._config_load()

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse theme.yaml"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ThemeError(f"Failed to parse theme.yaml: {e}")
        except OSError as e:
            raise ThemeError(f"Failed to load theme.yaml: {e}")

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ThemeError(f"Theme '{self.name}': theme.yaml must contain a mapping")
        return config

    def config_get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from theme.yaml.

        Supports nested keys with dot notation:
          theme.config_get('heading.color', 'white')

        Args:
            key: Configuration key (supports dot notation)
            default: Default value if key doesn't exist

        Returns:
            Configuration value or default
        """
        keys: list[str] = key.split('.')
        value: Any = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def headingStyle_get(self) -> StyleSet:
        """
        StyleSet used for --heading lines.

        Headings are always bold; colour and underline come from the theme.

        Raises:
            ThemeError: If heading.color is not a known colour name
        """
        color = self.config_get('heading.color')
        if color is not None and not color_isValid(str(color)):
            raise ThemeError(f"Theme '{self.name}': unknown heading colour '{color}'")
        return StyleSet(
            bold=True,
            underline=bool(self.config_get('heading.underline', False)),
            color=None if color in (None, 'default') else str(color),
        )

    def verbatimFrame_has(self) -> bool:
        """Whether verbatim blocks are drawn inside a frame"""
        return bool(self.config_get('verbatim.frame', True))

    def __repr__(self) -> str:
        return f"Theme(name='{self.name}', path='{self.theme_dir}')"


def themes_listAvailable(themes_dir: Optional[str] = None) -> list[str]:
    """
    List all available theme names.

    Args:
        themes_dir: Path to themes directory (defaults to settings)

    Returns:
        List of theme names (directory names with valid theme.yaml)
    """
    from ..config import appsettings

    themes_path: Path = Path(themes_dir or appsettings.themes_dir)

    if not themes_path.exists():
        return []

    themes: list[str] = []
    for item in themes_path.iterdir():
        if item.is_dir() and (item / "theme.yaml").exists():
            themes.append(item.name)

    return sorted(themes)
