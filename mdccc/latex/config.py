"""Document shell configuration: the fixed prologue and epilogue.

The default shell is a minimal article preamble (Latin Modern fonts,
one-inch margins, listings set up for code) and a closing
\\end{document}. A YAML file can override either string.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict

import yaml

from ..errors import ConfigError

DEFAULT_PROLOGUE = (
    "\\documentclass[11pt]{article}\n"
    "\\usepackage[utf8]{inputenc}\n"
    "\\usepackage[T1]{fontenc}\n"
    "\\usepackage{lmodern}\n"
    "\\usepackage[margin=1in]{geometry}\n"
    "\\usepackage{listings}\n"
    "\\lstset{basicstyle=\\ttfamily\\small,breaklines=true}\n"
    "\\begin{document}\n"
)

DEFAULT_EPILOGUE = "\n\\end{document}\n"


@dataclass(frozen=True)
class DocumentShell:
    """Boilerplate emitted around the converted body when wrapping.

    Attributes:
        prologue: Text emitted before the first fragment
        epilogue: Text emitted after the last fragment
    """
    prologue: str = DEFAULT_PROLOGUE
    epilogue: str = DEFAULT_EPILOGUE


DEFAULT_SHELL = DocumentShell()


class ShellConfigLoader:
    """Loads DocumentShell overrides from a YAML file.

    Configuration file structure (both keys optional):
        prologue: |
          \\documentclass{article}
          \\begin{document}
        epilogue: "\\end{document}"
    """

    ALLOWED_FIELDS = {'prologue', 'epilogue'}

    @classmethod
    def load(cls, config_path: str) -> DocumentShell:
        """Load a document shell from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            DocumentShell with defaults for any keys not present

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {config_path}")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return DEFAULT_SHELL

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> DocumentShell:
        """Build a DocumentShell from an already-parsed mapping.

        Raises:
            ConfigError: On unknown keys or non-string values
        """
        unknown = set(config_dict) - cls.ALLOWED_FIELDS
        if unknown:
            raise ConfigError(f"Unknown fields: {', '.join(sorted(map(str, unknown)))}")

        for field_name, value in config_dict.items():
            if not isinstance(value, str):
                raise ConfigError(
                    f"must be a string, got {type(value).__name__}",
                    config_field=field_name,
                )

        return replace(DEFAULT_SHELL, **config_dict)
