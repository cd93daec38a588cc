# SPDX-License-Identifier: MIT
"""Template engine for README generation."""

from __future__ import annotations

import re
from pathlib import Path

# Pattern for matching template variables: {{variable_name}} or {{ variable_name }}
VARIABLE_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class TemplateError(Exception):
    """Raised when template processing fails."""

    pass


class TemplateEngine:
    """Renders a single text template with variable substitution.

    Variable syntax: {{variable_name}}
    """

    def __init__(self, template: str) -> None:
        self.template = template

    @classmethod
    def from_path(cls, template_path: Path) -> TemplateEngine:
        """Load a template from a file.

        Raises:
            TemplateError: If the template file does not exist or is not UTF-8 text.
        """
        if not template_path.is_file():
            raise TemplateError(f"Template file not found: {template_path}")
        try:
            return cls(template_path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise TemplateError(f"Template is not UTF-8 text: {template_path}") from e

    def variables(self) -> set[str]:
        """Return the names of the variables used by the template."""
        return set(VARIABLE_PATTERN.findall(self.template))

    def _substitute_content(self, content: str, variables: dict[str, str]) -> str:
        """Substitute {{variable}} patterns in content.

        Raises:
            TemplateError: If a variable in the content is not defined.
        """

        def replacer(match: re.Match[str]) -> str:
            var_name = match.group(1)
            if var_name not in variables:
                raise TemplateError(f"Undefined template variable: {var_name}")
            return variables[var_name]

        return VARIABLE_PATTERN.sub(replacer, content)

    def render_string(self, variables: dict[str, str]) -> str:
        """Return the template with all variables substituted."""
        return self._substitute_content(self.template, variables)

    def render(self, output_path: Path, variables: dict[str, str]) -> Path:
        """Render the template to ``output_path``, replacing any existing file.

        Parent directories are created as needed.

        Returns:
            The path written.

        Raises:
            TemplateError: If a variable is undefined or the file cannot be written.
        """
        content = self.render_string(variables)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise TemplateError(f"Unable to write {output_path}: {e}") from e
        return output_path
