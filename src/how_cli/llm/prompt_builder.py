"""
Prompt builder for shell-assistant requests.

Responsible for:
- Loading and rendering the Jinja2 prompt template
- Combining the user's question with the gathered SystemContext

The request engine itself never templates; it receives the fully formed
string produced here.
"""

from pathlib import Path
from typing import Optional

import structlog
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from how_cli.system_context import SystemContext


logger = structlog.get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "prompts"
DEFAULT_TEMPLATE_NAME = "shell_assistant.txt"


class PromptBuilder:
    """Build shell-assistant prompts from a question and a SystemContext."""

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        template_name: str = DEFAULT_TEMPLATE_NAME,
        max_files: int = 20,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing prompt templates
                (default: the packaged ``prompts/`` directory)
            template_name: Template file to render
            max_files: File-listing limit shown in the prompt
        """
        self.templates_dir = Path(templates_dir) if templates_dir else DEFAULT_TEMPLATES_DIR
        self.template_name = template_name
        self.max_files = max_files

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False  # We're generating prompts, not HTML
        )

        try:
            self.template = self.jinja_env.get_template(self.template_name)
        except Exception as e:
            logger.error(
                "Failed to load prompt template",
                error=str(e),
                templates_dir=str(self.templates_dir),
            )
            raise

    def build_prompt(self, question: str, context: SystemContext) -> str:
        """
        Render the full prompt.

        Args:
            question: The user's natural-language request
            context: Gathered system context

        Returns:
            Prompt text ready for the request engine
        """
        prompt = self.template.render(
            question=question,
            context=context,
            max_files=self.max_files,
        )
        logger.debug("Built prompt", prompt_length=len(prompt), shell=context.shell)
        return prompt
