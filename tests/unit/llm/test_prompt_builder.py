"""Unit tests for PromptBuilder."""

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from how_cli.llm.prompt_builder import PromptBuilder
from how_cli.system_context import SystemContext


@pytest.fixture
def sample_context():
    """Sample system context for testing."""
    return SystemContext(
        os="linux 6.8.0",
        shell="zsh",
        current_dir="/home/dev/project",
        user="dev",
        git_repo="Yes",
        files="README.md, pyproject.toml, src",
        installed_tools="git, docker, python",
    )


class TestBuildPrompt:
    """Test rendering with the packaged template."""

    def test_contains_context_and_question(self, sample_context):
        prompt = PromptBuilder().build_prompt("find large files", sample_context)

        assert "**OS:** linux 6.8.0" in prompt
        assert "**Shell:** zsh" in prompt
        assert "**CWD:** /home/dev/project" in prompt
        assert "**User:** dev" in prompt
        assert "**Git Repo:** Yes" in prompt
        assert "**Files (top 20):** README.md, pyproject.toml, src" in prompt
        assert "**Available Tools:** git, docker, python" in prompt
        assert "REQUEST:\nfind large files\n" in prompt

    def test_ends_with_response_marker(self, sample_context):
        prompt = PromptBuilder().build_prompt("q", sample_context)

        assert prompt.endswith("RESPONSE:\n")

    def test_shell_used_in_rules(self, sample_context):
        prompt = PromptBuilder().build_prompt("q", sample_context)

        assert "for the zsh environment" in prompt

    def test_max_files_rendered(self, sample_context):
        prompt = PromptBuilder(max_files=5).build_prompt("q", sample_context)

        assert "**Files (top 5):**" in prompt

    def test_default_context(self):
        prompt = PromptBuilder().build_prompt("q", SystemContext())

        assert "**OS:** Unknown" in prompt
        assert "**Git Repo:** No" in prompt

    def test_question_not_escaped(self, sample_context):
        prompt = PromptBuilder().build_prompt("grep '<main>' && echo \"done\"", sample_context)

        assert "grep '<main>' && echo \"done\"" in prompt


class TestTemplateLoading:
    """Test custom and missing templates."""

    def test_custom_template(self, tmp_path, sample_context):
        (tmp_path / "short.txt").write_text("{{ context.shell }}: {{ question }}")

        builder = PromptBuilder(templates_dir=tmp_path, template_name="short.txt")

        assert builder.build_prompt("list", sample_context) == "zsh: list"

    def test_missing_template_raises(self, tmp_path):
        with pytest.raises(TemplateNotFound):
            PromptBuilder(templates_dir=tmp_path, template_name="missing.txt")

    def test_undefined_variable_raises(self, tmp_path, sample_context):
        (tmp_path / "bad.txt").write_text("{{ nope }}")

        builder = PromptBuilder(templates_dir=tmp_path, template_name="bad.txt")

        with pytest.raises(UndefinedError):
            builder.build_prompt("q", sample_context)
