"""Tests for CLI commands and the interactive prompt flow."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from rich.prompt import IntPrompt, Prompt

from circle_badge.cli import (
    build_parser,
    do_colors,
    do_config,
    do_create,
    do_icons_import,
    do_icons_list,
    main,
    prompt_for_config,
)
from circle_badge.colors import COLORS
from circle_badge.config import load_config
from circle_badge.generator import BadgeConfig


@pytest.fixture
def icons_dir(tmp_path):
    directory = tmp_path / "icons"
    directory.mkdir()
    for name in ("heart.svg", "star.svg"):
        (directory / name).write_text("<svg/>", encoding="utf-8")
    return directory


# ── Argument Parsing ──────────────────────────────────────────────────────────


class TestArgumentParsing:
    def test_no_args_defaults_to_none_command(self):
        args = build_parser().parse_args([])
        assert args.command is None
        assert args.verbose is False

    def test_create_defaults(self):
        args = build_parser().parse_args(["create", "--text", "Hi"])
        assert args.command == "create"
        assert args.text == "Hi"
        assert args.color == "primary"
        assert args.icon is None
        assert args.output == "badge.png"
        assert args.size == 200
        assert args.make_dirs is False

    def test_create_all_flags(self):
        args = build_parser().parse_args([
            "create", "-t", "Ship it", "-c", "success", "-i", "star.svg",
            "-o", "out/ship.png", "-s", "128", "--icons-dir", "assets", "--make-dirs",
        ])
        assert args.color == "success"
        assert args.icon == "star.svg"
        assert args.output == "out/ship.png"
        assert args.size == 128
        assert args.icons_dir == "assets"
        assert args.make_dirs is True

    def test_text_optional_for_prompting(self):
        args = build_parser().parse_args(["create"])
        assert args.text is None

    def test_zero_size_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["create", "--size", "0"])

    def test_non_numeric_size_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["create", "--size", "big"])

    def test_icons_import_command(self):
        args = build_parser().parse_args(["icons", "import", "vendor/lucide"])
        assert args.icons_command == "import"
        assert args.source == "vendor/lucide"

    def test_config_requires_icons_dir(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["config"])

    def test_invalid_command_raises(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["nonexistent"])


# ── do_create ─────────────────────────────────────────────────────────────────


class TestDoCreate:
    def test_success(self, tmp_path):
        output = tmp_path / "badge.png"
        result = do_create(BadgeConfig(text="Hello", color="primary", output=output))
        assert result["ok"] is True
        assert result["output"] == str(output.resolve())
        assert result["size"] == 200
        assert output.exists()

    def test_invalid_color(self, tmp_path):
        result = do_create(BadgeConfig(text="Hello", color="plaid", output=tmp_path / "b.png"))
        assert result["ok"] is False
        assert "Invalid color" in result["reason"]

    def test_missing_icon(self, tmp_path, capsys):
        config = BadgeConfig(text="Hello", color="primary", output=tmp_path / "b.png", icon="gone.svg")
        result = do_create(config, icons_dir=tmp_path)
        assert result["ok"] is False
        assert "gone.svg" in result["reason"]
        assert "Error generating badge" in capsys.readouterr().err

    def test_write_failure(self, tmp_path):
        config = BadgeConfig(text="Hello", color="primary", output=tmp_path / "no" / "b.png")
        result = do_create(config)
        assert result == {"ok": False, "reason": "write_failed"}

    def test_make_dirs(self, tmp_path):
        output = tmp_path / "my-badges" / "b.png"
        result = do_create(BadgeConfig(text="Hello", color="info", output=output), make_dirs=True)
        assert result["ok"] is True
        assert output.exists()


# ── Other commands ────────────────────────────────────────────────────────────


class TestOtherCommands:
    def test_colors(self):
        result = do_colors()
        assert result["ok"] is True
        assert result["colors"] == dict(COLORS)

    def test_icons_list(self, icons_dir):
        result = do_icons_list(icons_dir)
        assert result["icons"] == ["heart.svg", "star.svg"]

    def test_icons_list_empty(self, tmp_path):
        assert do_icons_list(tmp_path / "missing")["icons"] == []

    def test_icons_import(self, tmp_path, icons_dir):
        target = tmp_path / "imported"
        result = do_icons_import(icons_dir, target)
        assert result["ok"] is True
        assert sorted(result["icons"]) == ["heart.svg", "star.svg"]
        assert (target / "star.svg").exists()

    def test_icons_import_missing_source(self, tmp_path):
        result = do_icons_import(tmp_path / "missing", tmp_path / "icons")
        assert result["ok"] is False

    def test_config_persists_icons_dir(self, tmp_path):
        config_path = tmp_path / "config.json"
        result = do_config(str(tmp_path / "icons"), config_path=config_path)
        assert result["ok"] is True
        assert load_config(config_path)["icons_dir"] == str((tmp_path / "icons").resolve())


# ── Interactive prompt ────────────────────────────────────────────────────────


class TestPromptForConfig:
    def test_collects_answers(self, icons_dir):
        answers = ["Hello", "star.svg", "accent", "my-badge"]
        with patch.object(Prompt, "ask", side_effect=answers), \
                patch.object(IntPrompt, "ask", return_value=128):
            config = prompt_for_config(icons_dir)
        assert config == BadgeConfig(
            text="Hello", color="accent", output="my-badge.png", size=128, icon="star.svg"
        )

    def test_reprompts_blank_text(self, icons_dir):
        answers = ["   ", "Hello", "heart.svg", "primary", "badge"]
        with patch.object(Prompt, "ask", side_effect=answers) as ask, \
                patch.object(IntPrompt, "ask", return_value=200):
            config = prompt_for_config(icons_dir)
        assert config.text == "Hello"
        assert ask.call_count == 5

    def test_icon_question_offers_none(self, icons_dir):
        answers = ["Hello", "star.svg", "primary", "badge"]
        with patch.object(Prompt, "ask", side_effect=answers) as ask, \
                patch.object(IntPrompt, "ask", return_value=200):
            prompt_for_config(icons_dir)
        icon_call = ask.call_args_list[1]
        assert icon_call.kwargs["default"] == "none"
        assert icon_call.kwargs["choices"] == ["none", "heart.svg", "star.svg"]

    def test_none_answer_means_no_icon(self, icons_dir):
        answers = ["Hello", "none", "primary", "badge"]
        with patch.object(Prompt, "ask", side_effect=answers), \
                patch.object(IntPrompt, "ask", return_value=200):
            config = prompt_for_config(icons_dir)
        assert config.icon is None

    def test_blank_icon_answer_means_no_icon(self, icons_dir, monkeypatch):
        replies = iter(["Hello", "", "primary", "badge", "200"])
        monkeypatch.setattr("builtins.input", lambda *args, **kwargs: next(replies))
        config = prompt_for_config(icons_dir)
        assert config.icon is None
        assert config.text == "Hello"
        assert config.size == 200

    def test_no_icons_skips_icon_question(self, tmp_path):
        answers = ["Hello", "warning", "badge"]
        with patch.object(Prompt, "ask", side_effect=answers), \
                patch.object(IntPrompt, "ask", return_value=200):
            config = prompt_for_config(tmp_path / "empty")
        assert config.icon is None
        assert config.color == "warning"

    def test_reprompts_non_positive_size(self, icons_dir):
        answers = ["Hello", "star.svg", "primary", "badge"]
        with patch.object(Prompt, "ask", side_effect=answers), \
                patch.object(IntPrompt, "ask", side_effect=[0, -5, 64]):
            config = prompt_for_config(icons_dir)
        assert config.size == 64


# ── main ──────────────────────────────────────────────────────────────────────


class TestMain:
    def test_create_writes_file(self, tmp_path):
        output = tmp_path / "main.png"
        main(["create", "--text", "Hi", "--color", "secondary", "--output", str(output)])
        assert output.exists()

    def test_invalid_color_exits_nonzero(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["create", "--text", "Hi", "--color", "plaid", "--output", str(tmp_path / "x.png")])
        assert excinfo.value.code == 1

    def test_prompts_without_text(self, tmp_path, icons_dir, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = BadgeConfig(text="Hi", color="primary", output="prompted.png", size=64)
        with patch("circle_badge.cli.prompt_for_config", return_value=config) as prompt:
            main(["create", "--icons-dir", str(icons_dir)])
        prompt.assert_called_once_with(Path(str(icons_dir)))
        assert (tmp_path / "prompted.png").exists()

    def test_blank_text_rejected(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["create", "--text", "  ", "--output", str(tmp_path / "x.png")])
        assert excinfo.value.code == 2
        assert not (tmp_path / "x.png").exists()

    def test_colors_command(self, capsys):
        main(["colors"])
        assert "primary" in capsys.readouterr().out

    def test_icons_without_subcommand_lists(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch("circle_badge.cli.get_icons_dir", return_value=tmp_path / "icons"):
            main(["icons"])
