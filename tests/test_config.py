"""Tests for rcp_palette.core.config — .env discovery and settings resolution."""

import os
from pathlib import Path

import pytest
from rcp_palette.core.config import ConfigError, Settings, find_dotenv, load_settings, read_dotenv


class TestReadDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert read_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert read_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blanks_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert read_dotenv(f) == {'FOO': 'bar'}

    def test_line_without_equals_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert read_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export FOO=bar\n')
        assert read_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        # .git as a file (worktree)
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(repo) is None


class TestLoadSettings:
    @pytest.fixture(autouse=True)
    def _isolated_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)

    def test_defaults(self) -> None:
        s = load_settings(environ={})
        assert s == Settings()

    def test_dotenv_values(self, tmp_path: Path) -> None:
        (tmp_path / '.env').write_text('RCP_PALETTE_FORMAT=json\nRCP_PALETTE_COMMENT=";"\nRCP_PALETTE_NEAREST=0\n')
        s = load_settings(environ={})
        assert s.output_format == 'json'
        assert s.comment_marker == ';'
        assert s.show_nearest is False
        assert s.source is not None and s.source.name == '.env'

    def test_environment_wins_over_dotenv(self, tmp_path: Path) -> None:
        (tmp_path / '.env').write_text('RCP_PALETTE_FORMAT=json\n')
        s = load_settings(environ={'RCP_PALETTE_FORMAT': 'text'})
        assert s.output_format == 'text'

    def test_does_not_touch_os_environ(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('RCP_PALETTE_FORMAT', raising=False)
        (tmp_path / '.env').write_text('RCP_PALETTE_FORMAT=json\n')
        load_settings()
        assert 'RCP_PALETTE_FORMAT' not in os.environ

    def test_explicit_env_file(self, tmp_path: Path) -> None:
        custom = tmp_path / 'custom.env'
        custom.write_text('RCP_PALETTE_NEAREST=false\n')
        s = load_settings(env_file=str(custom), environ={})
        assert s.show_nearest is False
        assert s.source == custom

    def test_missing_env_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_settings(env_file=str(tmp_path / 'nope.env'), environ={})

    def test_bad_format(self) -> None:
        with pytest.raises(ConfigError):
            load_settings(environ={'RCP_PALETTE_FORMAT': 'yaml'})

    def test_bad_bool(self) -> None:
        with pytest.raises(ConfigError):
            load_settings(environ={'RCP_PALETTE_NEAREST': 'maybe'})

    def test_hash_comment_marker_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_settings(environ={'RCP_PALETTE_COMMENT': '#'})

    def test_undecodable_dotenv(self, tmp_path: Path) -> None:
        (tmp_path / '.env').write_bytes(b'RCP_PALETTE_FORMAT=\xff\n')
        with pytest.raises(ConfigError) as exc:
            load_settings(environ={})
        assert 'cannot read' in str(exc.value)

    def test_dotenv_with_bom(self, tmp_path: Path) -> None:
        (tmp_path / '.env').write_bytes(b'\xef\xbb\xbfRCP_PALETTE_FORMAT=json\n')
        assert load_settings(environ={}).output_format == 'json'
