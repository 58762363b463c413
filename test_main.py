import pytest

import config_paths
from main import build_parser, build_state, main, resolve_settings
from pagination import BackEndPaginator, FrontEndPaginator, PageAction
from default_df_initializer import DefaultDfInitializer


DEFAULTS = {"PAGE_ACTION": "native", "PAGE_SIZE": 250, "PAGE_COUNT": None}


def _settings(*argv, cfg=DEFAULTS):
    return resolve_settings(build_parser().parse_args(list(argv)), cfg)


def test_defaults_come_from_config():
    settings = _settings(cfg={"PAGE_ACTION": "custom", "PAGE_SIZE": 20, "PAGE_COUNT": 4})
    assert settings["page_action"] is PageAction.CUSTOM
    assert settings["page_size"] == 20
    assert settings["page_count"] == 4
    assert settings["known_count"] is True


def test_flags_override_config():
    settings = _settings("data.csv", "-m", "none", "-s", "5")
    assert settings["page_action"] is PageAction.NONE
    assert settings["page_size"] == 5


def test_zero_page_count_means_unknown():
    settings = _settings("-m", "custom", "-c", "0")
    assert settings["page_count"] is None
    assert settings["known_count"] is False


@pytest.mark.parametrize("size", ["0", "-3"])
def test_non_positive_page_size_is_rejected(size):
    with pytest.raises(ValueError):
        _settings("-s", size)


@pytest.mark.parametrize("count", ["-1", "-3"])
def test_negative_page_count_is_rejected(count):
    with pytest.raises(ValueError):
        _settings("-m", "custom", "-s", "10", "-c", count)


def test_negative_page_count_fails_the_cli(capsys, monkeypatch, tmp_path):
    monkeypatch.setattr(config_paths, "CONFIG_JSON", str(tmp_path / "missing.json"))
    assert main(["-m", "custom", "-c", "-3"]) == 1
    assert "page count" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv, pager_type, last_page",
    [
        (["-s", "10"], FrontEndPaginator, 4),
        (["-m", "custom", "-s", "10"], BackEndPaginator, 4),
        (["-m", "custom", "-s", "10", "-c", "0"], BackEndPaginator, None),
        (["-m", "custom", "-s", "10", "-c", "2"], BackEndPaginator, 1),
    ],
)
def test_build_state(argv, pager_type, last_page):
    df = DefaultDfInitializer().create(rows=42)
    state = build_state(df, None, _settings(*argv))
    assert isinstance(state.paginator, pager_type)
    assert state.paginator.last_page == last_page


def test_version_flag(capsys):
    assert main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == "0.1.0"


def test_help_flag(capsys):
    assert main(["-h"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_unsupported_file_reports_and_fails(capsys, monkeypatch, tmp_path):
    monkeypatch.setattr(config_paths, "CONFIG_JSON", str(tmp_path / "missing.json"))
    assert main([str(tmp_path / "table.txt")]) == 1
    assert "Unsupported file type" in capsys.readouterr().err
