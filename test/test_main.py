# test/test_main.py

import io

import main
from core.config_schema import PromptConfig


def interrupted(*args, **kwargs):
    raise KeyboardInterrupt


def test_ctrl_c_ends_demo_without_traceback(monkeypatch, capsys):
    monkeypatch.setattr(main, "load_config", lambda: PromptConfig())
    monkeypatch.setattr(main, "read_custom_nonempty", interrupted)
    assert main.main() == 130
    assert "Goodbye!" in capsys.readouterr().out


def test_closed_input_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(main, "load_config", lambda: PromptConfig())
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main.main() == 1
    assert "[ERROR]" in capsys.readouterr().out


def test_full_questionnaire(monkeypatch, capsys):
    monkeypatch.setattr(main, "load_config", lambda: PromptConfig())
    monkeypatch.setattr("sys.stdin", io.StringIO("Ada\nAda Lovelace\n36\nFemale\n"))
    assert main.main() == 0
    out = capsys.readouterr().out
    assert "give both a given and a family name" in out
    assert "Gender.FEMALE" in out
