"""Tests for the command line entry point."""

import json

import pytest

from conftest import FakeTranslator
from parrot_translate import main as cli
from parrot_translate.config import ProviderType
from parrot_translate.translator.base import ProviderError
from parrot_translate.translator.orchestrator import LookupSession


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("YOUDAO_APP_KEY", "key")
    monkeypatch.setenv("YOUDAO_APP_SECRET", "secret")
    for var in ["BAIDU_APP_ID", "BAIDU_APP_SECRET", "TENCENT_SECRET_ID", "TENCENT_SECRET_KEY", "CAIYUN_TOKEN"]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_session(monkeypatch):
    """Patch the CLI to build sessions around a scripted primary provider."""
    created = []

    def install(*responses):
        def factory(config, compact=False):
            primary = FakeTranslator(ProviderType.YOUDAO, *responses)
            session = LookupSession(config, primary=primary, enrichments=[], compact=compact)
            created.append(session)
            return session

        monkeypatch.setattr(cli, "LookupSession", factory)
        return created

    return install


class TestMain:
    def test_prints_sections(self, credentials, fake_session, youdao_good, capsys):
        fake_session(youdao_good)

        assert cli.main(["good"]) == 0

        out = capsys.readouterr().out
        assert "Translation" in out
        assert "Details" in out
        assert "[ 复数 goods   比较级 better   最高级 best ]" in out
        assert "[ɡʊd]" in out

    def test_json_output(self, credentials, fake_session, youdao_good, capsys):
        fake_session(youdao_good)

        assert cli.main(["good", "--json"]) == 0

        sections = json.loads(capsys.readouterr().out)
        assert sections[0]["kind"] == "Translation"
        assert sections[0]["items"][0]["title"] == "好"
        assert sections[1]["title"] == "Details"

    def test_failure_exit_code(self, credentials, fake_session, capsys):
        fake_session(ProviderError(ProviderType.YOUDAO, "202", "Signature check failed"))

        assert cli.main(["good"]) == 1

        err = capsys.readouterr().err
        assert "code: 202" in err
        assert "https://github.com/Haojen/raycast-Parrot" in err

    def test_missing_credentials(self, monkeypatch, capsys):
        monkeypatch.delenv("YOUDAO_APP_KEY", raising=False)
        monkeypatch.delenv("YOUDAO_APP_SECRET", raising=False)

        assert cli.main(["good"]) == 1
        assert "YOUDAO_APP_KEY" in capsys.readouterr().err

    def test_language_conflict(self, credentials, capsys):
        assert cli.main(["good", "--lang1", "en", "--lang2", "en"]) == 1
        assert "Language Conflict" in capsys.readouterr().err

    def test_auto_lookup_suppressed_for_repeated_text(
        self, credentials, fake_session, youdao_good, tmp_path
    ):
        created = fake_session(youdao_good)
        history_file = str(tmp_path / "history.json")

        assert cli.main(["good", "--auto", "--history-file", history_file]) == 0
        assert cli.main(["good", "--auto", "--history-file", history_file]) == 0

        assert len(created) == 1

    def test_multi_word_text_joined(self, credentials, fake_session, youdao_sentence):
        created = fake_session(youdao_sentence)

        assert cli.main(["how", "are", "you", "today"]) == 0

        assert created[0].primary.calls[0].word == "how are you today"
