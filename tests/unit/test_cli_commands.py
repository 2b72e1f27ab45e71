"""CLI 명령 단위 테스트"""

import json

import pytest
from cli.commands import CLI


@pytest.fixture
def history_file(tmp_path):
    path = tmp_path / "draws.json"
    path.write_text(json.dumps([
        [4, 5, 30, 33, 41, 52],
        [7, 14, 23, 38, 46, 52],
    ]), encoding="utf-8")
    return str(path)


class TestGenerateCommand:
    """generate 명령 테스트"""

    def test_json_output(self, capsys, history_file):
        CLI().run(["generate", "--history", history_file, "--output", "json"])
        data = json.loads(capsys.readouterr().out)

        assert len(data["games"]) == 3
        numbers = [n for game in data["games"] for n in game["combination"]]
        assert len(set(numbers)) == 18

    def test_text_output(self, capsys, history_file):
        CLI().run(["generate", "--history", history_file, "--count", "2"])
        out = capsys.readouterr().out

        assert "메가세나 추천 번호:" in out
        assert "#01" in out
        assert "#02" in out

    def test_missing_history_prints_notice(self, capsys, tmp_path):
        CLI().run(["generate", "--history", str(tmp_path / "nope.json"), "--output", "json"])
        out = capsys.readouterr().out

        assert out.startswith("주의:")
        data = json.loads(out.split("\n", 1)[1])
        assert len(data["games"]) == 3

    def test_invalid_count(self, capsys, history_file):
        CLI().run(["generate", "--history", history_file, "--count", "0"])
        assert "입력 오류" in capsys.readouterr().out

    def test_invalid_max_attempts(self, capsys, history_file):
        CLI().run(["generate", "--history", history_file, "--max-attempts", "0"])
        assert "설정 오류" in capsys.readouterr().out

    def test_allow_overlap(self, capsys, history_file):
        CLI().run([
            "generate", "--history", history_file, "--count", "12",
            "--allow-overlap", "--max-attempts", "100", "--output", "json"
        ])
        data = json.loads(capsys.readouterr().out)

        assert len(data["games"]) == 12
        assert data["is_partial"] is False

    def test_save(self, capsys, history_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        CLI().run(["generate", "--history", history_file, "--output", "json", "--save"])

        saved = list(tmp_path.glob("games_*.json"))
        assert len(saved) == 1
        assert len(json.loads(saved[0].read_text(encoding="utf-8"))["games"]) == 3


class TestHistoryCommand:
    """history 명령 테스트"""

    def test_text_summary(self, capsys, history_file):
        CLI().run(["history", "--history", history_file])
        out = capsys.readouterr().out

        assert "과거 당첨 데이터: 2회차" in out
        assert "직전 회차: [7, 14, 23, 38, 46, 52]" in out

    def test_json_summary(self, capsys, history_file):
        CLI().run(["history", "--history", history_file, "--output", "json"])
        data = json.loads(capsys.readouterr().out)

        assert data["total_draws"] == 2
        assert data["hottest"][0] == {"number": 52, "frequency": 2}

    def test_no_command_prints_help(self, capsys):
        CLI().run([])
        assert "usage" in capsys.readouterr().out
