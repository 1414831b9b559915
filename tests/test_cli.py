import json

from typer.testing import CliRunner

from brand_check.cli import app

runner = CliRunner()


def test_match_found():
    result = runner.invoke(app, ["match", "Nike", "I love Nike shoes"])
    assert result.exit_code == 0
    assert "#3" in result.output


def test_match_json():
    result = runner.invoke(app, ["match", "Nike", "completely unrelated text here", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"mentioned": False, "position": None, "error": None}


def test_match_from_file(tmp_path):
    f = tmp_path / "answer.txt"
    f.write_text("Top picks: Adidas, Nikee, Puma.", encoding="utf-8")
    result = runner.invoke(app, ["match", "Nike", "--file", str(f), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["position"] == 4


def test_match_missing_file(tmp_path):
    result = runner.invoke(app, ["match", "Nike", "--file", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1


def test_match_error_exit_code():
    result = runner.invoke(app, ["match", "Nike"])
    assert result.exit_code == 1
    assert "Model output is missing or invalid." in result.output


class FakeClient:
    name = "fake"
    model = "fake-model"

    def answer(self, prompt, temperature=0.0):
        return "I love Nike shoes"


def test_ask(monkeypatch):
    asked = []

    def factory(provider, model=None):
        asked.append((provider, model))
        return FakeClient()

    monkeypatch.setattr("brand_check.models.get_llm_client", factory)
    result = runner.invoke(app, ["ask", "Best running shoes?", "--brand", "Nike", "--model", "gemini-test"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "I love Nike shoes"
    assert lines[1] == "---"
    assert "#3" in lines[2]
    assert asked == [("gemini", "gemini-test")]


def test_fold_accents_switch():
    # "deja" vs "déjà" : distance 2, au-dessus du seuil 1 sans translittération
    folded = runner.invoke(app, ["match", "Déjà", "deja vu", "--fold-accents", "--json"])
    assert json.loads(folded.output)["position"] == 1
    plain = runner.invoke(app, ["match", "Déjà", "deja vu", "--no-fold-accents", "--json"])
    assert json.loads(plain.output)["mentioned"] is False
