# src/brand_check/cli.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Optional

import typer

from .brand.brand_models import MatchResult
from .brand.detector import check_brand_mention
from .config import settings

app = typer.Typer(help="Détection floue d'une marque dans une réponse de LLM.", no_args_is_help=True)


def _print_result(result: MatchResult, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(result.model_dump(), ensure_ascii=False))
    elif result.error:
        typer.echo(f"⚠️  {result.error}")
    elif result.mentioned:
        typer.echo(f"✅ Marque mentionnée (token #{result.position})")
    else:
        typer.echo("❌ Marque non mentionnée")
    if result.error:
        raise typer.Exit(code=1)


@app.command("match")
def match_cmd(
    brand: str = typer.Argument(..., help="Nom de la marque"),
    text: Optional[str] = typer.Argument(None, help="Texte à analyser"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Lire le texte depuis un fichier"),
    fold_accents: bool = typer.Option(settings.FOLD_ACCENTS, "--fold-accents/--no-fold-accents", help="Translittérer en ASCII avant comparaison"),
    as_json: bool = typer.Option(False, "--json", help="Sortie JSON"),
):
    """Analyse un texte (ou un fichier) sans appeler le modèle."""
    if file is not None:
        if not file.exists():
            typer.echo(f"⚠️  Fichier introuvable : {file}")
            raise typer.Exit(code=1)
        text = file.read_text(encoding="utf-8")
    _print_result(check_brand_mention(text, brand, fold_accents=fold_accents), as_json)


@app.command("ask")
def ask_cmd(
    prompt: str = typer.Argument(..., help="Prompt envoyé au modèle"),
    brand: str = typer.Option(..., "--brand", "-b", help="Nom de la marque"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Modèle Gemini"),
    as_json: bool = typer.Option(False, "--json", help="Sortie JSON"),
):
    """Interroge Gemini puis cherche la marque dans la réponse."""
    from .models import get_llm_client

    client = get_llm_client("gemini", model)
    answer = client.answer(prompt, temperature=settings.TEMPERATURE)
    if not as_json:
        typer.echo(answer)
        typer.echo("---")
    _print_result(check_brand_mention(answer, brand, fold_accents=settings.FOLD_ACCENTS), as_json)


if __name__ == "__main__":
    app()
