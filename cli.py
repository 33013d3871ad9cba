from __future__ import annotations

import asyncio
from typing import List, Optional
import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import SETTINGS
from translator.base import LanguageCodeSet, SimpleTranslateResult
from translator.errors import TranslateError
from translator.factory import build_provider
from translator.languages import AUTO_DETECT, LANGUAGES, get_code, get_language_name
from translator.simple import double_way_translate, multi_way_translate, simple_translate
from utils.logging_config import configure_logging

app = typer.Typer(add_completion=False)
console = Console()


def _run_async(coro):
    return asyncio.run(coro)


def _resolve(code: str, *, allow_auto: bool = True) -> str:
    resolved = get_code(code)
    if not resolved or (resolved == AUTO_DETECT and not allow_auto):
        console.print(f"[red]Unsupported language: {escape(code)}[/red]")
        raise typer.Exit(code=2)
    return resolved


def _label(code: Optional[str]) -> str:
    if not code:
        return "?"
    return f"{get_language_name(code) or code} ({code})"


def _print_result(result: SimpleTranslateResult) -> None:
    console.print(f"[bold]{_label(result.lang_from)} → {_label(result.lang_to)}[/bold]")
    console.print(escape(result.translated_text))
    if result.pronunciation_text:
        console.print(f"[dim]{escape(result.pronunciation_text)}[/dim]")


def _run_translation(coro_factory, proxy: Optional[str]):
    async def runner():
        async with build_provider(SETTINGS.engine, proxy=proxy) as provider:
            return await coro_factory(provider)

    try:
        return _run_async(runner())
    except TranslateError as e:
        logger.debug(f"Translation failed: {e!r}")
        console.print(f"[red]{escape(e.name)}: {escape(e.message)}[/red]")
        raise typer.Exit(code=1)


@app.command(help="Translate text into one target language")
def translate(
    text: str = typer.Argument(...),
    source: str = typer.Option(SETTINGS.default_source_lang, "--from", "-f", help="Source language code or 'auto'"),
    target: str = typer.Option(SETTINGS.default_target_lang, "--to", "-t"),
    proxy: str | None = typer.Option(None, help="Proxy URL for the provider"),
) -> None:
    configure_logging(SETTINGS.log_file, level=SETTINGS.log_level)
    options = LanguageCodeSet(lang_from=_resolve(source), lang_to=_resolve(target, allow_auto=False))
    result = _run_translation(lambda provider: simple_translate(text, options, provider=provider), proxy)
    _print_result(result)


@app.command(help="Translate text into the target language and back")
def both(
    text: str = typer.Argument(...),
    source: str = typer.Option(SETTINGS.default_source_lang, "--from", "-f", help="Source language code or 'auto'"),
    target: str = typer.Option(SETTINGS.default_target_lang, "--to", "-t"),
    proxy: str | None = typer.Option(None, help="Proxy URL for the provider"),
) -> None:
    configure_logging(SETTINGS.log_file, level=SETTINGS.log_level)
    options = LanguageCodeSet(lang_from=_resolve(source), lang_to=_resolve(target, allow_auto=False))
    results = _run_translation(lambda provider: double_way_translate(text, options, provider=provider), proxy)
    if not results:
        console.print("Could not detect the source language")
        return
    for result in results:
        _print_result(result)


@app.command(help="Translate text into several target languages at once")
def multi(
    text: str = typer.Argument(...),
    source: str = typer.Option(SETTINGS.default_source_lang, "--from", "-f", help="Source language code or 'auto'"),
    targets: List[str] = typer.Option(..., "--to", "-t", help="Target language, repeatable"),
    proxy: str | None = typer.Option(None, help="Proxy URL for the provider"),
) -> None:
    configure_logging(SETTINGS.log_file, level=SETTINGS.log_level)
    source_lang = _resolve(source)
    target_langs = [_resolve(target, allow_auto=False) for target in targets]
    results = _run_translation(
        lambda provider: multi_way_translate(text, source_lang, target_langs, provider=provider),
        proxy,
    )

    table = Table("Language", "Translation", "Pronunciation")
    for result in results:
        table.add_row(_label(result.lang_to), escape(result.translated_text), escape(result.pronunciation_text or ""))
    console.print(table)


@app.command(help="List supported language codes")
def languages() -> None:
    table = Table("Code", "Language")
    for code, name in LANGUAGES.items():
        table.add_row(code, name)
    console.print(table)


if __name__ == "__main__":
    app()
