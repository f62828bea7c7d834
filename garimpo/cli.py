"""Interface de linha de comando para operar o Garimpo."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from garimpo.container import ExtractionContainer, build_container
from garimpo.domain import ExtractionReport, LoadedConfigFile
from garimpo.settings import get_log_level


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Garimpo - extração de valores de páginas por seletores"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser(
        "run", help="Extrai os valores de todas as páginas configuradas"
    )
    run.add_argument(
        "--once",
        action="store_true",
        help="Executa uma única vez, sem perguntar se deve repetir",
    )
    run.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Quantidade de páginas processadas em paralelo",
    )

    validate = subparsers.add_parser(
        "validate", help="Valida os arquivos de configuração sem acessar as páginas"
    )

    serve = subparsers.add_parser("serve", help="Inicia a API HTTP de extração")

    for sp in (run, validate):
        sp.add_argument(
            "--config-dir",
            type=Path,
            default=None,
            help="Diretório com os arquivos JSON (padrão: ./config ou GARIMPO_CONFIG_DIR)",
        )

    # Nível de log por subcomando (também lê GARIMPO_LOG_LEVEL)
    for sp in (run, validate, serve):
        sp.add_argument(
            "--log-level",
            default=None,
            help="Nível de log: DEBUG, INFO, WARNING, ERROR (padrão INFO)",
        )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = getattr(args, "log_level", None) or get_log_level()
    handler = RichHandler(console=console, markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    if args.command == "run":
        container = build_container(config_dir=args.config_dir, max_workers=args.workers)
        _run_loop(container, console, once=args.once)
    elif args.command == "validate":
        container = build_container(config_dir=args.config_dir)
        if not _validate(container, console):
            sys.exit(1)
    elif args.command == "serve":
        from garimpo.api import run as run_api

        run_api()
    else:
        raise ValueError(f"Comando desconhecido: {args.command}")


def _run_loop(
    container: ExtractionContainer, console: Console, *, once: bool = False
) -> None:
    """Executa a extração e pergunta se deve repetir, como no modo interativo."""

    while True:
        files = container.config_loader.load()
        if not files:
            console.print("\nNo config files found")
            if once or _confirm(console, "\nExit? (y/n)"):
                return
        else:
            report = _run_once(container, console, files)
            console.print()
            console.print(report.render(), markup=False, highlight=False, soft_wrap=True)
            if once:
                return
        if not _confirm(console, "\nRun again? (y/n)"):
            return


def _run_once(
    container: ExtractionContainer, console: Console, files: List[LoadedConfigFile]
) -> ExtractionReport:
    total = sum(len(config_file.pages) for config_file in files)
    progress_columns = (
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
    )
    with Progress(*progress_columns, console=console, transient=True) as progress:
        task_id = progress.add_task("[cyan]Extraindo páginas", total=total)

        def status_handler(message: str) -> None:
            if message.startswith("Página "):
                progress.advance(task_id)
            progress.console.log(message)

        return container.extraction_service.run(files, status_publisher=status_handler)


def _validate(container: ExtractionContainer, console: Console) -> bool:
    loader = container.config_loader
    files = loader.load()
    for config_file in files:
        console.print(
            f"[green]{config_file.name}: {len(config_file.pages)} página(s) válida(s).[/green]"
        )
    for error in loader.rejected:
        console.print(f"[red]{error.name}: arquivo rejeitado.[/red]")
        console.print(str(error), markup=False, highlight=False)
    if not files and not loader.rejected:
        console.print(
            f"[yellow]Nenhum arquivo de configuração em '{loader.directory}'.[/yellow]"
        )
    return not loader.rejected


def _confirm(console: Console, prompt: str) -> bool:
    try:
        answer = console.input(prompt)
    except EOFError:
        return False
    return answer.strip().lower() == "y"


if __name__ == "__main__":
    main()
