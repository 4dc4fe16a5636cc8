"""
CLI entrypoint for lexsimplify.
"""

from __future__ import annotations

from typing import NoReturn, Optional, Tuple

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from .config import Config
from .constants import DEFAULT_TOP_K
from .errors import LexSimplifyError
from .logging_utils import configure_logging, get_logger
from .pipeline import (
    contains_word,
    load_restricted_vocabulary,
    load_vector_store,
    process_text,
    size,
)
from .similarity import rank_nearest
from .substitution import substitute
from .vector_store import EmbeddingStore, RestrictedVocabulary


app = typer.Typer(help="Simplify text by mapping words onto a restricted vocabulary with word embeddings")
console = Console()
logger = get_logger(__name__)


def _progress() -> Progress:
    return Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    )


def _make_config(
    embeddings: Optional[str],
    vocabulary: Optional[str],
    require_vocabulary: bool = True,
) -> Config:
    cfg = Config()
    if embeddings:
        cfg.embeddings_path = embeddings
    if vocabulary:
        cfg.vocabulary_path = vocabulary
    cfg.validate(require_embeddings=True, require_vocabulary=require_vocabulary)
    configure_logging(cfg.log_level)
    return cfg


def _load_embeddings(cfg: Config) -> EmbeddingStore:
    with _progress() as progress:
        task = progress.add_task("Loading embeddings...", total=None)

        def on_progress(done: int, total: int) -> None:
            progress.update(task, completed=done, total=total)

        store = load_vector_store(
            cfg.embeddings_path,
            dim=cfg.embedding_dim,
            delimiter=cfg.field_delimiter,
            progress_callback=on_progress,
        )
    console.print(f"[green]Embeddings loaded:[/green] {size(store)} words")
    return store


def _load_stores(cfg: Config) -> Tuple[EmbeddingStore, RestrictedVocabulary]:
    store = _load_embeddings(cfg)
    vocabulary = load_restricted_vocabulary(cfg.vocabulary_path, store)
    console.print(
        f"[green]Restricted vocabulary loaded:[/green] {size(vocabulary)} words "
        f"({vocabulary.skipped} without embeddings skipped)"
    )
    return store, vocabulary


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(code=1)


EmbeddingsOption = typer.Option(
    None, "--embeddings", "-e", help="Embeddings file (defaults to LEXSIMPLIFY_EMBEDDINGS_PATH)."
)
VocabularyOption = typer.Option(
    None, "--vocabulary", "-v", help="Restricted word list (defaults to LEXSIMPLIFY_VOCABULARY_PATH)."
)


@app.command()
def simplify(
    input_path: str = typer.Argument(..., help="Text file to simplify."),
    output_path: str = typer.Argument(..., help="Where to write the simplified text."),
    embeddings: Optional[str] = EmbeddingsOption,
    vocabulary: Optional[str] = VocabularyOption,
    batch_size: Optional[int] = typer.Option(
        None, "--batch-size", "-n", help="Tokens per concurrent batch (defaults to config)."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Maximum concurrent batches (defaults to config)."
    ),
) -> None:
    """
    Replace every word outside the restricted vocabulary with its closest
    restricted word and write the result.
    """
    try:
        cfg = _make_config(embeddings, vocabulary)
        if batch_size is not None:
            cfg.batch_size = batch_size
        if workers is not None:
            cfg.max_workers = workers
        cfg.validate(require_embeddings=True, require_vocabulary=True)

        console.print("[bold cyan]Starting simplification...[/bold cyan]")
        console.print(f"[bold]Input:[/bold] {input_path}")
        console.print(f"[bold]Output:[/bold] {output_path}")

        store, restricted = _load_stores(cfg)

        with _progress() as progress:
            task = progress.add_task("Simplifying...", total=None)

            def on_progress(done: int, total: int) -> None:
                progress.update(task, completed=done, total=total)

            written = process_text(
                input_path,
                output_path,
                store,
                restricted,
                batch_size=cfg.batch_size,
                max_workers=cfg.max_workers,
                progress_callback=on_progress,
            )
    except (LexSimplifyError, ValueError) as exc:
        _fail(exc)

    console.print(f"[bold green]Word replacement completed:[/bold green] {written} tokens written to {output_path}")


@app.command()
def contains(
    word: str = typer.Argument(..., help="Word to look up (case-sensitive)."),
    vocabulary_only: bool = typer.Option(
        False, "--vocabulary-only", help="Search the restricted vocabulary instead of the embeddings."
    ),
    embeddings: Optional[str] = EmbeddingsOption,
    vocabulary: Optional[str] = VocabularyOption,
) -> None:
    """
    Report whether a word is present in the embeddings or the restricted vocabulary.
    """
    try:
        cfg = _make_config(embeddings, vocabulary, require_vocabulary=vocabulary_only)
        if vocabulary_only:
            _, store = _load_stores(cfg)
            name = "restricted vocabulary"
        else:
            store = _load_embeddings(cfg)
            name = "embeddings"
    except (LexSimplifyError, ValueError) as exc:
        _fail(exc)

    if contains_word(store, word):
        console.print(f"[green]{word}[/green] was found in {name}")
    else:
        console.print(f"[yellow]{word}[/yellow] was not found in {name}")


@app.command()
def stats(
    embeddings: Optional[str] = EmbeddingsOption,
    vocabulary: Optional[str] = VocabularyOption,
) -> None:
    """
    Show the size of both stores.
    """
    try:
        cfg = _make_config(embeddings, vocabulary)
        store, restricted = _load_stores(cfg)
    except (LexSimplifyError, ValueError) as exc:
        _fail(exc)

    table = Table(title="Loaded stores")
    table.add_column("Store", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Dimension", justify="right")
    table.add_row("Embeddings", str(size(store)), str(store.dim))
    table.add_row("Restricted vocabulary", str(size(restricted)), str(restricted.dim))
    console.print(table)


@app.command()
def nearest(
    word: str = typer.Argument(..., help="Word whose closest restricted words to list."),
    top_k: int = typer.Option(DEFAULT_TOP_K, "--top-k", "-k", help="Number of results to show."),
    embeddings: Optional[str] = EmbeddingsOption,
    vocabulary: Optional[str] = VocabularyOption,
) -> None:
    """
    List the restricted words closest to a word, with cosine similarities.
    """
    try:
        cfg = _make_config(embeddings, vocabulary)
        store, restricted = _load_stores(cfg)
        vector = store.get_embedding(word)
        ranked = rank_nearest(vector, restricted, k=top_k) if vector is not None else []
    except (LexSimplifyError, ValueError) as exc:
        _fail(exc)

    if vector is None:
        console.print(f"[yellow]{word}[/yellow] has no embedding; it is passed through unchanged")
        return

    table = Table(title=f"Closest restricted words to '{word}'")
    table.add_column("#", justify="right")
    table.add_column("Word", style="cyan")
    table.add_column("Cosine similarity", justify="right")
    for rank, (candidate, score) in enumerate(ranked, start=1):
        table.add_row(str(rank), candidate, f"{score:.4f}")
    console.print(table)
    console.print(f"[bold]Replacement:[/bold] {substitute(word, store, restricted)}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
