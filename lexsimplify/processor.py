"""
Concurrent batch text simplification.

Tokens are split into contiguous batches, each batch is simplified by its own
task on a thread pool, and the batch results are concatenated back in their
original order.
"""

from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Sequence, TypeVar

from .constants import DEFAULT_BATCH_SIZE, OUTPUT_SEPARATOR
from .data_loader import PathLike, load_text, write_text_atomic
from .errors import ProcessingError
from .logging_utils import get_logger
from .substitution import WordSubstitutionPolicy
from .vector_store.base import WordVectorStore


logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

ProgressCallback = Callable[[int, int], None]


def tokenize(text: str) -> List[str]:
    """Split on runs of whitespace; empty tokens are dropped."""
    return text.split()


def create_batches(items: Sequence[T], batch_size: int) -> List[List[T]]:
    if batch_size < 1:
        raise ValueError(f"Batch size must be positive, got {batch_size}.")
    return [
        list(items[batch_start:batch_start + batch_size])
        for batch_start in range(0, len(items), batch_size)
    ]


def parallel_map_ordered(
    func: Callable[[T], R],
    batches: Sequence[T],
    max_workers: Optional[int] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> List[R]:
    """
    Apply ``func`` to every batch concurrently and return the results in
    batch order.

    If any task raises, the remaining tasks are cancelled and the failure is
    re-raised as :class:`ProcessingError`.
    """
    total = len(batches)
    results: List[Optional[R]] = [None] * total
    if total == 0:
        return []

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lexsimplify") as pool:
        futures = {pool.submit(func, batch): index for index, batch in enumerate(batches)}
        pending = set(futures)
        done_count = 0
        while pending:
            done, pending = wait(pending, return_when=FIRST_EXCEPTION)
            for future in done:
                index = futures[future]
                exc = future.exception()
                if exc is not None:
                    for other in pending:
                        other.cancel()
                    logger.error("Batch %d of %d failed: %s", index + 1, total, exc)
                    raise ProcessingError(f"Batch {index + 1} of {total} failed: {exc}") from exc
                results[index] = future.result()
                done_count += 1
                logger.debug("Batch %d of %d done", index + 1, total)
                if progress_callback is not None:
                    progress_callback(done_count, total)

    return results  # type: ignore[return-value]


class ConcurrentTextProcessor:
    def __init__(
        self,
        source_store: WordVectorStore,
        restricted_vocabulary: WordVectorStore,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_workers: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"Batch size must be positive, got {batch_size}.")
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"Worker count must be positive, got {max_workers}.")
        self.policy = WordSubstitutionPolicy(source_store, restricted_vocabulary)
        self.batch_size = batch_size
        self.max_workers = max_workers
        self.progress_callback = progress_callback

    def process_batch(self, batch: Sequence[str]) -> List[str]:
        return [self.policy.substitute(word) for word in batch]

    def process_tokens(self, tokens: Sequence[str]) -> List[str]:
        batches = create_batches(tokens, self.batch_size)
        logger.info(
            "Processing %d tokens in %d batches (batch_size=%d, max_workers=%s)",
            len(tokens),
            len(batches),
            self.batch_size,
            self.max_workers or "default",
        )

        processed: List[str] = []
        for batch_result in parallel_map_ordered(
            self.process_batch,
            batches,
            max_workers=self.max_workers,
            progress_callback=self.progress_callback,
        ):
            processed.extend(batch_result)

        if len(processed) != len(tokens):
            raise ProcessingError(
                f"Processed {len(processed)} tokens but received {len(tokens)}."
            )
        return processed

    def process_text(self, input_path: PathLike, output_path: PathLike) -> int:
        """
        Simplify the text of ``input_path`` and write it to ``output_path`` as
        one line of space-separated tokens.

        Returns:
            Number of tokens written.

        Raises:
            LoadError: The input file could not be read.
            ProcessingError: Simplification or writing failed. The output file
                is left untouched.
        """
        tokens = tokenize(load_text(input_path))
        processed = self.process_tokens(tokens)

        try:
            write_text_atomic(output_path, OUTPUT_SEPARATOR.join(processed))
        except OSError as exc:
            logger.error("Could not write '%s': %s", output_path, exc)
            raise ProcessingError(f"Could not write '{output_path}': {exc}") from exc

        logger.info("Wrote %d tokens to '%s'", len(processed), output_path)
        return len(processed)
