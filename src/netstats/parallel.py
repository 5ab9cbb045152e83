# worker pool helpers shared by the bfs engine and the jaccard ranker.
# both split their work into independent chunks and reduce the partials at the end,
# so all this file does is: chunk, run (inline or on a process pool), check for cancel

import logging
import math
import multiprocessing as mp
from concurrent.futures import ProcessPoolExecutor

logger = logging.getLogger(__name__)

# set once per worker process by _init_worker, read by _run_shared
_SHARED = None


class AnalysisCancelled(RuntimeError):
    """raised when the caller's cancel flag is set between units of work"""


def check_cancel(cancel):

    # cancel is anything with is_set(), threading.Event is the obvious one
    if cancel is not None and cancel.is_set():
        raise AnalysisCancelled("analysis cancelled")


def chunked(items, size):

    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")

    items = list(items)
    return [items[i:i + size] for i in range(0, len(items), size)]


def interleaved(items, size):

    # same number of chunks as chunked(), but strided: items[0::n], items[1::n], ...
    # keeps chunks even when the cost per item shrinks along the list
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")

    items = list(items)
    n_chunks = math.ceil(len(items) / size)
    return [items[k::n_chunks] for k in range(n_chunks)]


def _init_worker(shared):
    global _SHARED
    _SHARED = shared


def _run_shared(fn, chunk):
    return fn(_SHARED, chunk)


def map_chunks(fn, chunks, workers=1, cancel=None, shared=None):
    """
    run fn(chunk) for every chunk and return the partial results in chunk order.

    with shared given the call is fn(shared, chunk) instead. on a process pool shared
    goes to each worker once through the pool initializer, not once per chunk, so put
    the big read-only thing (graph, neighbour map) there and keep fn small and picklable.

    workers <= 1 runs inline.
    """
    chunks = list(chunks)

    if workers is None or workers <= 1 or len(chunks) <= 1:
        partials = []
        for chunk in chunks:
            check_cancel(cancel)
            partials.append(fn(chunk) if shared is None else fn(shared, chunk))
        return partials

    n_workers = min(workers, len(chunks))
    logger.info("running %d chunks on %d workers", len(chunks), n_workers)

    check_cancel(cancel)
    with ProcessPoolExecutor(max_workers=n_workers, mp_context=mp.get_context('spawn'),
                             initializer=_init_worker, initargs=(shared,)) as executor:
        if shared is None:
            futures = [executor.submit(fn, chunk) for chunk in chunks]
        else:
            futures = [executor.submit(_run_shared, fn, chunk) for chunk in chunks]

        partials = []
        try:
            for future in futures:
                check_cancel(cancel)
                partials.append(future.result())
        except AnalysisCancelled:
            for future in futures:
                future.cancel()
            raise

    return partials
