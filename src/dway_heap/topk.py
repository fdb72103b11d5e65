import logging
from typing import Any, Iterable

from src.dway_heap.dway_heap import DHeap

logger = logging.getLogger(__name__)


def get_topk(heap: DHeap, k: int) -> list[Any]:
    """
    Function to get the K smallest elements from a heap.

    The heap itself is left untouched: its live elements are copied into a
    scratch heap with the same branching factor, which is then drained.

    Parameters
    ----------
    heap : DHeap
        A DHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements in ascending order. Fewer than K are returned
        when the heap holds fewer elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = DHeap(heap.to_array(), branching_factor=heap.branching_factor)
    k = min(k, len(scratch))
    logger.debug("Extracting top-%d of %d elements", k, len(scratch))
    return [scratch.delete_min() for _ in range(k)]


def heap_sort(items: Iterable[Any], branching_factor: int = 2) -> list[Any]:
    """
    Sort items in ascending order with a d-ary heap.

    Parameters
    ----------
    items : Iterable[Any]
        Mutually comparable elements.
    branching_factor : int
        Branching factor of the heap used for sorting, by default 2.

    Returns
    -------
    list[Any]
        A new sorted list.
    """
    heap = DHeap(items, branching_factor=branching_factor)
    return [heap.delete_min() for _ in range(len(heap))]
