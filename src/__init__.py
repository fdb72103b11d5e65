from src.dway_heap.dway_heap import DHeap
from src.dway_heap.exceptions import (
    HeapError,
    HeapUnderflowError,
    InvalidConfigurationError,
    InvalidIndexError,
)
from src.dway_heap.topk import get_topk, heap_sort
