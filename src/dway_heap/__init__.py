from src.dway_heap.dway_heap import (
    DEFAULT_CAPACITY,
    DHeap,
    first_child_index,
    parent_index,
)
