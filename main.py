from src.dway_heap import DHeap


priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]

# Create a 3-ary heap from an existing collection
print("Creating 3-ary heap...")
heap = DHeap(priorities, branching_factor=3)

print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Minimum: {heap.find_min()}")
print(heap)

# Self-check: 37 generates every residue mod 10000, so this inserts 1..9999
num_items = 10000
check = DHeap()
i = 37
while i != 0:
    check.insert(i)
    i = (i + 37) % num_items

errors = 0
for expected in range(1, num_items):
    if check.delete_min() != expected:
        errors += 1
        print(f"Oops! {expected}")
print(f"Self-check finished with {errors} errors")
