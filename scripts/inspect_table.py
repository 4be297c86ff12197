import sys

from tab_browser.core.dataset import DatasetStore
from tab_browser.data_io import read_table

file_path = sys.argv[1] if len(sys.argv) > 1 else "../data/example.csv"

rows, headers = read_table(file_path)

store = DatasetStore()
store.set_data(rows, headers)

# Show columns and the types inferred from the first row
print("columns:", list(store.get_column_names()))
print("types:", dict(store.get_column_types()))

# Preview first few rows
print("\nSample rows:")
for row in store.get_data()[:5]:
    print(row)

print("\nNumeric column stats:")
for column in store.get_column_names():
    stats = store.get_basic_stats(column)
    if stats is not None:
        print(column, stats.to_dict())
