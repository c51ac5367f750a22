import logging

from labelgrid import Series

logging.basicConfig(level=logging.DEBUG)

s = Series([1, 2, 3, 4, 5], index=[10, 20, 30, 40, 50])
print(s)
print()
print(s.describe())
print()

sg = s.groupby([1, 1, 1, 2, 2])
print(sg.get_group(1))
print()
print(sg.sum())
