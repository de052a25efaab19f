"""Locate a table, find the cell under the cursor, add a row below it."""

from tablero import add_row_below, find_cell_at_cursor, find_table_at_cursor

text = "Prices:\n| Item | Price |\n|------|------:|\n| Tea | 3 |"
cursor = text.index("Tea")

table = find_table_at_cursor(text, cursor)
cell = find_cell_at_cursor(table, cursor)
result = add_row_below(text, table, cell.row)

print(result.text)
print("Cursor now at:", result.cursor_pos)
